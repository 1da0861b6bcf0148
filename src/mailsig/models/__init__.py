"""mailsig data models.

- SignatureData: Form fields of one email signature
"""

from mailsig.models.signature import SignatureData

__all__ = ["SignatureData"]
