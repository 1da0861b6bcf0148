"""Signature renderers.

- signature: HTML fragment for mail client signature editors
"""

from mailsig.renderers.signature import escape_html, render

__all__ = ["escape_html", "render"]
