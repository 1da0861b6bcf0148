"""mailsig - Email signature generator.

mailsig turns a handful of fields (name, title, company, phone, social
handle, website, logo) into an HTML fragment that can be pasted into the
signature editor of Gmail, macOS Mail or iOS Mail.

Core principles:
- Mail-client safety: table layout and inline styles only
- Determinism: same fields always produce byte-identical output
- Totality: rendering accepts any combination of fields and never fails
"""

__version__ = "0.1.0"
__author__ = "mailsig Contributors"
