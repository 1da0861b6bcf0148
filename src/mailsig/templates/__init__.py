"""mailsig template rendering.

Jinja2-based pages around the signature fragment: the preview page and the
mail client import instructions.
"""

from mailsig.templates.renderer import PreviewRenderer, render_instructions

__all__ = ["PreviewRenderer", "render_instructions"]
