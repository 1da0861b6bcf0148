"""Clipboard export of a rendered signature.

Paste targets pick the representation they understand, so the export carries
both the HTML fragment (text/html) and a plain-text fallback (text/plain).
Writing to the system clipboard is left to the platform; this module builds
the payload and can persist it as a file pair.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from mailsig.errors import ExportError
from mailsig.models.signature import SignatureData
from mailsig.renderers.signature import contact_line, render, title_line

logger = logging.getLogger(__name__)

HTML_MIME = "text/html"
TEXT_MIME = "text/plain"


@dataclass(frozen=True)
class ClipboardPayload:
    """Rich and plain representations of one signature.

    Attributes:
        html: Signature fragment as returned by render()
        text: Plain-text fallback
    """

    html: str
    text: str

    def mime_types(self) -> dict[str, str]:
        """Return the payload keyed by MIME type."""
        return {HTML_MIME: self.html, TEXT_MIME: self.text}

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return self.mime_types()


def render_plain_text(data: SignatureData) -> str:
    """Render the signature as plain text, one line per present row.

    Lines: name, title/company, phone/handle, website. No escaping is applied.

    Examples:
        >>> render_plain_text(SignatureData(name="Ada", phone="555", twitter="ada"))
        'Ada\\n555 • @ada'
    """
    lines = [data.name, title_line(data), contact_line(data), data.website_url]
    return "\n".join(line for line in lines if line)


def build_clipboard_payload(data: SignatureData) -> ClipboardPayload:
    """Build the clipboard payload for a signature.

    Args:
        data: Signature fields

    Returns:
        ClipboardPayload with HTML and plain-text representations

    Raises:
        ExportError: If the signature has no name
    """
    if not data.has_required_fields:
        raise ExportError("Name is required to export a signature", field_name="name")

    return ClipboardPayload(html=render(data), text=render_plain_text(data))


def write_export(
    payload: ClipboardPayload,
    directory: Path,
    stem: str = "signature",
) -> tuple[Path, Path]:
    """Write the payload as <stem>.html and <stem>.txt.

    Args:
        payload: Clipboard payload to persist
        directory: Target directory (created if missing)
        stem: File name without extension

    Returns:
        Tuple of (html_path, text_path)
    """
    directory.mkdir(parents=True, exist_ok=True)

    html_path = directory / f"{stem}.html"
    text_path = directory / f"{stem}.txt"
    html_path.write_text(payload.html, encoding="utf-8")
    text_path.write_text(payload.text, encoding="utf-8")

    logger.info("Wrote signature export to %s and %s", html_path, text_path)
    return html_path, text_path
