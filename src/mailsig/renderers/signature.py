"""Signature fragment renderer.

Turns SignatureData into an HTML fragment that survives paste into mail
client signature editors. Mail clients strip <style> blocks, class selectors
and flow/flex layout, so the fragment uses a single table with inline styles
only.

The output is deterministic: same input always produces the same bytes.
"""

from mailsig.models.signature import SignatureData

FONT_STACK = "-apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif"
LOGO_ALT = "Company Logo"
LOGO_SIZE = 60

TITLE_SEPARATOR = ", "
CONTACT_SEPARATOR = " • "

_ESCAPE_TABLE = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#039;",
    }
)


def escape_html(text: str) -> str:
    """Escape the five HTML-significant characters in a single pass.

    Examples:
        >>> escape_html("Tom & Jerry <3")
        'Tom &amp; Jerry &lt;3'
        >>> escape_html("&lt;")
        '&amp;lt;'
    """
    return text.translate(_ESCAPE_TABLE)


def title_line(data: SignatureData) -> str:
    """Join the present parts of title and company with a comma."""
    return TITLE_SEPARATOR.join(part for part in (data.title, data.company) if part)


def contact_line(data: SignatureData) -> str:
    """Join phone and "@handle" with a bullet, skipping absent parts."""
    parts: list[str] = []
    if data.phone:
        parts.append(data.phone)
    if data.twitter:
        parts.append(f"@{data.twitter}")
    return CONTACT_SEPARATOR.join(parts)


def _logo_row(data: SignatureData) -> str:
    if not data.logo_url:
        return ""

    img = (
        f'<img src="{escape_html(data.logo_url)}" alt="{LOGO_ALT}" '
        f'width="{LOGO_SIZE}" height="{LOGO_SIZE}" '
        'style="border-radius: 8px; display: block;">'
    )
    if data.website_url:
        cell = (
            f'\n      <a href="{escape_html(data.website_url)}" style="text-decoration: none;">'
            f"\n        {img}"
            "\n      </a>"
        )
    else:
        cell = f"\n      {img}"

    return f'\n  <tr>\n    <td style="padding-bottom: 12px;">{cell}\n    </td>\n  </tr>'


def _text_row(text: str, style: str, bold: bool = False) -> str:
    if not text:
        return ""

    if bold:
        return (
            "\n  <tr>\n    <td>"
            f'\n      <strong style="{style}">{escape_html(text)}</strong>'
            "\n    </td>\n  </tr>"
        )
    return f'\n  <tr>\n    <td style="{style}">\n      {escape_html(text)}\n    </td>\n  </tr>'


def render(data: SignatureData) -> str:
    """Render a signature as an email-safe HTML fragment.

    Rows appear in fixed order (logo, name, title/company, contact) and each
    is emitted only when its content is non-empty. An empty record yields an
    empty table. Never raises.

    Args:
        data: Signature fields

    Returns:
        HTML fragment string
    """
    rows = "".join(
        (
            _logo_row(data),
            _text_row(data.name, "font-size: 16px; color: #1a1a1a;", bold=True),
            _text_row(title_line(data), "font-size: 14px; color: #6b7280;"),
            _text_row(contact_line(data), "font-size: 14px; color: #6b7280; padding-top: 4px;"),
        )
    )
    return (
        f'<table cellpadding="0" cellspacing="0" border="0" style="font-family: {FONT_STACK};">'
        f"{rows}\n</table>"
    )
