"""Template renderer for signature previews and import instructions.

Renders with Jinja2 templates shipped in the package. The signature fragment
itself comes from mailsig.renderers.signature and is embedded verbatim; the
templates only provide the surrounding page.
"""

import logging
from pathlib import Path
from typing import Any

from jinja2 import Environment, PackageLoader, select_autoescape
from markupsafe import Markup

from mailsig.guides import get_guides
from mailsig.models.signature import SignatureData
from mailsig.renderers.signature import render

logger = logging.getLogger(__name__)

# Display-only inversion; applied to the wrapper so the fragment is untouched
INVERT_FILTER = "filter: invert(1) hue-rotate(180deg);"
PLACEHOLDER = "Fill in the form to see your signature"


def create_environment() -> Environment:
    """Create the Jinja2 environment for package templates."""
    return Environment(
        loader=PackageLoader("mailsig", "templates"),
        autoescape=select_autoescape(["html", "html.j2", "xml"]),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


class PreviewRenderer:
    """Renders a standalone HTML page previewing a signature.

    Usage:
        renderer = PreviewRenderer()
        page = renderer.render(data, dark=True)
    """

    def __init__(self, environment: Environment | None = None) -> None:
        """Initialize the preview renderer.

        Args:
            environment: Jinja2 environment (defaults to package templates)
        """
        self._env = environment or create_environment()

    def render(
        self,
        data: SignatureData,
        dark: bool = False,
        template_name: str = "preview.html.j2",
    ) -> str:
        """Render the preview page.

        Args:
            data: Signature fields
            dark: Show the signature under a colour inversion filter
            template_name: Template file to use

        Returns:
            HTML page string

        Raises:
            ValueError: If the template cannot be loaded or rendered
        """
        try:
            template = self._env.get_template(template_name)
        except Exception as e:
            logger.error("Failed to load template %s: %s", template_name, e)
            raise ValueError(f"Template not found: {template_name}") from e

        context = self._build_context(data, dark)

        try:
            page = template.render(**context)
        except Exception as e:
            logger.error("Template rendering failed: %s", e)
            raise ValueError(f"Template rendering failed: {e}") from e

        logger.debug("Rendered preview (%d characters, dark=%s)", len(page), dark)
        return page

    def _build_context(self, data: SignatureData, dark: bool) -> dict[str, Any]:
        title = f"Signature preview - {data.name}" if data.name else "Signature preview"
        return {
            "title": title,
            "dark": dark,
            "has_content": data.has_content,
            "fragment": Markup(render(data)),
            "invert_filter": INVERT_FILTER,
            "placeholder": PLACEHOLDER,
        }

    def render_to_file(
        self,
        data: SignatureData,
        output_path: Path,
        dark: bool = False,
    ) -> Path:
        """Render the preview page and write it to a file.

        Args:
            data: Signature fields
            output_path: Path to write output file
            dark: Show the signature under a colour inversion filter

        Returns:
            Path to written file
        """
        content = self.render(data, dark=dark)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(content, encoding="utf-8")
        logger.info("Wrote preview to %s", output_path)

        return output_path


def render_instructions(
    keys: list[str] | None = None,
    environment: Environment | None = None,
) -> str:
    """Render import instructions as markdown.

    Args:
        keys: Mail client keys to include (all when empty)
        environment: Jinja2 environment (defaults to package templates)

    Returns:
        Markdown string with numbered steps per client

    Raises:
        UnknownClientError: If a key has no guide
    """
    guides = get_guides(keys)
    env = environment or create_environment()
    template = env.get_template("instructions.md.j2")
    return template.render(guides=guides)
