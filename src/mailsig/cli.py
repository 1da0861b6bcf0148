"""mailsig CLI interface.

Commands:
- render: Print the signature as HTML, plain text, or a clipboard JSON payload
- export: Write the signature as an .html/.txt pair for clipboard import
- preview: Write an HTML page previewing the signature
- instructions: Show how to paste the signature into a mail client
- init: Initialize mailsig configuration
- validate: Check the configured signature fields

Global options:
- --config: Path to configuration file
- --verbose: Enable verbose output with timestamps
- --quiet: Suppress info messages
- --ci: JSON log lines
- --version: Show version and exit
"""

import json
import logging
from pathlib import Path
from typing import Annotated
from urllib.parse import urlparse

import typer

from mailsig import __version__
from mailsig.config import VALID_FORMATS, MailsigConfig, create_default_config, load_config
from mailsig.errors import ExportError, UnknownClientError
from mailsig.models.signature import SignatureData
from mailsig.utils.logging import configure_from_cli, get_logger

app = typer.Typer(
    name="mailsig",
    help="Generate email-client-safe HTML signatures",
    add_completion=False,
    no_args_is_help=True,
)

# Global state
_config: MailsigConfig | None = None
_logger = get_logger()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"mailsig {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration file",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose output with timestamps"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Suppress info messages (warnings and errors only)"),
    ] = False,
    ci: Annotated[
        bool,
        typer.Option("--ci", help="Enable CI mode with JSON log output"),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
) -> None:
    """mailsig - email signature generator.

    Fill in your details once, then paste the generated signature into
    Gmail, macOS Mail or iOS Mail.
    """
    global _config

    configure_from_cli(verbose=verbose, quiet=quiet, ci=ci)

    try:
        _config = load_config(config_path=config)
        if _config.config_path:
            _logger.debug(f"Loaded config from: {_config.config_path}")
    except FileNotFoundError as e:
        _logger.error(str(e))
        raise typer.Exit(1)
    except Exception as e:
        _logger.error(f"Failed to load config: {e}")
        raise typer.Exit(1)


def _current_config() -> MailsigConfig:
    return _config if _config is not None else MailsigConfig()


# =============================================================================
# Shared field options
# =============================================================================

NameOption = Annotated[str | None, typer.Option("--name", help="Your name")]
TitleOption = Annotated[str | None, typer.Option("--title", help="Job title")]
CompanyOption = Annotated[str | None, typer.Option("--company", help="Company name")]
PhoneOption = Annotated[str | None, typer.Option("--phone", help="Phone number")]
TwitterOption = Annotated[
    str | None,
    typer.Option("--twitter", help="Twitter / X handle without the leading @"),
]
WebsiteOption = Annotated[
    str | None,
    typer.Option("--website", help="Website URL the logo links to"),
]
LogoOption = Annotated[str | None, typer.Option("--logo", help="Hosted logo image URL")]


def _build_signature(
    name: str | None,
    title: str | None,
    company: str | None,
    phone: str | None,
    twitter: str | None,
    website: str | None,
    logo: str | None,
) -> SignatureData:
    """Apply CLI overrides to the configured signature."""
    return _current_config().signature.replace(
        name=name,
        title=title,
        company=company,
        phone=phone,
        twitter=twitter,
        website_url=website,
        logo_url=logo,
    )


# =============================================================================
# render command
# =============================================================================


@app.command()
def render(
    name: NameOption = None,
    title: TitleOption = None,
    company: CompanyOption = None,
    phone: PhoneOption = None,
    twitter: TwitterOption = None,
    website: WebsiteOption = None,
    logo: LogoOption = None,
    format: Annotated[
        str | None,
        typer.Option("--format", "-f", help="Output format: html, text, json"),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write to file instead of stdout"),
    ] = None,
) -> None:
    """Render the signature.

    Fields come from the config file's `signature` block; options override
    them for this run.
    """
    from mailsig.export import ClipboardPayload, render_plain_text
    from mailsig.renderers.signature import render as render_html

    output_format = format or _current_config().output.format
    if output_format not in VALID_FORMATS:
        _logger.error(f"Invalid format: {output_format}. Valid: {', '.join(sorted(VALID_FORMATS))}")
        raise typer.Exit(1)

    data = _build_signature(name, title, company, phone, twitter, website, logo)
    if not data.has_required_fields:
        _logger.warning("Signature has no name")

    if output_format == "html":
        content = render_html(data)
    elif output_format == "text":
        content = render_plain_text(data)
    else:
        payload = ClipboardPayload(html=render_html(data), text=render_plain_text(data))
        content = json.dumps(payload.to_dict(), indent=2, ensure_ascii=False)

    if output is None:
        typer.echo(content)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(content, encoding="utf-8")
    _logger.structured(
        logging.INFO,
        f"Wrote {output_format} signature to {output}",
        path=str(output),
        format=output_format,
    )


# =============================================================================
# export command
# =============================================================================


@app.command()
def export(
    name: NameOption = None,
    title: TitleOption = None,
    company: CompanyOption = None,
    phone: PhoneOption = None,
    twitter: TwitterOption = None,
    website: WebsiteOption = None,
    logo: LogoOption = None,
    directory: Annotated[
        Path | None,
        typer.Option("--dir", "-d", help="Output directory (overrides config)"),
    ] = None,
) -> None:
    """Export the signature for clipboard import.

    Writes the HTML fragment and its plain-text fallback side by side.
    A name is required.

    Exit codes:
        0: Files written
        1: Signature has no name, or the files could not be written
    """
    from mailsig.export import build_clipboard_payload, write_export

    config = _current_config()
    data = _build_signature(name, title, company, phone, twitter, website, logo)

    try:
        payload = build_clipboard_payload(data)
    except ExportError as e:
        _logger.error(e.message)
        raise typer.Exit(1)

    target_dir = directory or Path(config.output.directory)
    try:
        html_path, text_path = write_export(payload, target_dir, stem=config.output.stem)
    except OSError as e:
        _logger.error(f"Export failed: {e}")
        raise typer.Exit(1)

    typer.echo(f"✅ Signature exported:\n   HTML: {html_path}\n   Text: {text_path}")


# =============================================================================
# preview command
# =============================================================================


@app.command()
def preview(
    name: NameOption = None,
    title: TitleOption = None,
    company: CompanyOption = None,
    phone: PhoneOption = None,
    twitter: TwitterOption = None,
    website: WebsiteOption = None,
    logo: LogoOption = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Preview file path (overrides config)"),
    ] = None,
    dark: Annotated[
        bool | None,
        typer.Option("--dark/--light", help="Preview on a dark background"),
    ] = None,
) -> None:
    """Write an HTML page previewing the signature."""
    from mailsig.templates import PreviewRenderer

    config = _current_config()
    data = _build_signature(name, title, company, phone, twitter, website, logo)
    output_path = output or Path(config.preview.path)
    use_dark = config.preview.dark if dark is None else dark

    if not data.has_content:
        _logger.warning("Signature is empty; preview shows a placeholder")

    try:
        written = PreviewRenderer().render_to_file(data, output_path, dark=use_dark)
    except (OSError, ValueError) as e:
        _logger.error(f"Preview failed: {e}")
        raise typer.Exit(1)

    typer.echo(f"📄 Preview written to: {written}")


# =============================================================================
# instructions command
# =============================================================================


@app.command()
def instructions(
    client: Annotated[
        str | None,
        typer.Argument(help="Mail client: gmail, macos, ios (default: all)"),
    ] = None,
) -> None:
    """Show how to paste the signature into a mail client."""
    from mailsig.templates import render_instructions

    try:
        text = render_instructions([client] if client else None)
    except UnknownClientError as e:
        _logger.error(str(e))
        raise typer.Exit(1)

    typer.echo(text, nl=False)


# =============================================================================
# init command
# =============================================================================


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite existing config"),
    ] = False,
) -> None:
    """Initialize mailsig configuration in ./.mailsig/config.yaml."""
    config_dir = Path(".mailsig")
    config_file = config_dir / "config.yaml"

    if config_file.exists() and not force:
        _logger.error(f"Config already exists: {config_file}")
        _logger.info("Use --force to overwrite")
        raise typer.Exit(1)

    config_dir.mkdir(exist_ok=True)
    config_file.write_text(create_default_config(), encoding="utf-8")
    _logger.info(f"Created config: {config_file}")

    typer.echo("\n✅ mailsig configuration initialized")
    typer.echo(f"   Config: {config_file}")


# =============================================================================
# validate command
# =============================================================================


def _is_absolute_http_url(url: str) -> bool:
    parsed = urlparse(url)
    return parsed.scheme in {"http", "https"} and bool(parsed.netloc)


def check_signature(data: SignatureData) -> tuple[list[str], list[str]]:
    """Check signature fields before export.

    Args:
        data: Signature fields

    Returns:
        Tuple of (errors, warnings)
    """
    errors: list[str] = []
    warnings: list[str] = []

    if not data.has_required_fields:
        errors.append("name is required")
    if data.twitter.startswith("@"):
        warnings.append(f"twitter should not start with '@' (renders as @{data.twitter})")
    if data.website_url and not _is_absolute_http_url(data.website_url):
        warnings.append(f"website_url is not an absolute http(s) URL: {data.website_url}")
    if data.logo_url and not _is_absolute_http_url(data.logo_url):
        warnings.append(
            f"logo_url is not an absolute http(s) URL; mail recipients may not load it: "
            f"{data.logo_url}"
        )

    return errors, warnings


@app.command()
def validate(
    name: NameOption = None,
    title: TitleOption = None,
    company: CompanyOption = None,
    phone: PhoneOption = None,
    twitter: TwitterOption = None,
    website: WebsiteOption = None,
    logo: LogoOption = None,
) -> None:
    """Check the signature fields.

    Exit codes:
        0: Signature is valid
        1: One or more errors
        2: Only warnings
    """
    data = _build_signature(name, title, company, phone, twitter, website, logo)
    errors, warnings = check_signature(data)

    for error in errors:
        typer.echo(f"❌ {error}")
    for warning in warnings:
        typer.echo(f"⚠️  {warning}")

    if errors:
        raise typer.Exit(1)
    elif warnings:
        raise typer.Exit(2)

    typer.echo("✅ Signature is valid")


if __name__ == "__main__":
    app()
