"""mailsig configuration system.

Configuration is YAML-based: a ``signature`` block with the form fields plus
output and preview settings. CLI options override individual values per run.
Supports environment variable substitution (${VAR}) in config files.

Configuration file discovery (in priority order):
1. CLI --config argument
2. ./.mailsig/config.yaml
3. ./mailsig.yaml
"""

import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from mailsig.models.signature import SignatureData

VALID_FORMATS = {"html", "text", "json"}

# =============================================================================
# Configuration Dataclasses
# =============================================================================


@dataclass
class OutputConfig:
    """Output configuration.

    Attributes:
        format: Format printed by `mailsig render` (html, text, json)
        directory: Directory written by `mailsig export`
        stem: File name (without extension) of exported files
    """

    format: str = "html"
    directory: str = "signature"
    stem: str = "signature"

    def __post_init__(self) -> None:
        """Validate output configuration."""
        if self.format not in VALID_FORMATS:
            raise ValueError(f"Invalid output format: {self.format}. Valid: {VALID_FORMATS}")


@dataclass
class PreviewConfig:
    """Preview page configuration.

    Attributes:
        path: Output path of the preview page
        dark: Show the signature under a colour inversion filter
    """

    path: str = "signature/preview.html"
    dark: bool = False


@dataclass
class MailsigConfig:
    """Top-level mailsig configuration.

    Attributes:
        signature: Signature fields
        output: Render/export settings
        preview: Preview page settings
    """

    signature: SignatureData = field(default_factory=SignatureData)
    output: OutputConfig = field(default_factory=OutputConfig)
    preview: PreviewConfig = field(default_factory=PreviewConfig)

    # Runtime overrides (set by CLI)
    _config_path: Path | None = field(default=None, repr=False)

    @property
    def config_path(self) -> Path | None:
        """Get the path to the config file that was loaded."""
        return self._config_path


# =============================================================================
# Environment Variable Substitution
# =============================================================================

_ENV_PATTERN = re.compile(r"\$\{([^}]+)\}")


def substitute_env_vars(value: Any) -> Any:
    """Substitute environment variables in config values.

    Supports ${VAR} syntax, e.g. ``phone: "${OFFICE_PHONE}"``.

    Args:
        value: Config value (string, dict, list, or other)

    Returns:
        Value with environment variables substituted

    Raises:
        ValueError: If a referenced variable is not set
    """
    if isinstance(value, str):

        def replace_var(match: re.Match[str]) -> str:
            var_name = match.group(1)
            env_value = os.environ.get(var_name)
            if env_value is None:
                raise ValueError(f"Environment variable not set: {var_name}")
            return env_value

        return _ENV_PATTERN.sub(replace_var, value)

    elif isinstance(value, dict):
        return {k: substitute_env_vars(v) for k, v in value.items()}

    elif isinstance(value, list):
        return [substitute_env_vars(v) for v in value]

    return value


# =============================================================================
# Config File Discovery
# =============================================================================


def find_config_file(start_path: Path | None = None) -> Path | None:
    """Find configuration file in standard locations.

    Search order:
    1. ./.mailsig/config.yaml
    2. ./mailsig.yaml

    Args:
        start_path: Starting directory for search (defaults to cwd)

    Returns:
        Path to config file if found, None otherwise
    """
    if start_path is None:
        start_path = Path.cwd()

    start_path = start_path.resolve()

    candidates = [
        start_path / ".mailsig" / "config.yaml",
        start_path / "mailsig.yaml",
    ]

    for candidate in candidates:
        if candidate.exists():
            return candidate

    return None


# =============================================================================
# Config Loading
# =============================================================================


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    """Return a config block as a mapping (empty when null).

    Raises:
        ValueError: If the block is present but not a mapping
    """
    section = data[name]
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ValueError(f"'{name}' must be a mapping of setting names to values")
    return section


def load_config_from_dict(data: dict[str, Any]) -> MailsigConfig:
    """Load configuration from a dictionary.

    Args:
        data: Configuration dictionary

    Returns:
        MailsigConfig instance

    Raises:
        ValueError: If a value is invalid or a ${VAR} is unset
    """
    data = substitute_env_vars(data)

    config = MailsigConfig()

    if "signature" in data:
        signature_data = _section(data, "signature")
        for key, value in signature_data.items():
            if value is not None and not isinstance(value, str):
                raise ValueError(
                    f"signature.{key} must be text (got {value!r}); "
                    f'quote the value in YAML, e.g. {key}: "{value}"'
                )
        config.signature = SignatureData.from_dict(signature_data)

    if "output" in data:
        output_data = _section(data, "output")
        config.output = OutputConfig(
            format=str(output_data.get("format", config.output.format)),
            directory=str(output_data.get("directory", config.output.directory)),
            stem=str(output_data.get("stem", config.output.stem)),
        )

    if "preview" in data:
        preview_data = _section(data, "preview")
        dark = preview_data.get("dark", config.preview.dark)
        if not isinstance(dark, bool):
            raise ValueError(f"preview.dark must be true or false (got {dark!r})")
        config.preview = PreviewConfig(
            path=str(preview_data.get("path", config.preview.path)),
            dark=dark,
        )

    return config


def load_config(
    config_path: Path | None = None,
    auto_discover: bool = True,
) -> MailsigConfig:
    """Load configuration from file.

    Args:
        config_path: Explicit path to config file
        auto_discover: Whether to search for config file if not specified

    Returns:
        MailsigConfig instance

    Raises:
        FileNotFoundError: If config_path specified but doesn't exist
        ValueError: If the file is not a YAML mapping or has invalid values
    """
    if config_path is not None:
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        found_path = config_path
    elif auto_discover:
        found_path = find_config_file()
    else:
        found_path = None

    if found_path is not None:
        with open(found_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a YAML mapping: {found_path}")
        config = load_config_from_dict(data)
        config._config_path = found_path
    else:
        config = MailsigConfig()

    return config


def create_default_config() -> str:
    """Create default configuration YAML content.

    Returns:
        YAML string with default configuration and comments
    """
    return '''# mailsig configuration

# Signature fields (all optional except name)
signature:
  name: ""
  title: ""
  company: ""
  phone: ""            # e.g. "${OFFICE_PHONE}"
  twitter: ""          # handle without the leading @
  website_url: ""      # absolute URL, e.g. https://example.com
  logo_url: ""         # publicly reachable image URL (60x60 works best)

# Render/export settings
output:
  format: "html"       # html, text, json
  directory: "signature"
  stem: "signature"

# Preview page
preview:
  path: "signature/preview.html"
  dark: false
'''
