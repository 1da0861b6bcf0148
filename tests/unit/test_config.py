"""Unit tests for configuration system."""

from pathlib import Path
from typing import Any

import pytest
import yaml

from mailsig.config import (
    MailsigConfig,
    OutputConfig,
    create_default_config,
    find_config_file,
    load_config,
    load_config_from_dict,
    substitute_env_vars,
)
from mailsig.models import SignatureData


class TestSubstituteEnvVars:
    """Tests for environment variable substitution."""

    def test_substitute_string(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test substituting env var in string."""
        monkeypatch.setenv("OFFICE_PHONE", "555-1234")

        assert substitute_env_vars("tel ${OFFICE_PHONE}") == "tel 555-1234"

    def test_substitute_nested(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test substituting env vars in dictionaries and lists."""
        monkeypatch.setenv("CDN", "https://cdn.example")

        data = {"signature": {"logo_url": "${CDN}/logo.png"}, "list": ["${CDN}", 1]}
        result = substitute_env_vars(data)

        assert result["signature"]["logo_url"] == "https://cdn.example/logo.png"
        assert result["list"] == ["https://cdn.example", 1]

    def test_missing_env_var_raises(self) -> None:
        """Test that missing env var raises ValueError."""
        with pytest.raises(ValueError, match="Environment variable not set"):
            substitute_env_vars("${MAILSIG_NONEXISTENT_VAR}")

    def test_passthrough_non_string(self) -> None:
        """Test that non-string values pass through unchanged."""
        assert substitute_env_vars(123) == 123
        assert substitute_env_vars(True) is True
        assert substitute_env_vars(None) is None


class TestFindConfigFile:
    """Tests for config file discovery."""

    def test_find_dot_directory_config(self, tmp_path: Path) -> None:
        """Test finding .mailsig/config.yaml."""
        config_dir = tmp_path / ".mailsig"
        config_dir.mkdir()
        config_file = config_dir / "config.yaml"
        config_file.write_text("signature:\n  name: Jane")

        assert find_config_file(tmp_path) == config_file

    def test_find_root_config(self, tmp_path: Path) -> None:
        """Test finding mailsig.yaml."""
        config_file = tmp_path / "mailsig.yaml"
        config_file.write_text("signature:\n  name: Jane")

        assert find_config_file(tmp_path) == config_file

    def test_dot_directory_takes_priority(self, tmp_path: Path) -> None:
        """Test discovery order."""
        (tmp_path / "mailsig.yaml").write_text("{}")
        config_dir = tmp_path / ".mailsig"
        config_dir.mkdir()
        (config_dir / "config.yaml").write_text("{}")

        assert find_config_file(tmp_path) == config_dir / "config.yaml"

    def test_no_config(self, tmp_path: Path) -> None:
        """Test when no config file exists."""
        assert find_config_file(tmp_path) is None


class TestLoadConfigFromDict:
    """Tests for loading config from dictionary."""

    def test_empty_dict(self) -> None:
        """Test loading from empty dictionary uses defaults."""
        config = load_config_from_dict({})

        assert config.signature == SignatureData()
        assert config.output.format == "html"
        assert config.output.directory == "signature"
        assert config.preview.dark is False

    def test_full_config(self, signature_config: dict[str, Any]) -> None:
        """Test loading every section."""
        config = load_config_from_dict(signature_config)

        assert config.signature.name == "Jane Doe"
        assert config.signature.website_url == "https://acme.example"
        assert config.output.directory == "out"
        assert config.output.stem == "jane"
        assert config.preview.path == "out/preview.html"

    def test_camel_case_signature_keys(self) -> None:
        """Test that form-style keys are accepted in the signature block."""
        config = load_config_from_dict({"signature": {"logoUrl": "http://x/l.png"}})

        assert config.signature.logo_url == "http://x/l.png"

    def test_env_substitution(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that ${VAR} references are resolved."""
        monkeypatch.setenv("SIG_NAME", "Jane Doe")

        config = load_config_from_dict({"signature": {"name": "${SIG_NAME}"}})

        assert config.signature.name == "Jane Doe"

    def test_invalid_format(self) -> None:
        """Test that unknown output formats are rejected."""
        with pytest.raises(ValueError, match="Invalid output format"):
            load_config_from_dict({"output": {"format": "pdf"}})

    def test_invalid_dark_flag(self) -> None:
        """Test that preview.dark must be a boolean."""
        with pytest.raises(ValueError, match="preview.dark"):
            load_config_from_dict({"preview": {"dark": "yes please"}})

    def test_signature_must_be_mapping(self) -> None:
        """Test that a scalar signature block is rejected."""
        with pytest.raises(ValueError, match="must be a mapping"):
            load_config_from_dict({"signature": "Jane"})

    @pytest.mark.parametrize(
        ("section", "value"),
        [
            ("output", "html"),
            ("output", ["html"]),
            ("preview", ["x"]),
            ("preview", True),
        ],
    )
    def test_sections_must_be_mappings(self, section: str, value: Any) -> None:
        """Test that scalar or list output/preview blocks are rejected."""
        with pytest.raises(ValueError, match=f"'{section}' must be a mapping"):
            load_config_from_dict({section: value})

    def test_unquoted_number_in_signature_rejected(self) -> None:
        """Test that YAML numbers are not silently rewritten (0123 is octal)."""
        data = yaml.safe_load("signature:\n  name: Jane\n  phone: 0123\n")

        with pytest.raises(ValueError, match=r"signature\.phone must be text.*quote"):
            load_config_from_dict(data)

    @pytest.mark.parametrize("raw", ["title: 2024", "name: yes", "company: 1.5"])
    def test_non_text_signature_values_rejected(self, raw: str) -> None:
        """Test that any non-string scalar in the signature block is rejected."""
        with pytest.raises(ValueError, match="must be text"):
            load_config_from_dict(yaml.safe_load(f"signature:\n  {raw}\n"))

    def test_quoted_number_kept_verbatim(self) -> None:
        """Test that a quoted phone number keeps its leading zero."""
        data = yaml.safe_load('signature:\n  phone: "0123"\n')

        assert load_config_from_dict(data).signature.phone == "0123"

    def test_empty_sections(self) -> None:
        """Test that empty YAML sections fall back to defaults."""
        config = load_config_from_dict({"signature": None, "output": None, "preview": None})

        assert config.signature == SignatureData()
        assert config.output == OutputConfig()


class TestLoadConfig:
    """Tests for load_config."""

    def test_explicit_path(self, config_file: Path) -> None:
        """Test loading an explicit config file."""
        config = load_config(config_path=config_file)

        assert config.signature.company == "Acme"
        assert config.config_path == config_file

    def test_missing_explicit_path(self, tmp_path: Path) -> None:
        """Test error for a missing explicit config path."""
        with pytest.raises(FileNotFoundError):
            load_config(config_path=tmp_path / "missing.yaml")

    def test_auto_discover(self, config_file: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test discovery from the working directory."""
        monkeypatch.chdir(config_file.parent)

        config = load_config()

        assert config.signature.name == "Jane Doe"

    def test_no_discovery(self, config_file: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that auto_discover=False returns defaults."""
        monkeypatch.chdir(config_file.parent)

        config = load_config(auto_discover=False)

        assert config.config_path is None
        assert config.signature == SignatureData()

    def test_empty_file(self, tmp_path: Path) -> None:
        """Test that an empty file yields defaults."""
        path = tmp_path / "mailsig.yaml"
        path.write_text("")

        assert load_config(config_path=path).signature == SignatureData()

    def test_non_mapping_file(self, tmp_path: Path) -> None:
        """Test that a YAML list is rejected."""
        path = tmp_path / "mailsig.yaml"
        path.write_text("- name\n- title\n")

        with pytest.raises(ValueError, match="YAML mapping"):
            load_config(config_path=path)


class TestCreateDefaultConfig:
    """Tests for the default config template."""

    def test_loads_to_defaults(self) -> None:
        """Test that the generated YAML loads to the default config."""
        data = yaml.safe_load(create_default_config())
        config = load_config_from_dict(data)
        defaults = MailsigConfig()

        assert config.signature == defaults.signature
        assert config.output == defaults.output
        assert config.preview == defaults.preview
