"""Shared pytest fixtures for mailsig tests.

Fixtures are organized by category:
- Signature fixtures: Pre-built SignatureData values
- Configuration fixtures: Config dictionaries and files on disk
"""

from pathlib import Path
from typing import Any

import pytest
import yaml

from mailsig.models import SignatureData

# =============================================================================
# Signature Fixtures
# =============================================================================


@pytest.fixture
def full_signature() -> SignatureData:
    """Return a signature with every field filled in."""
    return SignatureData(
        name="Jane Doe",
        title="Engineer",
        company="Acme",
        phone="555-1234",
        twitter="jdoe",
        website_url="https://acme.example",
        logo_url="https://acme.example/logo.png",
    )


@pytest.fixture
def empty_signature() -> SignatureData:
    """Return a signature with every field empty."""
    return SignatureData(
        name="",
        title="",
        company="",
        phone="",
        twitter="",
        website_url="",
        logo_url="",
    )


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture
def signature_config() -> dict[str, Any]:
    """Return a complete mailsig configuration."""
    return {
        "signature": {
            "name": "Jane Doe",
            "title": "Engineer",
            "company": "Acme",
            "phone": "555-1234",
            "twitter": "jdoe",
            "website_url": "https://acme.example",
            "logo_url": "https://acme.example/logo.png",
        },
        "output": {
            "format": "html",
            "directory": "out",
            "stem": "jane",
        },
        "preview": {
            "path": "out/preview.html",
            "dark": False,
        },
    }


@pytest.fixture
def config_file(tmp_path: Path, signature_config: dict[str, Any]) -> Path:
    """Write the complete configuration to ./mailsig.yaml in a temp dir."""
    path = tmp_path / "mailsig.yaml"
    path.write_text(yaml.safe_dump(signature_config), encoding="utf-8")
    return path
