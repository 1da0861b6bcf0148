"""Signature entity holding the form fields of one email signature.

SignatureData is built by the caller for every render and discarded after.
Every field is plain text; a field is "present" only when it is a non-empty
string, so ``None`` and ``""`` mean the same thing.
"""

from dataclasses import asdict, dataclass, fields
from typing import Any

# camelCase keys accepted from form payloads
FIELD_ALIASES: dict[str, str] = {
    "websiteUrl": "website_url",
    "logoUrl": "logo_url",
}


def _coerce(value: Any) -> str:
    """Normalize a raw field value to a string (None becomes empty)."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


@dataclass(frozen=True)
class SignatureData:
    """Fields of an email signature.

    Attributes:
        name: Person's name (needed for a meaningful signature, not enforced)
        title: Job title
        company: Company name
        phone: Phone number, rendered as typed
        twitter: Social handle stored without the leading "@"
        website_url: Absolute URL the logo links to
        logo_url: URL or path of an already-hosted logo image
    """

    name: str = ""
    title: str = ""
    company: str = ""
    phone: str = ""
    twitter: str = ""
    website_url: str = ""
    logo_url: str = ""

    def __post_init__(self) -> None:
        """Replace None and non-string values with their string form."""
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, str):
                object.__setattr__(self, f.name, _coerce(value))

    @property
    def has_content(self) -> bool:
        """Return True if rendering would produce at least one visible row."""
        return any(
            (self.name, self.title, self.company, self.phone, self.twitter, self.logo_url)
        )

    @property
    def has_required_fields(self) -> bool:
        """Return True if the signature has a non-blank name."""
        return bool(self.name.strip())

    def replace(self, **changes: str | None) -> "SignatureData":
        """Return a copy with the given fields overridden.

        Overrides whose value is None are ignored so that unset CLI options
        leave configured values alone.

        Raises:
            TypeError: If a key is not a signature field
        """
        known = {f.name for f in fields(self)}
        unknown = set(changes) - known
        if unknown:
            raise TypeError(f"Unknown signature field(s): {', '.join(sorted(unknown))}")

        values = self.to_dict()
        values.update({k: v for k, v in changes.items() if v is not None})
        return SignatureData(**values)

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary for serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "SignatureData":
        """Create SignatureData from a mapping.

        Accepts snake_case field names and the camelCase aliases used by web
        forms (``websiteUrl``, ``logoUrl``). Unknown keys are ignored.

        Args:
            data: Raw field mapping (may be None)

        Returns:
            SignatureData instance
        """
        if not data:
            return cls()

        known = {f.name for f in fields(cls)}
        values: dict[str, str] = {}
        for key, value in data.items():
            field_name = FIELD_ALIASES.get(key, key)
            if field_name in known:
                values[field_name] = _coerce(value)

        return cls(**values)
