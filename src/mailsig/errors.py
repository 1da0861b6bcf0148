"""Exceptions raised around the signature renderer.

The renderer itself never raises; these cover export and lookup failures.
"""


class MailsigError(Exception):
    """Base class for mailsig errors."""


class ExportError(MailsigError):
    """Raised when a signature cannot be exported."""

    def __init__(self, message: str, field_name: str | None = None) -> None:
        self.field_name = field_name
        self.message = message
        super().__init__(self.message)


class UnknownClientError(MailsigError, KeyError):
    """Raised when no import guide exists for a mail client."""

    def __init__(self, client: str, available: list[str] | None = None) -> None:
        self.client = client
        self.available = available or []
        self.message = f"Unknown mail client: {client}"
        if self.available:
            self.message += f". Valid: {', '.join(self.available)}"
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message
