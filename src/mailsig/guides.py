"""Step-by-step instructions for pasting a signature into mail clients."""

from dataclasses import dataclass

from mailsig.errors import UnknownClientError


@dataclass(frozen=True)
class ImportGuide:
    """Paste instructions for one mail client.

    Attributes:
        key: Short identifier used on the command line
        label: Display name of the client
        steps: Ordered instructions
    """

    key: str
    label: str
    steps: tuple[str, ...]


GUIDES: dict[str, ImportGuide] = {
    "gmail": ImportGuide(
        key="gmail",
        label="Gmail",
        steps=(
            'Click the gear icon in Gmail and select "See all settings"',
            'Scroll down to the "Signature" section',
            'Click "Create new" to add a new signature',
            "In the signature editor, click the formatting toolbar",
            "Paste your copied signature (Cmd+V or Ctrl+V)",
            "The signature should appear with formatting intact",
            'Scroll down and click "Save Changes"',
        ),
    ),
    "macos": ImportGuide(
        key="macos",
        label="macOS Mail",
        steps=(
            "Open Mail and go to Mail → Settings (or Preferences)",
            'Click the "Signatures" tab',
            "Select an email account on the left",
            "Click the + button to create a new signature",
            "Give your signature a name",
            "In the preview pane on the right, paste your signature",
            "Drag the new signature to your account to assign it",
            "Close Settings - your signature is saved automatically",
        ),
    ),
    "ios": ImportGuide(
        key="ios",
        label="iOS Mail",
        steps=(
            "Open the Settings app on your iPhone or iPad",
            'Scroll down and tap "Mail"',
            'Tap "Signature" near the bottom',
            'If you have multiple accounts, choose "Per Account" or "All Accounts"',
            "Tap in the text field and clear any existing signature",
            "Paste your signature (tap and hold, then Paste)",
            "Note: iOS Mail has limited HTML support - formatting may vary",
            "Tap back to save",
        ),
    ),
}


def get_guide(key: str) -> ImportGuide:
    """Look up the guide for a mail client (case-insensitive).

    Raises:
        UnknownClientError: If no guide exists for the key
    """
    guide = GUIDES.get(key.strip().lower())
    if guide is None:
        raise UnknownClientError(key, available=list(GUIDES))
    return guide


def get_guides(keys: list[str] | None = None) -> list[ImportGuide]:
    """Return guides for the given clients, or all of them in display order."""
    if not keys:
        return list(GUIDES.values())
    return [get_guide(key) for key in keys]
