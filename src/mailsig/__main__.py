"""Entry point for running mailsig as a module.

Usage:
    python -m mailsig [command] [options]

Example:
    python -m mailsig render --name "Jane Doe" --format text
    python -m mailsig instructions gmail
"""

from mailsig.cli import app

if __name__ == "__main__":
    app()
