"""Modal text editor: a UI-agnostic state machine plus a Textual front end."""

__all__ = [
    "adapters",
    "buffer",
    "config",
    "editor",
    "modes",
    "runtime",
    "ui",
]

__version__ = "0.1.0"
