"""Front-end contract and the headless implementation."""

from .boundary import UiBoundary, UiError, UnrecognizedInput
from .headless import HeadlessUi

__all__ = [
    "HeadlessUi",
    "UiBoundary",
    "UiError",
    "UnrecognizedInput",
]
