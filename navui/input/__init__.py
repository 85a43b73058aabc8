"""Input normalization module."""

from navui.input.manager import InputManager, InputMethod
from navui.input.bindings import Action
from navui.input.source import PygameInputSource

__all__ = [
    "InputManager",
    "InputMethod",
    "Action",
    "PygameInputSource",
]
