"""
Core module.

Exports:
- NavigationConfig: Tuned timing and bias constants
- UIContext: Explicit shared context (input manager, navigator table)
- Rect, lerp, clamp, sign: Geometry helpers
"""

from navui.core.config import NavigationConfig
from navui.core.geometry import Rect, lerp, clamp, sign
from navui.core.context import UIContext

__all__ = [
    # Config
    "NavigationConfig",
    # Context
    "UIContext",
    # Geometry
    "Rect",
    "lerp",
    "clamp",
    "sign",
]
