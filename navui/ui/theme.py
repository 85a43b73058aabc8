"""
Colour palettes for the debug overlay and the reference presets.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple


# Type aliases
Color = Tuple[int, int, int] | Tuple[int, int, int, int]


@dataclass
class DebugColors:
    """Outline colours for the three debug overlay states."""
    plain: Color = (90, 90, 110)
    navigable: Color = (80, 160, 255)
    focused: Color = (255, 220, 100)


@dataclass
class PresetColors:
    """Colour scheme used by the reference presets."""

    # Backgrounds
    bg_normal: Color = (45, 45, 70)
    bg_focus: Color = (70, 70, 100)
    bg_active: Color = (80, 100, 140)

    # Text
    text_primary: Color = (255, 255, 255)
    text_secondary: Color = (180, 180, 200)

    # Borders and accents
    border_normal: Color = (100, 100, 140)
    border_focus: Color = (150, 150, 200)
    accent: Color = (80, 120, 200)
    track: Color = (30, 30, 50)


@dataclass
class Theme:
    """Bundle of palettes handed to presets and the debug overlay."""
    name: str = "default"
    debug: DebugColors = field(default_factory=DebugColors)
    colors: PresetColors = field(default_factory=PresetColors)


DEFAULT_THEME = Theme()
