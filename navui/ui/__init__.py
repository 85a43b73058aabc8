"""
Element tree, layout and focus navigation.

Architecture:
    - Element: The single node type; behavior comes from ElementHooks
    - ElementConfig: Validated construction record for an Element
    - Navigator: Per-tick focus state machine over a tree
    - UIRenderer: Pygame draw context for hooks and the debug overlay
    - presets: Buttons, toggles, sliders, stacks and images built on Element
"""

from navui.ui.element import Element, ElementConfig, ElementHooks
from navui.ui.navigator import Navigator
from navui.ui.renderer import DrawSurface, UIRenderer, FontConfig
from navui.ui.theme import Theme, DebugColors, PresetColors, DEFAULT_THEME
from navui.ui.presets import (
    make_button,
    make_toggle,
    make_slider,
    make_hstack,
    make_vstack,
    make_image,
)

__all__ = [
    # Tree
    "Element",
    "ElementConfig",
    "ElementHooks",

    # Navigation
    "Navigator",

    # Rendering
    "DrawSurface",
    "UIRenderer",
    "FontConfig",

    # Theme
    "Theme",
    "DebugColors",
    "PresetColors",
    "DEFAULT_THEME",

    # Presets
    "make_button",
    "make_toggle",
    "make_slider",
    "make_hstack",
    "make_vstack",
    "make_image",
]
