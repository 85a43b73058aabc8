"""
navui

Automatic layout and keyboard/gamepad/mouse focus navigation for
tree-structured menus and HUDs.

Quick Start:
    from navui import UIContext, make_vstack, make_button

    context = UIContext()
    new_game = make_button("New Game", on_click=start_game)
    quit_game = make_button("Quit", on_click=quit_game)
    menu = make_vstack([new_game, quit_game], separation=8)

    # Each tick
    source.feed(context.input)
    # Centred on a 640x480 screen
    context.tick(menu, default_element=new_game,
                 anchor_x=320, anchor_y=240, align_x=0.5, align_y=0.5)
    context.draw(menu, renderer)
"""

__version__ = "0.1.0"

from navui.core import NavigationConfig, UIContext, Rect
from navui.input import InputManager, InputMethod, Action, PygameInputSource
from navui.ui import (
    Element,
    ElementConfig,
    ElementHooks,
    Navigator,
    DrawSurface,
    UIRenderer,
    Theme,
    make_button,
    make_toggle,
    make_slider,
    make_hstack,
    make_vstack,
    make_image,
)

__all__ = [
    # Core
    "NavigationConfig",
    "UIContext",
    "Rect",
    # Input
    "InputManager",
    "InputMethod",
    "Action",
    "PygameInputSource",
    # Tree and navigation
    "Element",
    "ElementConfig",
    "ElementHooks",
    "Navigator",
    # Rendering
    "DrawSurface",
    "UIRenderer",
    "Theme",
    # Presets
    "make_button",
    "make_toggle",
    "make_slider",
    "make_hstack",
    "make_vstack",
    "make_image",
]
