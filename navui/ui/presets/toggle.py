"""
Toggle (check box) preset.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Optional

from navui.ui.element import Element, ElementHooks
from navui.ui.theme import DEFAULT_THEME, Theme

if TYPE_CHECKING:
    from navui.ui.navigator import Navigator


def set_toggle(element: Element, value: bool) -> None:
    """Set a toggle's value, notifying its callback on change."""
    value = bool(value)
    if element.data["value"] == value:
        return

    element.data["value"] = value
    on_change = element.data["on_change"]
    if on_change:
        on_change(element, value)


def _draw(element: Element, navigator: Optional[Navigator], surface: Any) -> None:
    if surface is None:
        return

    colors = element.data["theme"].colors
    focused = navigator is not None and navigator.element_in_focus is element

    surface.draw_rect(element.world_x, element.world_y, element.world_width, element.world_height, colors.track)
    surface.draw_rect_outline(
        element.world_x, element.world_y, element.world_width, element.world_height,
        colors.border_focus if focused else colors.border_normal,
    )
    if element.data["value"]:
        surface.draw_rect(
            element.world_inner_x, element.world_inner_y,
            element.world_inner_width, element.world_inner_height,
            colors.accent,
        )


def make_toggle(
    value: bool = False,
    on_change: Optional[Callable[[Element, bool], None]] = None,
    size: float = 16,
    theme: Theme = DEFAULT_THEME,
    **fields: Any,
) -> Element:
    """
    Create a navigable toggle that flips on confirm press.

    Args:
        value: Initial state
        on_change: Called with (element, new_value) when the state flips
        size: Side length when no width/height is given
        theme: Colours used when drawing
        **fields: Extra ElementConfig fields
    """
    fields.setdefault("navigable", True)
    fields.setdefault("padding", 3)
    fields.setdefault("width", size)
    fields.setdefault("height", size)

    hooks = ElementHooks(
        on_pressed=lambda e, nav: set_toggle(e, not e.data["value"]),
        draw=_draw,
    )

    element = Element(hooks=hooks, **fields)
    element.data.update(value=bool(value), on_change=on_change, theme=theme)
    return element
