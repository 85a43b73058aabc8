"""
Horizontal slider preset.

A focused slider consumes horizontal movement to change its value, so
left/right never move focus away from it. Vertical movement still
navigates normally.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Optional

from navui.core.geometry import clamp, lerp
from navui.ui.element import Element, ElementHooks
from navui.ui.theme import DEFAULT_THEME, Theme

if TYPE_CHECKING:
    from navui.ui.navigator import Navigator


def set_slider(element: Element, value: float) -> None:
    """Set a slider's value, clamped to its range, notifying on change."""
    data = element.data
    low, high = sorted((data["minimum"], data["maximum"]))
    value = clamp(value, low, high)
    if value == data["value"]:
        return

    data["value"] = value
    if data["on_change"]:
        data["on_change"](element, value)


def slider_ratio(element: Element) -> float:
    """Position of the value within the range, 0 to 1."""
    data = element.data
    span = data["maximum"] - data["minimum"]
    if span == 0:
        return 0.0
    return (data["value"] - data["minimum"]) / span


def _move_x(element: Element, delta: int, navigator: Optional[Navigator]) -> None:
    # Held directions arrive every tick; step only on repeat-cadence ticks
    if navigator is not None and not navigator.input.move_updated:
        return
    set_slider(element, element.data["value"] + delta * element.data["step"])


def _drag(element: Element, navigator: Navigator) -> None:
    input_manager = navigator.input
    if not input_manager.cursor_active or element.world_inner_width <= 0:
        return

    ratio = clamp((input_manager.cursor_x - element.world_inner_x) / element.world_inner_width, 0, 1)
    set_slider(element, lerp(element.data["minimum"], element.data["maximum"], ratio))


def _draw(element: Element, navigator: Optional[Navigator], surface: Any) -> None:
    if surface is None:
        return

    colors = element.data["theme"].colors
    focused = navigator is not None and navigator.element_in_focus is element

    surface.draw_rect(element.world_x, element.world_y, element.world_width, element.world_height, colors.track)
    surface.draw_rect(
        element.world_inner_x, element.world_inner_y,
        element.world_inner_width * slider_ratio(element), element.world_inner_height,
        colors.accent,
    )
    surface.draw_rect_outline(
        element.world_x, element.world_y, element.world_width, element.world_height,
        colors.border_focus if focused else colors.border_normal,
    )


def make_slider(
    value: float = 0,
    minimum: float = 0,
    maximum: float = 1,
    step: float = 0.1,
    on_change: Optional[Callable[[Element, float], None]] = None,
    theme: Theme = DEFAULT_THEME,
    **fields: Any,
) -> Element:
    """
    Create a navigable horizontal slider.

    Args:
        value: Initial value (clamped to the range)
        minimum, maximum: Value range
        step: Change per left/right input
        on_change: Called with (element, new_value) when the value changes
        theme: Colours used when drawing
        **fields: Extra ElementConfig fields
    """
    fields.setdefault("navigable", True)
    fields.setdefault("padding", 2)
    fields.setdefault("width", 100)
    fields.setdefault("height", 16)

    hooks = ElementHooks(
        move_x=_move_x,
        on_drag=_drag,
        draw=_draw,
    )

    element = Element(hooks=hooks, **fields)
    element.data.update(
        value=minimum,
        minimum=minimum,
        maximum=maximum,
        step=step,
        on_change=None,
        theme=theme,
    )
    set_slider(element, value)
    element.data["on_change"] = on_change
    return element
