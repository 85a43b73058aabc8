"""
Button preset.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Optional

from navui.input.manager import InputMethod
from navui.ui.element import Element, ElementHooks
from navui.ui.renderer import FontConfig
from navui.ui.theme import DEFAULT_THEME, Theme

if TYPE_CHECKING:
    from navui.ui.navigator import Navigator


def _released(element: Element, navigator: Navigator) -> None:
    element.data["held"] = False

    # A cursor release outside the button cancels the click
    input_manager = navigator.input
    if input_manager.input_method == InputMethod.CURSOR and input_manager.cursor_active:
        if not element.contains_point(input_manager.cursor_x, input_manager.cursor_y):
            return

    on_click = element.data["on_click"]
    if on_click:
        on_click(element)


def _draw(element: Element, navigator: Optional[Navigator], surface: Any) -> None:
    if surface is None:
        return

    theme: Theme = element.data["theme"]
    colors = theme.colors
    focused = navigator is not None and navigator.element_in_focus is element

    if element.data["held"]:
        bg_color = colors.bg_active
    elif focused:
        bg_color = colors.bg_focus
    else:
        bg_color = colors.bg_normal

    surface.draw_rect(element.world_x, element.world_y, element.world_width, element.world_height, bg_color)
    surface.draw_rect_outline(
        element.world_x, element.world_y, element.world_width, element.world_height,
        colors.border_focus if focused else colors.border_normal,
    )

    label = element.data["label"]
    if label:
        font_size = element.data["font_size"]
        text_x = element.world_inner_x + element.world_inner_width / 2
        text_y = element.world_inner_y + element.world_inner_height / 2 - font_size / 2
        surface.draw_text(
            label, text_x, text_y,
            color=colors.text_primary if focused else colors.text_secondary,
            font_config=FontConfig(size=font_size),
            align="center",
        )


def make_button(
    label: str = "",
    on_click: Optional[Callable[[Element], None]] = None,
    font_size: int = 16,
    theme: Theme = DEFAULT_THEME,
    **fields: Any,
) -> Element:
    """
    Create a navigable button.

    The click fires when confirm is released over the button. Without a
    fixed size, the button sizes itself from an estimate of the label.

    Args:
        label: Text drawn centred on the button
        on_click: Called with the button element
        font_size: Label font size
        theme: Colours used when drawing
        **fields: Extra ElementConfig fields (padding, width, ...)
    """
    fields.setdefault("navigable", True)
    fields.setdefault("padding", 4)

    hooks = ElementHooks(
        # Rough glyph width, the renderer is not available during layout
        inner_width=lambda e: len(e.data["label"]) * e.data["font_size"] * 0.6,
        inner_height=lambda e: e.data["font_size"],
        on_pressed=lambda e, nav: e.data.update(held=True),
        on_released=_released,
        on_exit=lambda e, nav: e.data.update(held=False),
        draw=_draw,
    )

    element = Element(hooks=hooks, **fields)
    element.data.update(
        label=label,
        on_click=on_click,
        font_size=font_size,
        theme=theme,
        held=False,
    )
    return element
