"""
Image preset for displaying pygame surfaces.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional, Tuple

import pygame

from navui.ui.element import Element, ElementHooks

if TYPE_CHECKING:
    from navui.ui.navigator import Navigator

SCALE_MODES = ("fit", "stretch", "none")


def fit_scale(
    available_width: float,
    available_height: float,
    source_width: float,
    source_height: float,
) -> float:
    """
    Uniform scale that fits a source size inside an available size.

    A zero or negative source span would give an infinite ratio; the
    scale falls back to 1 instead.
    """
    if source_width <= 0 or source_height <= 0:
        return 1.0
    return max(0.0, min(available_width / source_width, available_height / source_height))


def _source_size(element: Element) -> Tuple[int, int]:
    source = element.data["source"]
    if source is None:
        return (0, 0)
    return source.get_size()


def _draw(element: Element, navigator: Optional[Navigator], surface: Any) -> None:
    source: Optional[pygame.Surface] = element.data["source"]
    if surface is None or source is None:
        return

    source_width, source_height = source.get_size()
    mode = element.data["scale"]
    if mode == "stretch":
        width, height = element.world_inner_width, element.world_inner_height
    else:
        scale = 1.0
        if mode == "fit":
            scale = fit_scale(
                element.world_inner_width, element.world_inner_height,
                source_width, source_height,
            )
        width = source_width * scale
        height = source_height * scale

    # Centre inside the inner rect
    x = element.world_inner_x + (element.world_inner_width - width) / 2
    y = element.world_inner_y + (element.world_inner_height - height) / 2
    surface.draw_surface(source, x, y, width, height)


def make_image(
    source: Optional[pygame.Surface] = None,
    scale: str = "fit",
    **fields: Any,
) -> Element:
    """
    Create an element that draws a surface inside its inner rect.

    Without a fixed width/height the element takes the source's size.
    Images are not navigable unless asked for.

    Args:
        source: Surface to draw (anything with get_size())
        scale: "fit" (uniform, whole image visible), "stretch" (fill the
            inner rect) or "none" (source size, centred)
        **fields: Extra ElementConfig fields
    """
    if scale not in SCALE_MODES:
        raise ValueError(f"Unknown scale mode: {scale}")

    hooks = ElementHooks(
        inner_width=lambda e: _source_size(e)[0],
        inner_height=lambda e: _source_size(e)[1],
        draw=_draw,
    )

    element = Element(hooks=hooks, **fields)
    element.data["source"] = source
    element.data["scale"] = scale
    return element
