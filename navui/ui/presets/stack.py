"""
Horizontal and vertical stacks.

A stack sizes itself to fit its children laid end to end with a fixed
separation, and positions them itself through `inner_layout`.
"""

from __future__ import annotations

from typing import Any, Iterable

from navui.core.geometry import lerp
from navui.ui.element import Element, ElementHooks


def _main_extent(element: Element, horizontal: bool) -> float:
    separation = element.data["separation"]
    total = 0.0
    for i, child in enumerate(element.children):
        total += child.world_width if horizontal else child.world_height
        if i < len(element.children) - 1:
            total += separation
    return total


def _cross_extent(element: Element, horizontal: bool) -> float:
    sizes = [c.world_height if horizontal else c.world_width for c in element.children]
    return max(sizes, default=0)


def _layout(element: Element, horizontal: bool) -> None:
    separation = element.data["separation"]
    align = element.data["align"]
    x = element.world_inner_x
    y = element.world_inner_y

    for child in element.children:
        if horizontal:
            slack = element.world_inner_height - child.world_height
            child.recalculate_position(x, y + lerp(0, slack, align))
            x += child.world_width + separation
        else:
            slack = element.world_inner_width - child.world_width
            child.recalculate_position(x + lerp(0, slack, align), y)
            y += child.world_height + separation


def _make_stack(
    horizontal: bool,
    children: Iterable[Element],
    separation: float,
    align: float,
    **fields: Any,
) -> Element:
    hooks = ElementHooks()
    if horizontal:
        hooks.inner_width = lambda e: _main_extent(e, True)
        hooks.inner_height = lambda e: _cross_extent(e, True)
    else:
        hooks.inner_width = lambda e: _cross_extent(e, False)
        hooks.inner_height = lambda e: _main_extent(e, False)
    hooks.inner_layout = lambda e: _layout(e, horizontal)

    element = Element(hooks=hooks, children=list(children), **fields)
    element.data["separation"] = separation
    element.data["align"] = align
    return element


def make_hstack(
    children: Iterable[Element] = (),
    separation: float = 0,
    align: float = 0,
    **fields: Any,
) -> Element:
    """
    Create a stack that lays children out left to right.

    Args:
        children: Stacked elements, in order
        separation: Gap between neighbouring children
        align: Cross-axis alignment (0 = top, 0.5 = centre, 1 = bottom)
        **fields: Extra ElementConfig fields (padding, width, ...)
    """
    return _make_stack(True, children, separation, align, **fields)


def make_vstack(
    children: Iterable[Element] = (),
    separation: float = 0,
    align: float = 0,
    **fields: Any,
) -> Element:
    """
    Create a stack that lays children out top to bottom.

    Args:
        children: Stacked elements, in order
        separation: Gap between neighbouring children
        align: Cross-axis alignment (0 = left, 0.5 = centre, 1 = right)
        **fields: Extra ElementConfig fields (padding, width, ...)
    """
    return _make_stack(False, children, separation, align, **fields)
