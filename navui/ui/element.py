"""
Generic UI element with box-model layout and tree queries.

There is one concrete element type. Widget kinds (buttons, sliders,
stacks, ...) are presets that install callbacks into an element's
`hooks` record instead of subclassing.

Layout is two passes over the tree, always in this order:

    root.recalculate_size()             # post-order, children first
    root.recalculate_position(x, y)     # pre-order, parent first

Usage:
    ok = Element(width=80, height=24, navigable=True)
    cancel = Element(width=80, height=24, navigable=True)
    root = Element(padding=4, children=[ok, cancel])
    ok.hooks.on_pressed = lambda element, navigator: print("pressed")

    root.recalculate_size()
    root.recalculate_position(320, 240, 0.5, 0.5)
"""

from __future__ import annotations

import math
import weakref
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Iterator, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from navui.core.geometry import Rect, lerp
from navui.ui.theme import DEFAULT_THEME, Theme

if TYPE_CHECKING:
    from navui.ui.navigator import Navigator
    from navui.ui.renderer import DrawSurface


# Hook signatures
SizeHook = Callable[['Element'], float]
LayoutHook = Callable[['Element'], None]
CollisionHook = Callable[['Element', float, float], bool]
DrawHook = Callable[['Element', Optional['Navigator'], Any], None]
EventHook = Callable[['Element', 'Navigator'], None]
MoveHook = Callable[['Element', int, Optional['Navigator']], None]


@dataclass
class ElementHooks:
    """
    Optional behavior slots for an element.

    Every slot defaults to None, which is treated as a no-op.

    Layout:
        inner_width, inner_height: Content size providers; replace the
            size inferred from children when set
        inner_layout: Positions children itself instead of the default
            stacking at the inner origin
        collision: Extra hit-test predicate (element, x, y)

    Drawing (element, navigator, surface):
        draw_begin, draw, draw_end, draw_debug

    Navigation (element, navigator):
        on_pressed, on_drag, on_released, on_enter, on_exit, on_step

    Movement (element, delta, navigator):
        move_x, move_y: Consume directional input instead of moving focus
    """
    inner_width: Optional[SizeHook] = None
    inner_height: Optional[SizeHook] = None
    inner_layout: Optional[LayoutHook] = None
    collision: Optional[CollisionHook] = None

    draw_begin: Optional[DrawHook] = None
    draw: Optional[DrawHook] = None
    draw_end: Optional[DrawHook] = None
    draw_debug: Optional[DrawHook] = None

    on_pressed: Optional[EventHook] = None
    on_drag: Optional[EventHook] = None
    on_released: Optional[EventHook] = None
    on_enter: Optional[EventHook] = None
    on_exit: Optional[EventHook] = None
    on_step: Optional[EventHook] = None

    move_x: Optional[MoveHook] = None
    move_y: Optional[MoveHook] = None


def _deref(ref: Optional[weakref.ref]) -> Optional['Element']:
    return ref() if ref is not None else None


def _weak(element: Optional['Element']) -> Optional[weakref.ref]:
    return weakref.ref(element) if element is not None else None


class Element:
    """
    A node of the UI tree.

    Geometry set by the caller:
        width, height: Fixed outer size, or None to infer from content
        padding: Uniform inset between the outer and inner rect
        offset_x, offset_y: Nudge applied after alignment

    Geometry computed by layout:
        world_x, world_y, world_width, world_height: Outer rect
        world_inner_x, world_inner_y, world_inner_width, world_inner_height:
            Outer rect shrunk by padding on every side

    Neighbour overrides (nav_left, nav_up, nav_right, nav_down) are held
    weakly. Removing an element that another element names as neighbour
    without clearing the reference is a caller error; the override then
    resolves to the detached element or, once collected, to None.
    """

    def __init__(
        self,
        config: Optional['ElementConfig'] = None,
        *,
        hooks: Optional[ElementHooks] = None,
        **fields: Any,
    ):
        if config is None:
            config = ElementConfig(**fields)
        elif fields:
            config = ElementConfig(**{**dict(config), **fields})

        # Geometry
        self.width: Optional[float] = config.width
        self.height: Optional[float] = config.height
        self.padding: float = config.padding
        self.offset_x: float = config.offset_x
        self.offset_y: float = config.offset_y

        # Computed by layout
        self.world_x: int = 0
        self.world_y: int = 0
        self.world_width: int = 0
        self.world_height: int = 0
        self.world_inner_x: float = 0
        self.world_inner_y: float = 0
        self.world_inner_width: float = 0
        self.world_inner_height: float = 0

        # State
        self.navigable: bool = config.navigable
        self.visible: bool = config.visible
        self.tag: str = config.tag
        self.data: dict[str, Any] = {}
        self.hooks = hooks or ElementHooks()

        # Hierarchy
        self._parent: Optional[weakref.ref] = None
        self.children: List[Element] = []
        self.add_children(*config.children)

        self._nav_left = _weak(config.nav_left)
        self._nav_up = _weak(config.nav_up)
        self._nav_right = _weak(config.nav_right)
        self._nav_down = _weak(config.nav_down)

    # Neighbour overrides

    @property
    def nav_left(self) -> Optional[Element]:
        return _deref(self._nav_left)

    @nav_left.setter
    def nav_left(self, element: Optional[Element]) -> None:
        self._nav_left = _weak(element)

    @property
    def nav_up(self) -> Optional[Element]:
        return _deref(self._nav_up)

    @nav_up.setter
    def nav_up(self, element: Optional[Element]) -> None:
        self._nav_up = _weak(element)

    @property
    def nav_right(self) -> Optional[Element]:
        return _deref(self._nav_right)

    @nav_right.setter
    def nav_right(self, element: Optional[Element]) -> None:
        self._nav_right = _weak(element)

    @property
    def nav_down(self) -> Optional[Element]:
        return _deref(self._nav_down)

    @nav_down.setter
    def nav_down(self, element: Optional[Element]) -> None:
        self._nav_down = _weak(element)

    # Child management

    @property
    def parent(self) -> Optional[Element]:
        return _deref(self._parent)

    def add_child(self, element: Element) -> Element:
        """
        Append a child element.

        Returns:
            Self for chaining
        """
        element._parent = weakref.ref(self)
        self.children.append(element)
        return self

    def add_children(self, *elements: Element) -> Element:
        """Append multiple children."""
        for element in elements:
            self.add_child(element)
        return self

    def remove_child(self, element: Element) -> bool:
        """
        Remove a child element.

        Returns:
            True if the element was a child and was removed
        """
        if element in self.children:
            element._parent = None
            self.children.remove(element)
            return True
        return False

    def iter_elements(self) -> Iterator[Element]:
        """Iterate over this element and all descendants, pre-order."""
        yield self
        for child in self.children:
            yield from child.iter_elements()

    def find_by_tag(self, tag: str) -> Optional[Element]:
        """Find the first element with a tag (recursive)."""
        for element in self.iter_elements():
            if element.tag == tag:
                return element
        return None

    # Geometry

    @property
    def world_rect(self) -> Rect:
        """Outer rect in world coordinates."""
        return Rect(self.world_x, self.world_y, self.world_width, self.world_height)

    @property
    def inner_rect(self) -> Rect:
        """Inner rect in world coordinates."""
        return Rect(
            self.world_inner_x,
            self.world_inner_y,
            self.world_inner_width,
            self.world_inner_height,
        )

    @property
    def center(self) -> tuple[float, float]:
        return self.world_rect.center

    def contains_point(self, x: float, y: float) -> bool:
        return self.world_rect.contains(x, y)

    def intersects_clip(
        self,
        clip_left: float,
        clip_top: float,
        clip_right: float,
        clip_bottom: float,
    ) -> bool:
        return self.world_rect.intersects_bounds(clip_left, clip_top, clip_right, clip_bottom)

    def distance_to_point(self, x: float, y: float) -> float:
        """Distance from a point to the outer rect (0 if inside)."""
        return self.world_rect.distance_to_point(x, y)

    # Layout

    def recalculate_size(self) -> None:
        """
        Resolve world sizes for this subtree, children first.

        An unset width or height becomes the content extent plus padding
        on both sides. The content extent is the largest child on that
        axis, or the inner size hook's result when one is installed.
        """
        content_width = 0.0
        content_height = 0.0

        for child in self.children:
            child.recalculate_size()
            content_width = max(content_width, child.world_width)
            content_height = max(content_height, child.world_height)

        if self.hooks.inner_width is not None:
            content_width = self.hooks.inner_width(self)
        if self.hooks.inner_height is not None:
            content_height = self.hooks.inner_height(self)

        if self.width is None:
            self.world_width = math.floor(content_width + 2 * self.padding)
        else:
            self.world_width = math.floor(self.width)

        if self.height is None:
            self.world_height = math.floor(content_height + 2 * self.padding)
        else:
            self.world_height = math.floor(self.height)

        self.world_inner_width = self.world_width - 2 * self.padding
        self.world_inner_height = self.world_height - 2 * self.padding

    def recalculate_position(
        self,
        anchor_x: float,
        anchor_y: float,
        align_x: float = 0,
        align_y: float = 0,
    ) -> None:
        """
        Resolve world positions for this subtree, parent first.

        Args:
            anchor_x, anchor_y: Anchor point in world coordinates
            align_x, align_y: Fraction of the element's size placed before
                the anchor (0 = anchor is the left/top edge, 1 = right/bottom)
        """
        self.world_x = math.floor(anchor_x - lerp(0, self.world_width, align_x) + self.offset_x)
        self.world_y = math.floor(anchor_y - lerp(0, self.world_height, align_y) + self.offset_y)
        self.world_inner_x = self.world_x + self.padding
        self.world_inner_y = self.world_y + self.padding

        if self.hooks.inner_layout is not None:
            self.hooks.inner_layout(self)
            return

        for child in self.children:
            child.recalculate_position(self.world_inner_x, self.world_inner_y)

    def layout(
        self,
        anchor_x: float = 0,
        anchor_y: float = 0,
        align_x: float = 0,
        align_y: float = 0,
    ) -> None:
        """Run the size pass then the position pass."""
        self.recalculate_size()
        self.recalculate_position(anchor_x, anchor_y, align_x, align_y)

    # Queries

    def find_element_at_position(self, x: float, y: float) -> Optional[Element]:
        """
        Find the navigable element under a point.

        Children are tested before their parent, in child order, so the
        first listed child that matches wins.

        Returns:
            The matching element, or None
        """
        if not self.visible:
            return None

        for child in self.children:
            found = child.find_element_at_position(x, y)
            if found is not None:
                return found

        if not self.navigable or not self.contains_point(x, y):
            return None
        if self.hooks.collision is not None and not self.hooks.collision(self, x, y):
            return None
        return self

    def find_element_nearest(
        self,
        target_x: float,
        target_y: float,
        clip_left: float = -math.inf,
        clip_top: float = -math.inf,
        clip_right: float = math.inf,
        clip_bottom: float = math.inf,
    ) -> Optional[Element]:
        """
        Find the navigable element closest to a target point.

        Only elements whose outer rect intersects the clip region are
        candidates. Among candidates at equal distance the first one
        found in traversal order wins.

        Returns:
            The nearest candidate, or None
        """
        found, _ = self._find_nearest(
            target_x, target_y, clip_left, clip_top, clip_right, clip_bottom
        )
        return found

    def _find_nearest(
        self,
        target_x: float,
        target_y: float,
        clip_left: float,
        clip_top: float,
        clip_right: float,
        clip_bottom: float,
    ) -> tuple[Optional[Element], float]:
        if not self.visible:
            return None, math.inf

        best: Optional[Element] = None
        best_distance = math.inf

        for child in self.children:
            found, distance = child._find_nearest(
                target_x, target_y, clip_left, clip_top, clip_right, clip_bottom
            )
            if found is not None and distance < best_distance:
                best, best_distance = found, distance

        if self.navigable and self.intersects_clip(clip_left, clip_top, clip_right, clip_bottom):
            distance = self.distance_to_point(target_x, target_y)
            if distance < best_distance:
                best, best_distance = self, distance

        return best, best_distance

    # Input

    def try_move(self, dx: int, dy: int, navigator: Optional[Navigator] = None) -> bool:
        """
        Offer directional input to this element's movement hooks.

        Returns:
            True if a hook consumed the movement
        """
        moved = False
        if dx != 0 and self.hooks.move_x is not None:
            self.hooks.move_x(self, dx, navigator)
            moved = True
        if dy != 0 and self.hooks.move_y is not None:
            self.hooks.move_y(self, dy, navigator)
            moved = True
        return moved

    # Drawing

    def draw(self, navigator: Optional[Navigator] = None, surface: Any = None) -> None:
        """
        Draw this subtree through its hooks.

        Children are drawn last-first, so a child listed first (which wins
        hit tests) is painted on top.
        """
        if not self.visible:
            return

        if self.hooks.draw_begin is not None:
            self.hooks.draw_begin(self, navigator, surface)
        if self.hooks.draw is not None:
            self.hooks.draw(self, navigator, surface)

        for child in reversed(self.children):
            child.draw(navigator, surface)

        if self.hooks.draw_end is not None:
            self.hooks.draw_end(self, navigator, surface)

    def draw_debug(
        self,
        navigator: Optional[Navigator],
        surface: DrawSurface,
        theme: Theme = DEFAULT_THEME,
    ) -> None:
        """Draw bounding rects for this subtree, coloured by focus state."""
        if not self.visible:
            return

        if self.hooks.draw_debug is not None:
            self.hooks.draw_debug(self, navigator, surface)

        if navigator is not None and navigator.element_in_focus is self:
            color = theme.debug.focused
        elif self.navigable:
            color = theme.debug.navigable
        else:
            color = theme.debug.plain

        surface.set_color(color)
        surface.draw_rect_outline(self.world_x, self.world_y, self.world_width, self.world_height)

        for child in reversed(self.children):
            child.draw_debug(navigator, surface, theme)

    def __repr__(self) -> str:
        return (
            f"Element(tag={self.tag!r}, pos=({self.world_x}, {self.world_y}), "
            f"size=({self.world_width}, {self.world_height}))"
        )


class ElementConfig(BaseModel):
    """
    Construction record for an Element.

    Validated with pydantic so a malformed tree fails when it is built,
    never in the middle of a tick.
    """

    model_config = ConfigDict(
        # Children and neighbours are Elements
        arbitrary_types_allowed=True,
        extra='forbid',
    )

    padding: float = 0
    width: Optional[float] = None
    height: Optional[float] = None
    offset_x: float = 0
    offset_y: float = 0
    children: List[Element] = Field(default_factory=list)
    nav_left: Optional[Element] = None
    nav_up: Optional[Element] = None
    nav_right: Optional[Element] = None
    nav_down: Optional[Element] = None
    navigable: bool = False
    visible: bool = True
    tag: str = ""
