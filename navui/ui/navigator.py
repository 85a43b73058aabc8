"""
Per-tick focus orchestration.

The Navigator reads one InputManager and moves focus over an element
tree: the cursor focuses what it hovers, directional input jumps to the
nearest element in that direction, and confirm drives the focused
element's pressed/drag/released hooks.

Usage:
    navigator = Navigator(input_manager)

    # Each tick, after feeding input_manager
    root.recalculate_size()
    root.recalculate_position(0, 0)
    navigator.navigate(root, default_element=first_button)

    # Later, when rendering
    root.draw(navigator, renderer)
"""

from __future__ import annotations

import logging
import weakref
from typing import TYPE_CHECKING, Optional

from navui.core.config import NavigationConfig
from navui.core.geometry import sign
from navui.input.manager import InputManager, InputMethod

if TYPE_CHECKING:
    from navui.ui.element import Element

logger = logging.getLogger(__name__)


class Navigator:
    """
    Focus state machine for one navigable surface.

    Focus references are weak: the Navigator never owns the tree it
    walks, so one Navigator can be handed from menu to menu to keep
    traversal continuity across a menu stack.
    """

    def __init__(
        self,
        input_manager: Optional[InputManager] = None,
        config: Optional[NavigationConfig] = None,
    ):
        if input_manager is None:
            input_manager = InputManager(config)
        elif config is not None and config is not input_manager.config:
            raise ValueError("config must be the input manager's config")
        self.input = input_manager

        self._focus: Optional[weakref.ref] = None
        self._last_focus: Optional[weakref.ref] = None

    @property
    def element_in_focus(self) -> Optional[Element]:
        """Currently focused element."""
        return self._focus() if self._focus is not None else None

    @property
    def last_element_in_focus(self) -> Optional[Element]:
        """Element focused before the last focus assignment."""
        return self._last_focus() if self._last_focus is not None else None

    def set_focused_element(self, element: Optional[Element]) -> None:
        """
        Focus an element (or None).

        On a change, the old focus's exit hook runs before the new
        focus's enter hook.
        """
        old_focus = self.element_in_focus

        self._last_focus = self._focus
        self._focus = weakref.ref(element) if element is not None else None

        if old_focus is element:
            return

        logger.debug(f"Focus changed: {old_focus!r} -> {element!r}")

        if old_focus is not None and old_focus.hooks.on_exit is not None:
            old_focus.hooks.on_exit(old_focus, self)
        if element is not None and element.hooks.on_enter is not None:
            element.hooks.on_enter(element, self)

    def clear(self) -> None:
        """Forget focus history without running any hooks."""
        self._focus = None
        self._last_focus = None

    def navigate(self, root: Element, default_element: Optional[Element] = None) -> None:
        """
        Run one tick of navigation over a tree.

        Args:
            root: Root of the laid-out element tree
            default_element: Focus target when directional input arrives
                with nothing focused; ignored unless navigable
        """
        if default_element is not None and not default_element.navigable:
            default_element = None

        input_manager = self.input
        confirm_pressed = input_manager.confirm_delta > 0
        confirm_held = input_manager.confirm
        confirm_released = input_manager.confirm_delta < 0

        focus = self.element_in_focus
        if focus is not None:
            self._dispatch(focus, confirm_pressed, confirm_held, confirm_released)

        # A held confirm owns the tick (dragging)
        if confirm_held:
            return

        if input_manager.cursor_updated:
            self.set_focused_element(
                root.find_element_at_position(input_manager.cursor_x, input_manager.cursor_y)
            )

        focus = self.element_in_focus
        if focus is not None and focus.try_move(input_manager.move_x, input_manager.move_y, self):
            return

        if not input_manager.move_updated:
            return

        if focus is None:
            self.set_focused_element(default_element)
            return

        target = self._neighbour_override(focus, input_manager.move_x, input_manager.move_y)
        if target is None:
            target = self._search(root, focus, input_manager.move_x, input_manager.move_y)
        if target is not None:
            self.set_focused_element(target)

    def _dispatch(
        self,
        focus: Element,
        confirm_pressed: bool,
        confirm_held: bool,
        confirm_released: bool,
    ) -> None:
        """Fire the focused element's confirm and step hooks."""
        input_manager = self.input
        hooks = focus.hooks

        if confirm_pressed and hooks.on_pressed is not None:
            hooks.on_pressed(focus, self)

        dragging = (
            (confirm_held and input_manager.cursor_updated) or
            (confirm_pressed and input_manager.input_method == InputMethod.CURSOR)
        )
        if dragging and hooks.on_drag is not None:
            hooks.on_drag(focus, self)

        if confirm_released and hooks.on_released is not None:
            hooks.on_released(focus, self)

        if hooks.on_step is not None:
            hooks.on_step(focus, self)

    def _neighbour_override(self, focus: Element, move_x: int, move_y: int) -> Optional[Element]:
        """Explicit neighbour for the dominant axis; horizontal wins ties."""
        if move_x != 0 and abs(move_x) >= abs(move_y):
            return focus.nav_left if move_x < 0 else focus.nav_right
        if move_y != 0:
            return focus.nav_up if move_y < 0 else focus.nav_down
        return None

    def _search(self, root: Element, focus: Element, move_x: int, move_y: int) -> Optional[Element]:
        """
        Spatial search for the next element in the movement direction.

        The clip region is the half-plane between the focused element's
        leading edge and the root's boundary, which excludes the focused
        element itself.
        """
        clip_left = root.world_x
        clip_top = root.world_y
        clip_right = root.world_x + root.world_width
        clip_bottom = root.world_y + root.world_height

        if move_x < 0:
            clip_right = focus.world_x
        elif move_x > 0:
            clip_left = focus.world_x + focus.world_width
        if move_y < 0:
            clip_bottom = focus.world_y
        elif move_y > 0:
            clip_top = focus.world_y + focus.world_height

        if clip_left >= clip_right or clip_top >= clip_bottom:
            return None

        target_x, target_y = focus.center

        # Nudge toward the previous focus to stop oscillating between
        # equally distant candidates
        last_focus = self.last_element_in_focus
        if last_focus is not None and last_focus is not focus:
            last_x, last_y = last_focus.center
            target_x += sign(last_x - target_x) * self.config.focus_bias
            target_y += sign(last_y - target_y) * self.config.focus_bias

        return root.find_element_nearest(
            target_x, target_y, clip_left, clip_top, clip_right, clip_bottom
        )

    @property
    def config(self) -> NavigationConfig:
        """Tuning shared with the input manager (repeat cadence, focus bias)."""
        return self.input.config

    def __repr__(self) -> str:
        return f"Navigator(focus={self.element_in_focus!r})"
