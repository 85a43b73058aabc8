"""
Pygame device input source.

Tracks held keys, gamepad buttons and the mouse from pygame events and
feeds the merged state into an InputManager once per tick.

Usage:
    source = PygameInputSource()

    for event in pygame.event.get():
        source.process_event(event)

    source.feed(input_manager)
    navigator.navigate(root)
"""

from __future__ import annotations

import logging
from typing import Optional

import pygame

from navui.core.geometry import sign
from navui.input.bindings import (
    Action,
    MOVE_ACTIONS,
    DEFAULT_KEY_BINDINGS,
    DEFAULT_GAMEPAD_BINDINGS,
    DEFAULT_GAMEPAD_AXIS_BINDINGS,
    DEFAULT_GAMEPAD_HAT_BINDINGS,
)
from navui.input.manager import InputManager

logger = logging.getLogger(__name__)


class PygameInputSource:
    """
    Samples pygame input for an InputManager.

    Held state is kept per source (keys, gamepad buttons, axes, hat) so
    releasing one binding does not release an action another source
    still holds.
    """

    def __init__(self):
        self._keys_pressed: set[int] = set()
        self._buttons_pressed: set[int] = set()
        self._axis_actions: set[Action] = set()
        self._hat_actions: set[Action] = set()

        self._mouse_pos: Optional[tuple[int, int]] = None
        self._mouse_held = False
        self._window_focused = True
        self._focus_lost = False

        self._key_bindings = {action: list(keys) for action, keys in DEFAULT_KEY_BINDINGS.items()}
        self._gamepad_bindings = {action: list(b) for action, b in DEFAULT_GAMEPAD_BINDINGS.items()}
        self._gamepad_axis_bindings = list(DEFAULT_GAMEPAD_AXIS_BINDINGS)
        self._gamepad_hat_bindings = DEFAULT_GAMEPAD_HAT_BINDINGS.copy()

        self._gamepads: dict[int, pygame.joystick.JoystickType] = {}
        pygame.joystick.init()
        self._refresh_gamepads()

    def _refresh_gamepads(self) -> None:
        """Refresh connected gamepads."""
        self._gamepads.clear()
        for i in range(pygame.joystick.get_count()):
            joy = pygame.joystick.Joystick(i)
            joy.init()
            self._gamepads[joy.get_instance_id()] = joy
        logger.debug(f"{len(self._gamepads)} gamepad(s) connected")

    # Key binding management

    def bind_key(self, action: Action, key: int) -> None:
        """Add a key binding for an action."""
        keys = self._key_bindings.setdefault(action, [])
        if key not in keys:
            keys.append(key)

    def unbind_key(self, action: Action, key: int) -> None:
        """Remove a key binding for an action."""
        if key in self._key_bindings.get(action, []):
            self._key_bindings[action].remove(key)

    def get_bindings(self, action: Action) -> list[int]:
        """Get all key bindings for an action."""
        return self._key_bindings.get(action, []).copy()

    # State

    def is_action_held(self, action: Action) -> bool:
        """Check if any bound source currently holds an action."""
        if any(key in self._keys_pressed for key in self._key_bindings.get(action, [])):
            return True
        if any(b in self._buttons_pressed for b in self._gamepad_bindings.get(action, [])):
            return True
        return action in self._axis_actions or action in self._hat_actions

    @property
    def mouse_pos(self) -> Optional[tuple[int, int]]:
        """Mouse position, or None while the cursor is outside the window."""
        return self._mouse_pos

    # Event processing

    def process_event(self, event: pygame.event.Event) -> None:
        """Process a pygame event."""
        if event.type == pygame.KEYDOWN:
            self._keys_pressed.add(event.key)

        elif event.type == pygame.KEYUP:
            self._keys_pressed.discard(event.key)

        elif event.type == pygame.MOUSEMOTION:
            self._mouse_pos = (event.pos[0], event.pos[1])

        elif event.type == pygame.MOUSEBUTTONDOWN:
            if event.button == 1:
                self._mouse_held = True

        elif event.type == pygame.MOUSEBUTTONUP:
            if event.button == 1:
                self._mouse_held = False

        elif event.type == pygame.WINDOWLEAVE:
            self._mouse_pos = None

        elif event.type == pygame.WINDOWFOCUSLOST:
            self._window_focused = False
            self._focus_lost = True
            self._release_all()

        elif event.type == pygame.WINDOWFOCUSGAINED:
            self._window_focused = True

        elif event.type in (pygame.JOYDEVICEADDED, pygame.JOYDEVICEREMOVED):
            self._refresh_gamepads()

        elif event.type == pygame.JOYBUTTONDOWN:
            self._buttons_pressed.add(event.button)

        elif event.type == pygame.JOYBUTTONUP:
            self._buttons_pressed.discard(event.button)

        elif event.type == pygame.JOYAXISMOTION:
            self._process_axis(event.axis, event.value)

        elif event.type == pygame.JOYHATMOTION:
            self._process_hat(*event.value)

    def _process_hat(self, x: int, y: int) -> None:
        """Resolve each hat axis on its own so diagonals hold both directions."""
        self._hat_actions.clear()
        for direction in ((sign(x), 0), (0, sign(y))):
            action = self._gamepad_hat_bindings.get(direction)
            if action is not None:
                self._hat_actions.add(action)

    def _process_axis(self, axis: int, value: float) -> None:
        """Replace the actions held by one axis."""
        for binding in self._gamepad_axis_bindings:
            if binding.axis != axis:
                continue
            self._axis_actions.discard(binding.positive)
            self._axis_actions.discard(binding.negative)
            action = binding.resolve(value)
            if action is not None:
                self._axis_actions.add(action)

    def _release_all(self) -> None:
        self._keys_pressed.clear()
        self._buttons_pressed.clear()
        self._axis_actions.clear()
        self._hat_actions.clear()
        self._mouse_held = False

    # Frame update

    def feed(self, input_manager: InputManager) -> None:
        """
        Push this tick's sample into an InputManager.

        Call once per tick, before navigating. A window blur since the
        last tick clears the manager so no button stays latched.
        """
        if self._focus_lost:
            self._focus_lost = False
            logger.info("Window focus lost, clearing input events")
            input_manager.clear_events()
            return

        if self._window_focused and self._mouse_pos is not None:
            input_manager.cursor_event(*self._mouse_pos)
        else:
            input_manager.cursor_event(None, None)

        input_manager.move_event(*(self.is_action_held(action) for action in MOVE_ACTIONS))
        input_manager.tab_event(self.is_action_held(Action.TAB))
        input_manager.confirm_event(self._mouse_held or self.is_action_held(Action.CONFIRM))
        input_manager.cancel_event(self.is_action_held(Action.CANCEL))
