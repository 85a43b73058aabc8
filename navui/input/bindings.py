"""
Menu actions and their default pygame bindings.

The device source merges every binding of an action, so the keyboard,
a D-pad and an analog stick can all steer the same menu.
"""

from enum import Enum, auto
from typing import NamedTuple

import pygame


class Action(Enum):
    """What a menu can be asked to do."""
    MENU_LEFT = auto()
    MENU_UP = auto()
    MENU_RIGHT = auto()
    MENU_DOWN = auto()
    CONFIRM = auto()
    CANCEL = auto()
    TAB = auto()


# Order of InputManager.move_event arguments
MOVE_ACTIONS = (Action.MENU_LEFT, Action.MENU_UP, Action.MENU_RIGHT, Action.MENU_DOWN)


class AxisBinding(NamedTuple):
    """Analog axis mapped to a pair of digital actions past a dead zone."""
    axis: int
    threshold: float
    positive: Action
    negative: Action

    def resolve(self, value: float) -> Action | None:
        if value > self.threshold:
            return self.positive
        if value < -self.threshold:
            return self.negative
        return None


DEFAULT_KEY_BINDINGS: dict[Action, list[int]] = {
    Action.MENU_LEFT: [pygame.K_LEFT, pygame.K_a],
    Action.MENU_UP: [pygame.K_UP, pygame.K_w],
    Action.MENU_RIGHT: [pygame.K_RIGHT, pygame.K_d],
    Action.MENU_DOWN: [pygame.K_DOWN, pygame.K_s],
    Action.CONFIRM: [pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE],
    Action.CANCEL: [pygame.K_ESCAPE, pygame.K_BACKSPACE],
    Action.TAB: [pygame.K_TAB],
}

# SDL controller layout: 0 = A, 1 = B, 4/5 = bumpers
DEFAULT_GAMEPAD_BINDINGS: dict[Action, list[int]] = {
    Action.CONFIRM: [0],
    Action.CANCEL: [1],
    Action.TAB: [4, 5],
}

# Left stick; pygame reports +y as down
DEFAULT_GAMEPAD_AXIS_BINDINGS: list[AxisBinding] = [
    AxisBinding(0, 0.5, Action.MENU_RIGHT, Action.MENU_LEFT),
    AxisBinding(1, 0.5, Action.MENU_DOWN, Action.MENU_UP),
]

# D-pad; hat +y is up
DEFAULT_GAMEPAD_HAT_BINDINGS: dict[tuple[int, int], Action] = {
    (-1, 0): Action.MENU_LEFT,
    (0, 1): Action.MENU_UP,
    (1, 0): Action.MENU_RIGHT,
    (0, -1): Action.MENU_DOWN,
}
