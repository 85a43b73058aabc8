"""
Edge-triggered input normalization.

InputManager turns raw per-tick device samples (cursor position, held
directions and buttons) into discrete events that the Navigator reads.
The host calls the event setters once per tick, before navigating.

Usage:
    input_manager = InputManager()

    # Each tick
    input_manager.cursor_event(mouse_x, mouse_y)
    input_manager.move_event(left, up, right, down)
    input_manager.confirm_event(confirm_held)

    if input_manager.move_updated:
        step(input_manager.move_x, input_manager.move_y)
"""

from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Optional

from navui.core.config import NavigationConfig
from navui.core.geometry import sign

logger = logging.getLogger(__name__)


class InputMethod(Enum):
    """Which modality currently leads the input."""
    INDETERMINATE = auto()
    CURSOR = auto()
    KEYBOARD = auto()


class InputManager:
    """
    Normalizes raw input into edge-triggered per-tick state.

    Cursor and directional movement compete for modality: whichever
    updated last this tick owns `input_method`, with keyboard winning
    a tick where both changed.
    """

    def __init__(self, config: Optional[NavigationConfig] = None):
        self.config = config if config is not None else NavigationConfig()
        self.clear_events()

    def clear_events(self) -> None:
        """
        Reset every field to its default.

        Call when input focus is lost externally (e.g. window blur) so
        held buttons do not stay latched.
        """
        # Cursor
        self.cursor_x: Optional[float] = None
        self.cursor_y: Optional[float] = None
        self.cursor_x_delta: float = 0
        self.cursor_y_delta: float = 0
        self.cursor_updated: bool = False

        # Directional movement
        self.move_x: int = 0
        self.move_y: int = 0
        self.move_duration: int = 0
        self.move_updated: bool = False

        # Buttons
        self.tab: bool = False
        self.tab_delta: int = 0
        self.confirm: bool = False
        self.confirm_delta: int = 0
        self.cancel: bool = False
        self.cancel_delta: int = 0

        self.input_method = InputMethod.INDETERMINATE
        logger.debug("Input events cleared")

    # Event setters

    def cursor_event(self, x: Optional[float], y: Optional[float]) -> None:
        """
        Update the cursor position.

        Args:
            x, y: Cursor position, or None if the cursor is inactive
        """
        if x is None or y is None:
            x = y = None

        if x is not None and self.cursor_x is not None:
            self.cursor_x_delta = x - self.cursor_x
            self.cursor_y_delta = y - self.cursor_y
        else:
            self.cursor_x_delta = 0
            self.cursor_y_delta = 0

        self.cursor_x = x
        self.cursor_y = y
        self.cursor_updated = self.cursor_x_delta != 0 or self.cursor_y_delta != 0

        if self.cursor_updated:
            self.input_method = InputMethod.CURSOR
            self.move_duration = 0

    def move_event(
        self,
        left: float,
        up: float,
        right: float,
        down: float,
    ) -> None:
        """
        Update directional movement from four-way pressure.

        Fires `move_updated` on the first tick of a press, then at a
        fixed cadence once the hold exceeds the repeat delay.
        """
        move_x = sign(right - left)
        move_y = sign(down - up)

        if move_x != self.move_x or move_y != self.move_y:
            self.move_duration = 0
        if move_x != 0 or move_y != 0:
            self.move_duration += 1

        self.move_x = move_x
        self.move_y = move_y

        duration = self.move_duration
        if duration < self.config.repeat_delay:
            self.move_updated = duration == 1
        else:
            self.move_updated = duration % self.config.repeat_interval == 0

        if self.move_updated:
            self.input_method = InputMethod.KEYBOARD
            self.cursor_updated = False

    def tab_event(self, held: bool) -> None:
        """Update the tab button state."""
        self.tab_delta = int(bool(held)) - int(self.tab)
        self.tab = bool(held)

    def confirm_event(self, held: bool) -> None:
        """Update the confirm button state."""
        self.confirm_delta = int(bool(held)) - int(self.confirm)
        self.confirm = bool(held)

    def cancel_event(self, held: bool) -> None:
        """Update the cancel button state."""
        self.cancel_delta = int(bool(held)) - int(self.cancel)
        self.cancel = bool(held)

    # Read helpers

    @property
    def cursor_active(self) -> bool:
        """True if a cursor position is known."""
        return self.cursor_x is not None

    @property
    def confirm_pressed(self) -> bool:
        return self.confirm_delta > 0

    @property
    def confirm_released(self) -> bool:
        return self.confirm_delta < 0

    @property
    def movement(self) -> tuple[int, int]:
        """Current (move_x, move_y) pair."""
        return (self.move_x, self.move_y)

    def __repr__(self) -> str:
        return (
            f"InputManager(method={self.input_method.name}, "
            f"cursor=({self.cursor_x}, {self.cursor_y}), "
            f"move=({self.move_x}, {self.move_y}), confirm={self.confirm})"
        )
