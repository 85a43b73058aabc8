"""
Navigation configuration.

The defaults are tuned UX constants; change them only if every surface
sharing an InputManager agrees on the new timing.

Usage:
    config = NavigationConfig(debug=True)
    context = UIContext(config)
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class NavigationConfig(BaseModel):
    """
    Timing and bias constants for input normalization and navigation.

    Attributes:
        repeat_delay: Ticks a direction must be held before auto-repeat starts
        repeat_interval: Ticks between auto-repeat events once repeating
        focus_bias: Units the search target is nudged toward the previous focus
        debug: Draw debug overlays when the host asks the context to draw
    """

    model_config = ConfigDict(
        validate_assignment=True,
        extra='forbid',
    )

    repeat_delay: int = Field(default=30, ge=1)
    repeat_interval: int = Field(default=4, ge=1)
    focus_bias: float = 3
    debug: bool = False
