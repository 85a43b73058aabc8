"""
Explicit UI context.

Hosts build one UIContext and pass it around instead of relying on a
process-wide default input manager or menu table. Everything the core
shares between surfaces hangs off this object.

Usage:
    context = UIContext(NavigationConfig(debug=True))
    pause_menu = context.navigator("pause")

    # Each tick
    source.feed(context.input)
    context.tick(root, default_element=resume_button)
    context.draw(root, renderer)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Optional

from navui.core.config import NavigationConfig
from navui.input.manager import InputManager
from navui.ui.navigator import Navigator
from navui.ui.theme import DEFAULT_THEME, Theme

if TYPE_CHECKING:
    from navui.ui.element import Element

logger = logging.getLogger(__name__)


class UIContext:
    """
    Shared state for a set of navigable surfaces.

    Owns one InputManager and a table of named Navigators. Surfaces that
    share a name share a Navigator, which keeps focus continuity when one
    menu replaces another.
    """

    def __init__(
        self,
        config: Optional[NavigationConfig] = None,
        input_manager: Optional[InputManager] = None,
        theme: Theme = DEFAULT_THEME,
    ):
        if input_manager is None:
            input_manager = InputManager(config)
        elif config is not None and config is not input_manager.config:
            raise ValueError("config must be the input manager's config")
        self.input = input_manager
        self.config = input_manager.config
        self.theme = theme
        self._navigators: Dict[str, Navigator] = {}

    def navigator(self, name: str = "default") -> Navigator:
        """Get the named Navigator, creating it on first use."""
        if name not in self._navigators:
            logger.debug(f"Creating navigator '{name}'")
            self._navigators[name] = Navigator(self.input, self.config)
        return self._navigators[name]

    def release_navigator(self, name: str) -> bool:
        """
        Drop a named Navigator.

        Returns:
            True if a Navigator with that name existed
        """
        return self._navigators.pop(name, None) is not None

    @property
    def navigator_names(self) -> list[str]:
        return list(self._navigators)

    def tick(
        self,
        root: Element,
        default_element: Optional[Element] = None,
        name: str = "default",
        anchor_x: float = 0,
        anchor_y: float = 0,
        align_x: float = 0,
        align_y: float = 0,
    ) -> Navigator:
        """
        Lay out a tree and navigate it once.

        Args:
            root: Root of the element tree
            default_element: Focus target for the first directional input
            name: Navigator to run
            anchor_x, anchor_y, align_x, align_y: Root placement, as for
                `Element.recalculate_position`

        Returns:
            The Navigator that ran
        """
        root.layout(anchor_x, anchor_y, align_x, align_y)

        navigator = self.navigator(name)
        navigator.navigate(root, default_element)
        return navigator

    def draw(self, root: Element, surface: Any, name: str = "default") -> None:
        """Draw a tree, with the debug overlay when configured."""
        navigator = self._navigators.get(name)
        root.draw(navigator, surface)
        if self.config.debug:
            root.draw_debug(navigator, surface, self.theme)

    def clear(self) -> None:
        """Reset input and every Navigator's focus, e.g. between sessions."""
        self.input.clear_events()
        for navigator in self._navigators.values():
            navigator.clear()
