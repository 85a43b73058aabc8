import os
import sys
import pytest
from unittest.mock import MagicMock, patch

# Ensure navui can be imported without installing
sys.path.append(os.getcwd())


@pytest.fixture(autouse=True)
def mock_pygame():
    """
    Global mock for pygame subsystems to allow headless testing.
    Autoused for all tests to prevent accidental window or device access.
    """
    with patch('pygame.init'), \
         patch('pygame.display'), \
         patch('pygame.joystick') as joystick, \
         patch('pygame.draw') as draw, \
         patch('pygame.font') as font, \
         patch('pygame.transform') as transform:

        joystick.get_count = MagicMock(return_value=0)

        yield MagicMock(joystick=joystick, draw=draw, font=font, transform=transform)


@pytest.fixture
def config():
    """Default navigation config."""
    from navui.core.config import NavigationConfig
    return NavigationConfig()


@pytest.fixture
def input_manager(config):
    """Fresh InputManager for each test."""
    from navui.input.manager import InputManager
    return InputManager(config)


@pytest.fixture
def navigator(input_manager):
    """Navigator bound to the test's InputManager."""
    from navui.ui.navigator import Navigator
    return Navigator(input_manager)


@pytest.fixture
def surface():
    """Recording stand-in for a host draw context."""
    return MagicMock(spec=[
        "set_color",
        "draw_rect",
        "draw_rect_outline",
        "draw_text",
        "draw_surface",
    ])


@pytest.fixture
def grid():
    """
    3x3 grid of navigable 20x20 cells, 10 apart, inside a padded root.

    Returns (root, cells) where cells[row][col].
    """
    from navui.ui.element import Element
    from navui.ui.presets import make_hstack, make_vstack

    cells = [
        [Element(width=20, height=20, navigable=True, tag=f"{r}{c}") for c in range(3)]
        for r in range(3)
    ]
    rows = [make_hstack(row, separation=10) for row in cells]
    root = make_vstack(rows, separation=10, padding=5)
    root.recalculate_size()
    root.recalculate_position(0, 0)
    return root, cells
