import pytest
from navui.core.config import NavigationConfig
from navui.input.manager import InputMethod
from navui.ui.element import Element, ElementHooks
from navui.ui.navigator import Navigator


def recording_hooks(log, name):
    def record(event):
        return lambda element, navigator: log.append((name, event))

    return ElementHooks(
        on_pressed=record("pressed"),
        on_drag=record("drag"),
        on_released=record("released"),
        on_enter=record("enter"),
        on_exit=record("exit"),
        on_step=record("step"),
    )


def press(input_manager, left=0, up=0, right=0, down=0):
    input_manager.move_event(left, up, right, down)


def release_move(input_manager):
    input_manager.move_event(0, 0, 0, 0)


# Focus transitions

def test_set_focused_element_hook_order(navigator):
    log = []
    a = Element(hooks=recording_hooks(log, "a"))
    b = Element(hooks=recording_hooks(log, "b"))

    navigator.set_focused_element(a)
    navigator.set_focused_element(b)

    assert log == [("a", "enter"), ("a", "exit"), ("b", "enter")]
    assert navigator.element_in_focus is b
    assert navigator.last_element_in_focus is a


def test_set_same_element_fires_nothing(navigator):
    log = []
    a = Element(hooks=recording_hooks(log, "a"))
    navigator.set_focused_element(a)
    log.clear()

    navigator.set_focused_element(a)
    assert log == []


def test_clear_drops_focus_silently(navigator):
    log = []
    a = Element(hooks=recording_hooks(log, "a"))
    navigator.set_focused_element(a)
    log.clear()

    navigator.clear()
    assert navigator.element_in_focus is None
    assert navigator.last_element_in_focus is None
    assert log == []


def test_default_navigator_owns_input_manager():
    navigator = Navigator()
    assert navigator.input is not None
    assert navigator.config.focus_bias == 3


# Directional navigation

def test_first_move_focuses_default(grid, navigator, input_manager):
    root, cells = grid
    press(input_manager, down=1)
    navigator.navigate(root, cells[1][1])
    assert navigator.element_in_focus is cells[1][1]


def test_non_navigable_default_is_ignored(grid, navigator, input_manager):
    root, cells = grid
    cells[1][1].navigable = False
    press(input_manager, down=1)
    navigator.navigate(root, cells[1][1])
    assert navigator.element_in_focus is None


@pytest.mark.parametrize("move, expected", [
    ((1, 0, 0, 0), (1, 0)),
    ((0, 1, 0, 0), (0, 1)),
    ((0, 0, 1, 0), (1, 2)),
    ((0, 0, 0, 1), (2, 1)),
])
def test_spatial_step_from_centre(grid, navigator, input_manager, move, expected):
    root, cells = grid
    navigator.set_focused_element(cells[1][1])

    press(input_manager, *move)
    navigator.navigate(root)

    row, col = expected
    assert navigator.element_in_focus is cells[row][col]


def test_spatial_step_at_edge_keeps_focus(grid, navigator, input_manager):
    root, cells = grid
    navigator.set_focused_element(cells[0][0])
    press(input_manager, left=1)
    navigator.navigate(root)
    assert navigator.element_in_focus is cells[0][0]


def test_walk_right_across_row(grid, navigator, input_manager):
    root, cells = grid
    navigator.set_focused_element(cells[2][0])

    for expected in (cells[2][1], cells[2][2], cells[2][2]):
        press(input_manager, right=1)
        navigator.navigate(root)
        release_move(input_manager)
        navigator.navigate(root)
        assert navigator.element_in_focus is expected


def test_held_direction_waits_for_repeat(grid, navigator, input_manager):
    root, cells = grid
    navigator.set_focused_element(cells[0][0])

    for _ in range(31):
        press(input_manager, right=1)
        navigator.navigate(root)
    assert navigator.element_in_focus is cells[0][1]

    press(input_manager, right=1)
    navigator.navigate(root)
    assert navigator.element_in_focus is cells[0][2]


def test_neighbour_override_wins(grid, navigator, input_manager):
    root, cells = grid
    cells[0][0].nav_right = cells[2][2]
    navigator.set_focused_element(cells[0][0])

    press(input_manager, right=1)
    navigator.navigate(root)
    assert navigator.element_in_focus is cells[2][2]


def test_override_only_for_its_axis(grid, navigator, input_manager):
    root, cells = grid
    cells[0][0].nav_right = cells[2][2]
    navigator.set_focused_element(cells[0][0])

    press(input_manager, down=1)
    navigator.navigate(root)
    assert navigator.element_in_focus is cells[1][0]


def test_bias_toward_previous_focus():
    # Two candidates below the focus, equally distant from its centre
    top = Element(width=20, height=20, navigable=True, offset_x=20)
    left = Element(width=20, height=20, navigable=True, offset_y=40)
    right = Element(width=20, height=20, navigable=True, offset_x=40, offset_y=40)
    root = Element(width=80, height=80, children=[left, right, top])
    root.recalculate_size()
    root.recalculate_position(0, 0)

    navigator = Navigator()
    input_manager = navigator.input

    # Without history the first candidate in traversal order wins
    navigator.set_focused_element(top)
    press(input_manager, down=1)
    navigator.navigate(root)
    assert navigator.element_in_focus is left

    # Coming back up from the right, going down again returns right
    navigator.set_focused_element(right)
    navigator.set_focused_element(top)
    release_move(input_manager)
    press(input_manager, down=1)
    navigator.navigate(root)
    assert navigator.element_in_focus is right


# Cursor

def test_cursor_motion_hit_tests(grid, navigator, input_manager):
    root, cells = grid
    input_manager.cursor_event(0, 0)
    input_manager.cursor_event(40, 70)
    navigator.navigate(root)
    assert navigator.element_in_focus is cells[2][1]


def test_cursor_over_gap_clears_focus(grid, navigator, input_manager):
    root, cells = grid
    navigator.set_focused_element(cells[0][0])
    input_manager.cursor_event(0, 0)
    input_manager.cursor_event(30, 30)
    navigator.navigate(root)
    assert navigator.element_in_focus is None


def test_still_cursor_keeps_keyboard_focus(grid, navigator, input_manager):
    root, cells = grid
    navigator.set_focused_element(cells[0][0])
    input_manager.cursor_event(70, 70)
    input_manager.cursor_event(70, 70)
    navigator.navigate(root)
    assert navigator.element_in_focus is cells[0][0]


# Confirm dispatch

def test_keyboard_press_and_release(navigator, input_manager):
    log = []
    e = Element(width=10, height=10, navigable=True, hooks=recording_hooks(log, "e"))
    root = Element(children=[e])
    root.recalculate_size()
    root.recalculate_position(0, 0)
    navigator.set_focused_element(e)
    log.clear()

    input_manager.confirm_event(True)
    navigator.navigate(root)
    assert log == [("e", "pressed"), ("e", "step")]

    log.clear()
    input_manager.confirm_event(True)
    navigator.navigate(root)
    assert log == [("e", "step")]

    log.clear()
    input_manager.confirm_event(False)
    navigator.navigate(root)
    assert log == [("e", "released"), ("e", "step")]


def test_cursor_press_drags(navigator, input_manager):
    log = []
    e = Element(width=50, height=50, navigable=True, hooks=recording_hooks(log, "e"))
    root = Element(children=[e])
    root.recalculate_size()
    root.recalculate_position(0, 0)

    input_manager.cursor_event(1, 1)
    input_manager.cursor_event(10, 10)
    navigator.navigate(root)
    assert input_manager.input_method == InputMethod.CURSOR
    assert navigator.element_in_focus is e
    log.clear()

    # Press without motion still starts a drag in cursor mode
    input_manager.cursor_event(10, 10)
    input_manager.confirm_event(True)
    navigator.navigate(root)
    assert log == [("e", "pressed"), ("e", "drag"), ("e", "step")]

    log.clear()
    input_manager.cursor_event(20, 10)
    input_manager.confirm_event(True)
    navigator.navigate(root)
    assert log == [("e", "drag"), ("e", "step")]


def test_held_confirm_blocks_focus_change(grid, navigator, input_manager):
    root, cells = grid
    navigator.set_focused_element(cells[0][0])

    input_manager.confirm_event(True)
    input_manager.cursor_event(0, 0)
    input_manager.cursor_event(70, 70)
    navigator.navigate(root)
    assert navigator.element_in_focus is cells[0][0]

    press(input_manager, right=1)
    navigator.navigate(root)
    assert navigator.element_in_focus is cells[0][0]


def test_step_fires_every_focused_tick(navigator, input_manager):
    steps = []
    e = Element(navigable=True, hooks=ElementHooks(on_step=lambda el, nav: steps.append(el)))
    root = Element(children=[e])
    navigator.set_focused_element(e)

    for _ in range(3):
        navigator.navigate(root)
    assert len(steps) == 3


# Movement override

def test_move_hook_consumes_movement(grid, navigator, input_manager):
    root, cells = grid
    moves = []
    cells[1][1].hooks.move_x = lambda e, d, nav: moves.append(d)
    navigator.set_focused_element(cells[1][1])

    press(input_manager, right=1)
    navigator.navigate(root)
    assert moves == [1]
    assert navigator.element_in_focus is cells[1][1]

    # Vertical movement is not consumed
    press(input_manager, down=1)
    navigator.navigate(root)
    assert navigator.element_in_focus is cells[2][1]


def test_navigator_shares_input_manager_config(input_manager):
    navigator = Navigator(input_manager, input_manager.config)
    assert navigator.config is input_manager.config

    with pytest.raises(ValueError):
        Navigator(input_manager, NavigationConfig(focus_bias=10))
