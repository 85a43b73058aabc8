import pytest
from navui.core.config import NavigationConfig
from navui.core.context import UIContext
from navui.core.geometry import Rect, clamp, lerp, sign
from navui.input.manager import InputManager
from navui.ui.element import Element


def test_geometry_helpers():
    assert lerp(0, 10, 0.25) == 2.5
    assert clamp(5, 0, 3) == 3
    assert [sign(v) for v in (-2, 0, 0.1)] == [-1, 0, 1]


def test_rect_intersects_infinite_bounds():
    rect = Rect(10, 10, 5, 5)
    inf = float("inf")
    assert rect.intersects_bounds(-inf, -inf, inf, inf)
    assert not rect.intersects_bounds(15, -inf, inf, inf)
    assert rect.intersects_bounds(14, -inf, inf, inf)


def test_navigators_are_shared_by_name():
    context = UIContext()
    pause = context.navigator("pause")
    assert context.navigator("pause") is pause
    assert context.navigator("inventory") is not pause
    assert pause.input is context.input
    assert sorted(context.navigator_names) == ["inventory", "pause"]


def test_release_navigator():
    context = UIContext()
    context.navigator("pause")
    assert context.release_navigator("pause")
    assert not context.release_navigator("pause")


def test_config_flows_to_input():
    config = NavigationConfig(repeat_delay=10)
    context = UIContext(config)
    assert context.input.config is config
    assert context.navigator().config is config


def test_contexts_are_independent():
    first = UIContext()
    second = UIContext()
    first.input.confirm_event(True)
    assert not second.input.confirm


def test_tick_lays_out_and_navigates():
    context = UIContext()
    button = Element(width=10, height=10, navigable=True)
    root = Element(padding=2, children=[button])

    context.input.move_event(0, 0, 0, 1)
    navigator = context.tick(root, default_element=button)

    assert navigator.element_in_focus is button
    assert (button.world_x, button.world_y) == (2, 2)


def test_draw_with_debug_overlay(surface):
    context = UIContext(NavigationConfig(debug=True))
    root = Element(width=10, height=10)
    root.layout()

    context.draw(root, surface)
    surface.set_color.assert_called_once_with(context.theme.debug.plain)


def test_draw_without_debug_overlay(surface):
    context = UIContext()
    root = Element(width=10, height=10)
    context.draw(root, surface)
    surface.set_color.assert_not_called()


def test_clear_resets_input_and_focus():
    context = UIContext()
    element = Element(navigable=True)
    navigator = context.navigator()
    navigator.set_focused_element(element)
    context.input.confirm_event(True)

    context.clear()

    assert navigator.element_in_focus is None
    assert not context.input.confirm


def test_config_validation():
    from pydantic import ValidationError
    config = NavigationConfig()
    with pytest.raises(ValidationError):
        config.repeat_delay = 0
    with pytest.raises(ValidationError):
        NavigationConfig(unknown=True)


def test_tick_keeps_host_anchor():
    context = UIContext()
    button = Element(width=10, height=10, navigable=True)
    root = Element(padding=2, children=[button])

    for _ in range(2):
        context.tick(root, default_element=button,
                     anchor_x=320, anchor_y=240, align_x=0.5, align_y=0.5)
        assert (root.world_x, root.world_y) == (313, 233)
        assert (button.world_x, button.world_y) == (315, 235)


def test_context_adopts_input_manager_config():
    input_manager = InputManager(NavigationConfig(focus_bias=5))
    context = UIContext(input_manager=input_manager)
    assert context.config is input_manager.config
    assert context.navigator().config.focus_bias == 5

    with pytest.raises(ValueError):
        UIContext(NavigationConfig(), input_manager=input_manager)
