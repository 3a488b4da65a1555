from __future__ import annotations

from typing import Iterable, Optional

import pytest

from ringfocus.desktop import DemoDesktop, DemoWindow
from ringfocus.navigator import (
    CircleDirection,
    Direction,
    FocusCycler,
    circularize_direction,
    move_focus,
    next_circular,
    on_next_circular,
    step_from,
    swap_windows,
)
from ringfocus.zipper import SequenceDirection


class FauxWindow:
    def __init__(self, name: str) -> None:
        self.name = name
        self.neighbours: dict[Direction, list["FauxWindow"]] = {}
        self.tag_windows: list["FauxWindow"] = []
        self.queried: list[Direction] = []

    def __repr__(self) -> str:
        return f"FauxWindow({self.name!r})"

    def in_direction(self, direction: Direction) -> Iterable["FauxWindow"]:
        self.queried.append(direction)
        return iter(self.neighbours.get(direction, []))

    def peers(self) -> Iterable["FauxWindow"]:
        return iter(self.tag_windows)


def test_step_from_wraps_in_both_directions() -> None:
    windows = ["a", "b", "c"]

    assert step_from(windows, "c", SequenceDirection.ORIGINAL) == "a"
    assert step_from(windows, "a", SequenceDirection.REVERSE) == "c"
    assert step_from(windows, "b", SequenceDirection.ORIGINAL) == "c"


def test_step_from_handles_empty_and_unknown_focus() -> None:
    assert step_from([], "a", SequenceDirection.ORIGINAL) is None
    assert step_from(["a", "b"], None, SequenceDirection.ORIGINAL) == "b"
    assert step_from(["a", "b"], "zzz", SequenceDirection.ORIGINAL) == "b"


def test_step_from_matches_by_key() -> None:
    windows = [{"id": 1}, {"id": 2}, {"id": 3}]

    result = step_from(windows, {"id": 3, "title": "stale"}, SequenceDirection.ORIGINAL, key=lambda w: w["id"])

    assert result == {"id": 1}


def test_circularize_direction() -> None:
    clockwise = circularize_direction(CircleDirection.CLOCKWISE)
    counter = circularize_direction(CircleDirection.COUNTER_CLOCKWISE)

    assert (clockwise.forward, clockwise.forward_cross, clockwise.backward, clockwise.backward_cross) == (
        Direction.RIGHT,
        Direction.DOWN,
        Direction.LEFT,
        Direction.UP,
    )
    assert (counter.forward, counter.forward_cross, counter.backward, counter.backward_cross) == (
        Direction.UP,
        Direction.LEFT,
        Direction.DOWN,
        Direction.RIGHT,
    )


def test_next_circular_prefers_the_forward_direction() -> None:
    focused = FauxWindow("focused")
    right = FauxWindow("right")
    below = FauxWindow("below")
    focused.neighbours = {Direction.RIGHT: [right], Direction.DOWN: [below]}

    assert next_circular(focused, CircleDirection.CLOCKWISE) is right
    assert focused.queried == [Direction.RIGHT]


def test_next_circular_wraps_to_the_farthest_window_behind() -> None:
    focused = FauxWindow("focused")
    near = FauxWindow("near")
    far = FauxWindow("far")
    focused.neighbours = {Direction.LEFT: [near, far]}

    assert next_circular(focused, CircleDirection.CLOCKWISE) is far


def test_next_circular_falls_back_to_peers() -> None:
    focused = FauxWindow("focused")
    other = FauxWindow("other")
    focused.tag_windows = [focused, other]

    assert next_circular(focused, CircleDirection.COUNTER_CLOCKWISE) is other
    assert next_circular(focused, CircleDirection.COUNTER_CLOCKWISE, fallback=False) is None


def test_on_next_circular_calls_action() -> None:
    focused = FauxWindow("focused")
    above = FauxWindow("above")
    focused.neighbours = {Direction.UP: [above]}
    calls: list[tuple[FauxWindow, FauxWindow]] = []

    assert on_next_circular(focused, CircleDirection.COUNTER_CLOCKWISE, lambda a, b: calls.append((a, b)))
    assert calls == [(focused, above)]


def test_on_next_circular_without_target_is_a_no_op() -> None:
    calls: list[object] = []

    assert not on_next_circular(None, CircleDirection.CLOCKWISE, lambda a, b: calls.append(b))
    assert not on_next_circular(FauxWindow("alone"), CircleDirection.CLOCKWISE, lambda a, b: calls.append(b))
    assert calls == []


def _cycler(desktop: DemoDesktop) -> FocusCycler:
    return FocusCycler(lambda: desktop.windows, desktop.get_focused)


def _titles(windows: Iterable[DemoWindow]) -> list[str]:
    return [window.title for window in windows]


def test_focus_next_and_previous_wrap() -> None:
    desktop = DemoDesktop(["a", "b", "c"])
    cycler = _cycler(desktop)

    assert cycler.focus_previous().title == "c"
    assert desktop.focused.title == "c"
    assert cycler.focus_next().title == "a"
    assert cycler.focus_next().title == "b"
    assert desktop.focused.title == "b"


def test_focus_follows_a_changed_window_list() -> None:
    desktop = DemoDesktop(["a", "b", "c"])
    cycler = _cycler(desktop)
    cycler.focus_next()

    desktop.open_window("d")
    desktop.swap(desktop.windows[0], desktop.windows[3])

    assert _titles(desktop.windows) == ["d", "b", "c", "a"]
    assert desktop.focused.title == "d"
    assert cycler.focus_next().title == "b"
    assert cycler.focus_previous().title == "d"
    assert cycler.focus_previous().title == "a"


def test_move_focus_carries_maximization() -> None:
    desktop = DemoDesktop(["a", "b", "c"])
    first, second, third = desktop.windows
    first.set_maximized(True)

    move_focus()(first, second)

    assert desktop.focused is second
    assert second.is_maximized()
    assert desktop.stacking_order == [first, third, second]


def test_swap_next_moves_the_focused_window() -> None:
    desktop = DemoDesktop(["a", "b", "c"])
    layouts: list[list[str]] = []
    cycler = FocusCycler(
        lambda: desktop.windows,
        desktop.get_focused,
        swap_action=swap_windows(lambda: layouts.append(_titles(desktop.windows))),
    )

    cycler.swap_next()
    assert _titles(desktop.windows) == ["b", "a", "c"]
    assert desktop.focused.title == "a"

    cycler.swap_previous()
    cycler.swap_previous()
    assert _titles(desktop.windows) == ["c", "b", "a"]
    assert layouts == [["b", "a", "c"], ["a", "b", "c"], ["c", "b", "a"]]
    assert desktop.focused.title == "a"


@pytest.mark.parametrize("titles", [[], ["only"]])
def test_cycler_is_a_no_op_without_a_target(titles: list[str]) -> None:
    desktop = DemoDesktop(titles)
    calls: list[object] = []
    cycler = _cycler(desktop)

    assert cycler.cycle(SequenceDirection.ORIGINAL, lambda a, b: calls.append(b)) is None
    assert calls == []


def test_cycler_ignores_focus_outside_the_window_list() -> None:
    desktop = DemoDesktop(["a", "b"])
    stray: Optional[DemoWindow] = DemoDesktop(["stray"]).focused
    calls: list[object] = []
    cycler = FocusCycler(lambda: desktop.windows, lambda: stray)

    assert cycler.cycle(SequenceDirection.ORIGINAL, lambda a, b: calls.append(b)) is None
    assert calls == []
