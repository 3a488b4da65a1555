"""Window cycling commands built on top of the ring zipper."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable, Iterator, Optional, Protocol, Sequence, TypeVar

from .zipper import RingZipper, SequenceDirection

logger = logging.getLogger(__name__)

T = TypeVar("T")
W = TypeVar("W")

Action = Callable[[W, W], None]


class Direction(Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


class CircleDirection(Enum):
    CLOCKWISE = "clockwise"
    COUNTER_CLOCKWISE = "counter_clockwise"


@dataclass(frozen=True)
class Circularized:
    """Screen directions searched, in order, when walking around a circle."""

    forward: Direction
    forward_cross: Direction
    backward: Direction
    backward_cross: Direction


def circularize_direction(circle: CircleDirection) -> Circularized:
    if circle is CircleDirection.CLOCKWISE:
        return Circularized(
            forward=Direction.RIGHT,
            forward_cross=Direction.DOWN,
            backward=Direction.LEFT,
            backward_cross=Direction.UP,
        )
    return Circularized(
        forward=Direction.UP,
        forward_cross=Direction.LEFT,
        backward=Direction.DOWN,
        backward_cross=Direction.RIGHT,
    )


class DirectionalWindow(Protocol):
    """Window that can report its neighbours on screen."""

    def in_direction(self, direction: Direction) -> Iterable[Any]: ...

    def peers(self) -> Iterable[Any]: ...


class ManagedWindow(Protocol):
    """Window operations used by the stock cycling actions."""

    def is_maximized(self) -> bool: ...

    def set_maximized(self, maximized: bool) -> None: ...

    def set_focused(self, focused: bool) -> None: ...

    def raise_window(self) -> None: ...

    def lower_window(self) -> None: ...

    def swap(self, other: Any) -> None: ...


def step_from(
    sequence: Iterable[T],
    current: Optional[T],
    direction: SequenceDirection,
    *,
    key: Optional[Callable[[T], object]] = None,
) -> Optional[T]:
    """Return the element one step from ``current`` in ``direction``.

    The zipper is rebuilt from ``sequence`` and refocused on ``current``
    before stepping, so the sequence may have changed since the last call.
    """
    zipper = RingZipper.from_sequence(sequence)
    if current is not None:
        if key is None:
            zipper = zipper.refocus(lambda candidate: candidate == current)
        else:
            target = key(current)
            zipper = zipper.refocus(lambda candidate: key(candidate) == target)
    return zipper.circle_step(direction).focus()


def _circular_candidates(focused: DirectionalWindow, circle: CircleDirection, fallback: bool) -> Iterator[Any]:
    directions = circularize_direction(circle)
    yield from focused.in_direction(directions.forward)
    yield from focused.in_direction(directions.forward_cross)
    # Windows behind the focus are reported nearest first; the circle wants the farthest.
    yield from reversed(list(focused.in_direction(directions.backward)))
    yield from reversed(list(focused.in_direction(directions.backward_cross)))
    if fallback:
        # Needed for maximized windows, which have no neighbours on screen.
        yield from (peer for peer in focused.peers() if peer != focused)


def next_circular(
    focused: DirectionalWindow,
    circle: CircleDirection,
    *,
    fallback: bool = True,
) -> Optional[Any]:
    """Find the next window around ``circle`` from ``focused``."""
    return next(_circular_candidates(focused, circle, fallback), None)


def on_next_circular(
    focused: Optional[DirectionalWindow],
    circle: CircleDirection,
    action: Action,
    *,
    fallback: bool = True,
) -> bool:
    if focused is None:
        return False
    target = next_circular(focused, circle, fallback=fallback)
    if target is None:
        logger.debug("No window %s of %r", circle.value, focused)
        return False
    action(focused, target)
    return True


def move_focus() -> Action:
    """Action that hands focus to the target, carrying maximization along."""

    def apply(focused: ManagedWindow, target: ManagedWindow) -> None:
        if focused.is_maximized():
            focused.lower_window()
            target.set_maximized(True)
            target.raise_window()
        target.set_focused(True)

    return apply


def swap_windows(on_swap: Optional[Callable[[], None]] = None) -> Action:
    """Action that exchanges the two windows and keeps the moved one focused."""

    def apply(focused: ManagedWindow, target: ManagedWindow) -> None:
        focused.swap(target)
        focused.set_focused(True)
        if on_swap is not None:
            on_swap()

    return apply


class FocusCycler:
    """Cycles focus through a live window list.

    Nothing is remembered between calls: each command asks ``windows`` for the
    current ordering and ``focused`` for the current focus, then rebuilds the
    zipper from scratch.
    """

    def __init__(
        self,
        windows: Callable[[], Sequence[Any]],
        focused: Callable[[], Optional[Any]],
        *,
        focus_action: Optional[Action] = None,
        swap_action: Optional[Action] = None,
    ) -> None:
        self._windows = windows
        self._focused = focused
        self._focus_action = focus_action or move_focus()
        self._swap_action = swap_action or swap_windows()

    def cycle(self, direction: SequenceDirection, action: Action) -> Optional[Any]:
        """Step the focus once in ``direction`` and apply ``action``."""
        current = self._focused()
        if current is None:
            logger.debug("Nothing focused, ignoring %s cycle", direction.value)
            return None
        zipper = RingZipper.from_sequence(self._windows()).refocus(lambda window: window == current)
        if zipper.focus() != current:
            logger.debug("Focused window %r is not in the window list", current)
            return None
        target = zipper.circle_step(direction).focus()
        if target is None or target == current:
            return None
        logger.debug("Cycling %s from %r to %r", direction.value, current, target)
        action(current, target)
        return target

    def focus_next(self) -> Optional[Any]:
        return self.cycle(SequenceDirection.ORIGINAL, self._focus_action)

    def focus_previous(self) -> Optional[Any]:
        return self.cycle(SequenceDirection.REVERSE, self._focus_action)

    def swap_next(self) -> Optional[Any]:
        return self.cycle(SequenceDirection.ORIGINAL, self._swap_action)

    def swap_previous(self) -> Optional[Any]:
        return self.cycle(SequenceDirection.REVERSE, self._swap_action)
