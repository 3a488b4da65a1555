"""Circular two-stack zipper used to step focus through an ordered sequence."""

from __future__ import annotations

from collections import deque
from enum import Enum
from typing import Callable, Deque, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class SequenceDirection(Enum):
    """Direction of motion, relative to the order of the source sequence."""

    ORIGINAL = "original"
    REVERSE = "reverse"


def _drain_into(target: Deque[T], source: Deque[T]) -> None:
    while source:
        target.appendleft(source.popleft())


class RingZipper(Generic[T]):
    """Zipper over a finite sequence, closed into a ring.

    ``_forward`` holds the focused element at its front followed by the rest
    of the sequence; ``_backward`` holds the elements before the focus with
    the nearest one first. Stepping past either end of the sequence wraps to
    the other end.

    Every public operation leaves the receiver untouched and returns a new
    zipper.
    """

    def __init__(self, values: Optional[Iterable[T]] = None) -> None:
        self._forward: Deque[T] = deque(values) if values is not None else deque()
        self._backward: Deque[T] = deque()

    @classmethod
    def new(cls) -> "RingZipper[T]":
        return cls()

    @classmethod
    def from_sequence(cls, values: Iterable[T]) -> "RingZipper[T]":
        """Open a zipper focused on the first element of ``values``."""
        return cls(values)

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[T]:
        return self.iter()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RingZipper):
            return NotImplemented
        return self._forward == other._forward and self._backward == other._backward

    def __repr__(self) -> str:
        return f"RingZipper(forward={list(self._forward)!r}, backward={list(self._backward)!r})"

    def __str__(self) -> str:
        return "[" + "".join(f" {value}," for value in self.iter()) + "]"

    def size(self) -> int:
        return len(self._forward) + len(self._backward)

    def focus(self) -> Optional[T]:
        """Return the focused element, or ``None`` when the zipper is empty."""
        if not self._forward:
            return None
        return self._forward[0]

    def circle_step(self, direction: SequenceDirection) -> "RingZipper[T]":
        """Move the focus one element in ``direction``, wrapping at the ends."""
        if self.size() == 0:
            return self
        zipper = self._copy()
        if direction is SequenceDirection.ORIGINAL:
            zipper._advance_focus(direction)
            zipper._rotate_stacks(direction)
        else:
            zipper._rotate_stacks(direction)
            zipper._advance_focus(direction)
        return zipper

    def refocus(self, predicate: Callable[[T], bool]) -> "RingZipper[T]":
        """Step forward until the focus satisfies ``predicate``.

        At most one lap is taken, so the current focus is the last element
        examined. Without a match the zipper comes back to its original focus.
        """
        if self.size() == 0:
            return self
        zipper = self._copy()
        for _ in range(self.size()):
            zipper._advance_focus(SequenceDirection.ORIGINAL)
            zipper._rotate_stacks(SequenceDirection.ORIGINAL)
            if predicate(zipper._forward[0]):
                break
        return zipper

    def reset_to_start(self) -> "RingZipper[T]":
        """Focus the first element of the original sequence."""
        zipper = self._copy()
        _drain_into(zipper._forward, zipper._backward)
        return zipper

    def reset_to_end(self) -> "RingZipper[T]":
        """Focus the last element of the original sequence."""
        if self.size() == 0:
            return self
        zipper = self._copy()
        _drain_into(zipper._backward, zipper._forward)
        zipper._advance_focus(SequenceDirection.REVERSE)
        return zipper

    def iter(self) -> "ZipperIter[T]":
        """Iterate from the focus in the original order, wrapping to the start."""
        return ZipperIter(self, SequenceDirection.ORIGINAL)

    def reverse_iter(self) -> "ZipperIter[T]":
        """Iterate from the focus in reverse order, wrapping to the end."""
        return ZipperIter(self, SequenceDirection.REVERSE)

    def _copy(self) -> "RingZipper[T]":
        zipper: RingZipper[T] = RingZipper()
        zipper._forward = deque(self._forward)
        zipper._backward = deque(self._backward)
        return zipper

    def _advance_focus(self, direction: SequenceDirection) -> None:
        if direction is SequenceDirection.ORIGINAL:
            assert self._forward, "advance from an empty forward stack"
            self._backward.appendleft(self._forward.popleft())
        else:
            assert self._backward, "advance from an empty backward stack"
            self._forward.appendleft(self._backward.popleft())

    def _rotate_stacks(self, direction: SequenceDirection) -> None:
        # Refill the stack we are moving into once it runs dry.
        if direction is SequenceDirection.ORIGINAL and not self._forward:
            _drain_into(self._forward, self._backward)
        elif direction is SequenceDirection.REVERSE and not self._backward:
            _drain_into(self._backward, self._forward)


class ZipperIter(Iterator[T]):
    """Lazy walk over every element of a zipper, starting at its focus."""

    def __init__(self, zipper: RingZipper[T], direction: SequenceDirection) -> None:
        self._zipper = zipper
        self._direction = direction
        self._count = zipper.size()
        self._cursor = 0

    def __iter__(self) -> "ZipperIter[T]":
        return self

    def __length_hint__(self) -> int:
        return self._count - self._cursor

    def __next__(self) -> T:
        if self._cursor >= self._count:
            raise StopIteration
        forward = self._zipper._forward
        backward = self._zipper._backward
        position = self._cursor
        self._cursor += 1

        if self._direction is SequenceDirection.ORIGINAL:
            if position < len(forward):
                return forward[position]
            # Past the end of forward, continue from the oldest predecessor.
            return backward[len(backward) - 1 - (position - len(forward))]

        if position == 0:
            return forward[0]
        if position <= len(backward):
            return backward[position - 1]
        # Past the start of the sequence, continue from its last element.
        return forward[len(forward) - (position - len(backward))]
