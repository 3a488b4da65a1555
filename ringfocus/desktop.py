"""In-memory stand-in for the compositor's window list."""

from __future__ import annotations

from typing import Iterable, Optional


class DemoWindow:
    """Window owned by a :class:`DemoDesktop`."""

    def __init__(self, desktop: "DemoDesktop", title: str) -> None:
        self._desktop = desktop
        self.title = title
        self.maximized = False

    def __repr__(self) -> str:
        return f"DemoWindow({self.title!r})"

    def is_maximized(self) -> bool:
        return self.maximized

    def set_maximized(self, maximized: bool) -> None:
        self.maximized = maximized

    def set_focused(self, focused: bool) -> None:
        if focused:
            self._desktop.focused = self
        elif self._desktop.focused is self:
            self._desktop.focused = None

    def raise_window(self) -> None:
        self._desktop.restack(self, top=True)

    def lower_window(self) -> None:
        self._desktop.restack(self, top=False)

    def swap(self, other: "DemoWindow") -> None:
        self._desktop.swap(self, other)


class DemoDesktop:
    """Ordered windows plus the focus and stacking state a compositor would own."""

    def __init__(self, titles: Iterable[str] = ()) -> None:
        self._windows: list[DemoWindow] = [DemoWindow(self, title) for title in titles]
        self._stack: list[DemoWindow] = list(self._windows)
        self.focused: Optional[DemoWindow] = self._windows[0] if self._windows else None

    @property
    def windows(self) -> list[DemoWindow]:
        return list(self._windows)

    @property
    def stacking_order(self) -> list[DemoWindow]:
        """Windows from bottom to top."""
        return list(self._stack)

    def get_focused(self) -> Optional[DemoWindow]:
        return self.focused

    def open_window(self, title: str) -> DemoWindow:
        window = DemoWindow(self, title)
        self._windows.append(window)
        self._stack.append(window)
        self.focused = window
        return window

    def close_window(self, window: DemoWindow) -> None:
        index = self._windows.index(window)
        self._windows.remove(window)
        self._stack.remove(window)
        if self.focused is window:
            self.focused = self._windows[index % len(self._windows)] if self._windows else None

    def swap(self, first: DemoWindow, second: DemoWindow) -> None:
        i = self._windows.index(first)
        j = self._windows.index(second)
        self._windows[i], self._windows[j] = second, first

    def restack(self, window: DemoWindow, *, top: bool) -> None:
        self._stack.remove(window)
        if top:
            self._stack.append(window)
        else:
            self._stack.insert(0, window)
