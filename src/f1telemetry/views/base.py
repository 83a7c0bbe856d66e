"""Common state and load guarding for view models."""

from __future__ import annotations

from typing import Awaitable, Callable

from ..data.repository import CachedRepository

Listener = Callable[[str], None]


class BaseView:
    """Busy/error/title state shared by every view.

    Each view is one consumer: while a load is in flight, further ``load``,
    ``refresh`` or other guarded calls on the same view return immediately.
    Listeners are told the name of each state attribute that changes.
    """

    def __init__(self, repo: CachedRepository, title: str = "") -> None:
        self._repo = repo
        self._listeners: list[Listener] = []
        self._is_busy = False
        self._error_message = ""
        self._title = title

    # ── Observable state ─────────────────────────────────────────────────────

    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def _notify(self, name: str) -> None:
        for listener in self._listeners:
            listener(name)

    @property
    def is_busy(self) -> bool:
        return self._is_busy

    @property
    def is_not_busy(self) -> bool:
        return not self._is_busy

    def _set_busy(self, value: bool) -> None:
        if value != self._is_busy:
            self._is_busy = value
            self._notify("is_busy")

    @property
    def error_message(self) -> str:
        return self._error_message

    @property
    def has_error(self) -> bool:
        return bool(self._error_message)

    def set_error(self, message: str) -> None:
        if message != self._error_message:
            self._error_message = message
            self._notify("error_message")

    def clear_error(self) -> None:
        self.set_error("")

    @property
    def title(self) -> str:
        return self._title

    @title.setter
    def title(self, value: str) -> None:
        if value != self._title:
            self._title = value
            self._notify("title")

    # ── Loading ──────────────────────────────────────────────────────────────

    async def _guarded(self, work: Callable[[], Awaitable[None]]) -> bool:
        """Run *work* unless this view is already busy; False if skipped."""
        if self._is_busy:
            return False
        self._set_busy(True)
        self.clear_error()
        try:
            await work()
        finally:
            self._set_busy(False)
        return True

    async def load(self) -> bool:
        """Load the view's data, reusing cached records where possible."""
        return await self._guarded(lambda: self._load(force_refresh=False))

    async def refresh(self) -> bool:
        """Drop the cache entries for this view's selector and load again."""
        return await self._guarded(lambda: self._load(force_refresh=True))

    async def _load(self, force_refresh: bool) -> None:
        raise NotImplementedError
