"""Clipboard sink — where copied suggestion text ends up."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from src.config import settings


@runtime_checkable
class Clipboard(Protocol):
    """Protocol that all clipboard sinks must satisfy."""

    def copy(self, text: str) -> None:
        """Place *text* on the clipboard. Fire-and-forget."""
        ...


class MemoryClipboard:
    """Process-local clipboard that remembers recent copies."""

    def __init__(self, history_size: int | None = None) -> None:
        self._history_size = max(
            1, history_size if history_size is not None else settings.clipboard_history_size
        )
        self._history: list[str] = []

    def copy(self, text: str) -> None:
        self._history.append(text)
        if len(self._history) > self._history_size:
            self._history = self._history[-self._history_size :]

    @property
    def text(self) -> str:
        """Current clipboard contents ("" when nothing was copied)."""
        return self._history[-1] if self._history else ""

    @property
    def history(self) -> list[str]:
        """Copied strings, oldest first."""
        return list(self._history)
