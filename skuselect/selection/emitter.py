"""Change notification boundary."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol, runtime_checkable

from skuselect.selection.resolver import VariantSummary

logger = logging.getLogger(__name__)

ChangeCallback = Callable[[VariantSummary], object]


@runtime_checkable
class ChangeEmitter(Protocol):
    """Receives the resolved summary each time a selection completes."""

    def emit(self, summary: VariantSummary) -> None: ...


class ChangeListeners:
    """ChangeEmitter that fans a summary out to registered callbacks.

    Callbacks run in registration order. An exception raised by a
    callback propagates to whoever triggered the toggle.
    """

    def __init__(self, *callbacks: ChangeCallback) -> None:
        self._callbacks: list[ChangeCallback] = list(callbacks)

    def __len__(self) -> int:
        return len(self._callbacks)

    def subscribe(self, callback: ChangeCallback) -> ChangeCallback:
        """Register a callback. Returns it, so this works as a decorator."""
        self._callbacks.append(callback)
        return callback

    def unsubscribe(self, callback: ChangeCallback) -> None:
        if callback in self._callbacks:
            self._callbacks.remove(callback)

    def emit(self, summary: VariantSummary) -> None:
        logger.debug("Emitting change for variant %r to %d listener(s)", summary.id, len(self))
        for callback in list(self._callbacks):
            callback(summary)
