"""Port definition for the emitter.

Collaborators that only need to publish or subscribe should depend on
this Protocol rather than on :class:`mitt.emitter.Emitter`.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from mitt.types import EventHandlerMap, EventType, Handler, WildcardHandler


@runtime_checkable
class EventEmitter(Protocol):
    """Synchronous publish/subscribe over a shared handler registry."""

    all: EventHandlerMap

    def on(
        self,
        type: EventType,
        handler: Handler | WildcardHandler,
        context: Any = None,
    ) -> None: ...
    def off(
        self,
        type: EventType,
        handler: Handler | WildcardHandler | None = None,
    ) -> None: ...
    def emit(self, type: EventType, event: Any = None, *args: Any) -> None: ...
