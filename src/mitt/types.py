"""Types shared by the emitter.

Event-type keys are any hashable value.  The string ``"*"`` is reserved
for wildcard registrations, which receive every emitted event.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Hashable

EventType = Hashable

WILDCARD: str = "*"

# handler(event, *args)
Handler = Callable[..., None]

# handler(type, event, *args)
WildcardHandler = Callable[..., None]


@dataclass(frozen=True)
class HandlerItem:
    """A registered handler and the context it is bound to when called."""

    handler: Handler | WildcardHandler
    context: Any = None


# Ordered registrations for a single event type
EventHandlerList = list[HandlerItem]

EventHandlerMap = dict[EventType, EventHandlerList]
