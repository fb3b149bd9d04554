"""mitt: functional event emitter / pubsub.

Handlers can be bound to a context at registration time and receive any
extra positional arguments passed to ``emit``.
"""

from mitt.emitter import Emitter, mitt
from mitt.ports import EventEmitter
from mitt.types import (
    WILDCARD,
    EventHandlerList,
    EventHandlerMap,
    EventType,
    Handler,
    HandlerItem,
    WildcardHandler,
)

__version__ = "0.1.0"

__all__ = [
    "WILDCARD",
    "Emitter",
    "EventEmitter",
    "EventHandlerList",
    "EventHandlerMap",
    "EventType",
    "Handler",
    "HandlerItem",
    "WildcardHandler",
    "mitt",
]
