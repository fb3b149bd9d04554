"""In-memory event emitter.

Functional publish/subscribe.  Handlers are called synchronously in
registration order; handlers registered under ``"*"`` run after the
type-matched ones and also receive the event type.  Implements the
``EventEmitter`` port.
"""

from __future__ import annotations

from types import BuiltinMethodType, MethodType, MethodWrapperType
from typing import Any

from mitt.config.logging import get_logger, trace_dispatch_enabled
from mitt.types import (
    WILDCARD,
    EventHandlerMap,
    EventType,
    Handler,
    HandlerItem,
    WildcardHandler,
)

logger = get_logger(__name__)

_BOUND_METHOD_TYPES = (MethodType, BuiltinMethodType, MethodWrapperType)


def _same_handler(registered: Any, handler: Any) -> bool:
    # Bound methods are rebuilt on every attribute access; their __eq__
    # compares __self__ by identity.
    if type(registered) is type(handler) and isinstance(handler, _BOUND_METHOD_TYPES):
        return registered == handler
    return registered is handler


def _invoke(item: HandlerItem, *args: Any) -> None:
    if item.context is None:
        item.handler(*args)
    else:
        item.handler(item.context, *args)


class Emitter:
    """Synchronous event emitter over a handler registry.

    The registry is exposed as :attr:`all` so callers may inspect or seed
    it.  Passing the same mapping to several emitters makes them share
    registrations.
    """

    def __init__(self, registry: EventHandlerMap | None = None) -> None:
        self.all: EventHandlerMap = {} if registry is None else registry

    def on(
        self,
        type: EventType,
        handler: Handler | WildcardHandler,
        context: Any = None,
    ) -> None:
        """Register *handler* for *type*, or ``"*"`` for all events.

        When *context* is given the handler is called with it as its first
        argument, the way a method receives ``self``.
        """
        handlers = self.all.get(type)
        item = HandlerItem(handler=handler, context=context)
        if handlers is None:
            self.all[type] = [item]
        else:
            handlers.append(item)
        logger.debug("handler_registered", event_type=type, handlers=len(self.all[type]))

    def off(
        self,
        type: EventType,
        handler: Handler | WildcardHandler | None = None,
    ) -> None:
        """Remove *handler* from *type*.

        Only the first matching registration is removed.  If *handler* is
        omitted, all handlers of the given type are removed.
        """
        handlers = self.all.get(type)
        if handlers is None:
            return

        if handler is None:
            self.all[type] = []
            logger.debug("handlers_cleared", event_type=type)
            return

        for index, item in enumerate(handlers):
            if _same_handler(item.handler, handler):
                del handlers[index]
                logger.debug("handler_removed", event_type=type, handlers=len(handlers))
                return

    def emit(self, type: EventType, event: Any = None, *args: Any) -> None:
        """Invoke all handlers for *type*, then all ``"*"`` handlers.

        Typed handlers receive ``(event, *args)``; wildcard handlers receive
        ``(type, event, *args)``.  Each pass iterates over a copy, so
        handlers may register or remove handlers without affecting the
        current delivery.  Exceptions raised by a handler propagate and
        skip the handlers after it.

        Emitting ``"*"`` directly is not a broadcast to typed handlers.
        """
        handlers = self.all.get(type)
        if trace_dispatch_enabled():
            logger.debug(
                "event_emitted",
                event_type=type,
                handlers=len(handlers or ()),
                wildcard_handlers=len(self.all.get(WILDCARD) or ()),
            )

        if handlers:
            for item in list(handlers):
                _invoke(item, event, *args)

        wildcard_handlers = self.all.get(WILDCARD)
        if wildcard_handlers:
            for item in list(wildcard_handlers):
                _invoke(item, type, event, *args)


def mitt(registry: EventHandlerMap | None = None) -> Emitter:
    """Create an :class:`Emitter`, optionally over an existing registry."""
    return Emitter(registry)
