# Area: Officiating
"""
league_overseer._match.event_dispatcher — Host event router
============================================================

Routes host events to their handlers based on the event's class.
One handler per event type. The dispatcher is the boundary between the
host and the overseer: a handler that raises is logged here and the
host keeps running.
"""

import logging
from typing import Any, Callable, Dict, Optional, Type

logger = logging.getLogger("league_overseer.dispatcher")

EventHandler = Callable[[Any], Optional[Any]]


class EventDispatcher:
    """
    Routes host events to handlers.

    Usage:
        dispatcher = EventDispatcher()
        dispatcher.register(CaptureEvent, on_capture)
        dispatcher.dispatch(CaptureEvent(team=TeamColor.RED))
    """

    def __init__(self):
        self._handlers: Dict[Type, EventHandler] = {}

    def register(self, event_type: Type, handler: EventHandler) -> None:
        """
        Register the handler for an event type.

        Args:
            event_type: Event class to handle
            handler: Callable taking the event

        Raises:
            ValueError: If a handler is already registered for the type
        """
        if event_type in self._handlers:
            raise ValueError(f"Handler already registered for {event_type.__name__}")
        self._handlers[event_type] = handler
        logger.debug(f"Registered handler for {event_type.__name__}")

    def get_handler(self, event_type: Type) -> Optional[EventHandler]:
        return self._handlers.get(event_type)

    def dispatch(self, event: Any) -> Optional[Any]:
        """
        Deliver one event.

        Returns:
            The handler's result, or None if there is no handler or it failed
        """
        event_name = type(event).__name__
        handler = self._handlers.get(type(event))
        if handler is None:
            logger.warning(f"No handler for event type: {event_name}")
            return None

        try:
            return handler(event)
        except Exception:
            logger.exception(f"Handler for {event_name} failed")
            return None
