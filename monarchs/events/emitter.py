"""
Event system for the Monarchs table.

Transitions, the engine and adapters communicate through a single event bus.
Handlers subscribe by event type (or to every event) with a priority; a
handler that raises is logged and does not stop delivery to the others.
"""

from collections import defaultdict
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Union
import logging
import threading

logger = logging.getLogger("monarchs.events")

EventKey = Union[str, Enum]


class EventPriority(Enum):
    """Priority levels for event handlers."""

    LOW = 0
    NORMAL = 1
    HIGH = 2
    CRITICAL = 3


def _key(event_type: EventKey) -> str:
    return event_type.name if isinstance(event_type, Enum) else event_type


class EventEmitter:
    """
    Publish/subscribe hub with priority-ordered handlers.

    Handlers for a given type receive the event data dict. Handlers registered
    with `on_any` receive a ``(event_name, data)`` tuple. Handlers run outside
    the listener lock, so they may subscribe or unsubscribe freely.
    """

    def __init__(self):
        self._listeners: Dict[str, List[Dict[str, Any]]] = defaultdict(list)
        self._global_listeners: List[Dict[str, Any]] = []
        self._listener_lock = threading.RLock()

    @staticmethod
    def _insert(handlers: List[Dict[str, Any]], callback: Callable, priority: EventPriority):
        handler = {"callback": callback, "priority": priority.value}
        # Higher priority first, registration order within a priority
        for i, existing in enumerate(handlers):
            if existing["priority"] < priority.value:
                handlers.insert(i, handler)
                return
        handlers.append(handler)

    @staticmethod
    def _remove(handlers: List[Dict[str, Any]], callback: Callable):
        for i, existing in enumerate(handlers):
            if existing["callback"] == callback:
                handlers.pop(i)
                return

    def on(
        self,
        event_type: EventKey,
        callback: Callable,
        priority: EventPriority = EventPriority.NORMAL,
    ) -> Callable[[], None]:
        """
        Subscribe to an event type.

        Args:
            event_type: The event type to subscribe to (string or enum)
            callback: Function called with the event data
            priority: Priority level for this handler

        Returns:
            Function that removes this subscription
        """
        key = _key(event_type)
        with self._listener_lock:
            self._insert(self._listeners[key], callback, priority)

        def unsubscribe():
            with self._listener_lock:
                self._remove(self._listeners[key], callback)

        return unsubscribe

    def once(
        self,
        event_type: EventKey,
        callback: Callable,
        priority: EventPriority = EventPriority.NORMAL,
    ) -> Callable[[], None]:
        """Subscribe for a single delivery of ``event_type``."""
        unsubscribe_ref: List[Callable[[], None]] = []

        def one_time_handler(event_data):
            try:
                callback(event_data)
            finally:
                unsubscribe_ref[0]()

        unsubscribe_ref.append(self.on(event_type, one_time_handler, priority))
        return unsubscribe_ref[0]

    def on_any(
        self, callback: Callable, priority: EventPriority = EventPriority.NORMAL
    ) -> Callable[[], None]:
        """Subscribe to every event; the callback gets ``(event_name, data)``."""
        with self._listener_lock:
            self._insert(self._global_listeners, callback, priority)

        def unsubscribe():
            with self._listener_lock:
                self._remove(self._global_listeners, callback)

        return unsubscribe

    def emit(self, event_type: EventKey, data: Dict[str, Any]) -> None:
        """
        Deliver an event to every matching listener.

        Args:
            event_type: The type of event to emit
            data: The data to include with the event
        """
        key = _key(event_type)

        with self._listener_lock:
            calls = [(h["callback"], data) for h in self._listeners.get(key, [])]
            calls.extend((h["callback"], (key, data)) for h in self._global_listeners)

        for callback, args in calls:
            try:
                callback(args)
            except Exception as e:
                logger.error(f"Error in event handler for {key}: {e}", exc_info=True)

    def listener_count(self, event_type: Optional[EventKey] = None) -> int:
        """Number of handlers for ``event_type``, or of all handlers."""
        with self._listener_lock:
            if event_type is None:
                return sum(len(h) for h in self._listeners.values()) + len(
                    self._global_listeners
                )
            return len(self._listeners.get(_key(event_type), []))

    def remove_all_listeners(self, event_type: Optional[EventKey] = None) -> None:
        """
        Remove all listeners for one event type, or for every event.

        Args:
            event_type: Optional event type. If None, removes everything.
        """
        with self._listener_lock:
            if event_type is None:
                self._listeners.clear()
                self._global_listeners.clear()
            else:
                self._listeners[_key(event_type)].clear()


class EventBus:
    """
    Process-wide event bus.

    Singleton holder for the `EventEmitter` shared by the transitions and
    the engine.
    """

    _instance = None
    _lock = threading.Lock()

    @classmethod
    def get_instance(cls) -> EventEmitter:
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = EventEmitter()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the shared emitter; the next `get_instance` builds a new one."""
        with cls._lock:
            cls._instance = None


class TableEventType(Enum):
    """
    Event types emitted at the table.

    Payloads always carry ``game_id``; round events also carry ``round_id``.
    """

    # Engine lifecycle
    ENGINE_INIT = "engine_init"
    ENGINE_SHUTDOWN = "engine_shutdown"

    # Betting
    BET_PLACED = "bet_placed"
    BETS_CLEARED = "bets_cleared"
    UNIT_CHANGED = "unit_changed"

    # Round lifecycle
    SHOE_REBUILT = "shoe_rebuilt"
    ROUND_STARTED = "round_started"
    CARD_DEALT = "card_dealt"
    ROUND_REVEALED = "round_revealed"
    ROUND_SETTLED = "round_settled"
    ROUND_RESET = "round_reset"

    # Money
    BANKROLL_UPDATED = "bankroll_updated"

    # Errors
    ERROR = "error"
