"""
Event system for termjack.

The game announces every deal, decision and result on a process-wide bus so
that anything interested (logging, tests, alternative front ends) can follow
a session without reaching into the game's internals.
"""

from collections import defaultdict
from typing import Any, Callable, Dict, Union
import threading
import logging
from enum import Enum

logger = logging.getLogger(__name__)


class EventEmitter:
    """
    Event emitter for per-type and catch-all subscriptions.

    Listeners run in the order they subscribed. A listener that raises is
    logged and skipped.
    """

    def __init__(self):
        self._listeners = defaultdict(list)
        self._global_listeners = []
        self._listener_lock = threading.RLock()

    def on(self, event_type: Union[str, Enum], callback: Callable) -> Callable:
        """
        Subscribe to an event type.

        Args:
            event_type: The event type to subscribe to (string or enum)
            callback: Function to call when event occurs, signature: fn(event_data)

        Returns:
            Unsubscribe function that can be called to remove this subscription
        """
        if isinstance(event_type, Enum):
            event_type = event_type.name

        with self._listener_lock:
            self._listeners[event_type].append(callback)

        def unsubscribe():
            with self._listener_lock:
                self._listeners[event_type].remove(callback)

        return unsubscribe

    def on_any(self, callback: Callable) -> Callable:
        """
        Subscribe to all events.

        Args:
            callback: Function to call for any event, signature: fn((event_type, event_data))

        Returns:
            Unsubscribe function that can be called to remove this subscription
        """
        with self._listener_lock:
            self._global_listeners.append(callback)

        def unsubscribe():
            with self._listener_lock:
                self._global_listeners.remove(callback)

        return unsubscribe

    def emit(self, event_type: Union[str, Enum], data: Dict[str, Any]) -> None:
        """
        Emit an event to all registered listeners.

        Args:
            event_type: The type of event to emit
            data: The data to include with the event
        """
        if isinstance(event_type, Enum):
            event_type = event_type.name

        with self._listener_lock:
            handlers_to_call = [
                (callback, data) for callback in self._listeners.get(event_type, [])
            ]
            handlers_to_call.extend(
                (callback, (event_type, data)) for callback in self._global_listeners
            )

        # Call handlers outside of the lock to avoid deadlocks
        for callback, args in handlers_to_call:
            try:
                callback(args)
            except Exception as e:
                logger.error(
                    "Error in event handler for %s: %s", event_type, e, exc_info=True
                )


class EventBus:
    """
    Process-wide event bus.

    The game publishes on it and the entry point listens on it.
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


class EngineEventType(Enum):
    """Event types published by the game."""

    # Round lifecycle
    ROUND_STARTED = "round_started"
    ROUND_ENDED = "round_ended"
    STATE_CHANGED = "state_changed"
    SHUFFLE = "shuffle"

    # Cards and hands
    CARD_DEALT = "card_dealt"
    HAND_BUSTED = "hand_busted"

    # Decisions
    PLAYER_ACTION = "player_action"
    DEALER_ACTION = "dealer_action"
