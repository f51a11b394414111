"""Global event system for CountDays."""
from enum import Enum
from typing import Callable, Any, Dict, List, Optional, TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from ..services.event_store import EventStore


class Event(Enum):
    """Application-wide events."""
    STORE_LOADED = "store_loaded"
    STORE_CHANGED = "store_changed"


class EventContext:
    """Base context for event handlers."""
    pass


class StoreLoadedContext(EventContext):
    """Context passed to STORE_LOADED handlers."""
    def __init__(self, store: 'EventStore', recovered: bool = False) -> None:
        self.store = store
        # True when the persisted blob was missing or unreadable
        self.recovered = recovered


class StoreChangedContext(EventContext):
    """Context passed to STORE_CHANGED handlers."""
    def __init__(self, store: 'EventStore', action: str,
                 event_id: Optional[str] = None) -> None:
        self.store = store
        self.action = action
        self.event_id = event_id


ContextT = TypeVar('ContextT', bound=EventContext)


class EventBus:
    """Central event dispatcher."""

    def __init__(self) -> None:
        self._handlers: Dict[Event, List[Callable[[Any], None]]] = {}

    def subscribe(self, event: Event, handler: Callable[[ContextT], None]) -> None:
        """Subscribe to an event with a typed handler."""
        if event not in self._handlers:
            self._handlers[event] = []
        self._handlers[event].append(handler)  # type: ignore[arg-type]

    def unsubscribe(self, event: Event, handler: Callable[[ContextT], None]) -> None:
        handlers = self._handlers.get(event, [])
        if handler in handlers:
            handlers.remove(handler)  # type: ignore[arg-type]

    def emit(self, event: Event, context: EventContext) -> None:
        """Emit an event to all subscribers."""
        for handler in list(self._handlers.get(event, [])):
            try:
                handler(context)
            except Exception as e:
                print(f"Event handler error ({event.value}): {e}")


# Global instance
event_bus = EventBus()
