"""
Event store: the in-memory collection of countdowns and its persistence.

The whole list is serialized to a single key-value slot and rewritten
after every effective mutation.
"""
import datetime
import json
import sqlite3
from typing import List, Optional
from ..color import RGB
from ..config import STORE_KEY
from ..db.kv_repository import KeyValueRepository
from ..debug import debug_log
from ..events import (
    Event, EventBus, StoreChangedContext, StoreLoadedContext, event_bus as global_bus
)
from ..models import CountdownEvent

# Named palette entries used by the sample events
PURPLE = RGB(0.686, 0.322, 0.871)
MINT = RGB(0.0, 0.780, 0.745)


def sample_events(now: Optional[datetime.datetime] = None) -> List[CountdownEvent]:
    """The two events shown on first launch."""
    if now is None:
        now = datetime.datetime.now()
    return [
        CountdownEvent.create("New TV Episode!", now + datetime.timedelta(days=2), PURPLE),
        CountdownEvent.create("New Game Release", now + datetime.timedelta(days=15), MINT),
    ]


def encode_events(events: List[CountdownEvent]) -> bytes:
    """Serialize the full list to the persisted blob format."""
    return json.dumps([e.to_dict() for e in events]).encode("utf-8")


def decode_events(blob: bytes) -> List[CountdownEvent]:
    """
    Parse a persisted blob.

    Raises:
        ValueError: if the blob is not a JSON list of valid, unique events
    """
    try:
        data = json.loads(blob.decode("utf-8"))
    except RecursionError as e:
        raise ValueError("Persisted countdowns are nested too deeply") from e
    if not isinstance(data, list):
        raise ValueError("Persisted countdowns must be a list")

    events = [CountdownEvent.from_dict(item) for item in data]
    ids = [e.id for e in events]
    if len(set(ids)) != len(ids):
        raise ValueError("Persisted countdowns contain duplicate ids")
    return events


class EventStore:
    """Owns the countdown list and writes it back on every change."""

    def __init__(self, repo: Optional[KeyValueRepository] = None,
                 bus: Optional[EventBus] = None,
                 seed_samples: bool = False,
                 key: str = STORE_KEY) -> None:
        self.repo = repo if repo is not None else KeyValueRepository()
        self.bus = bus if bus is not None else global_bus
        self.seed_samples = seed_samples
        self.key = key
        self._events: List[CountdownEvent] = []

    @property
    def events(self) -> List[CountdownEvent]:
        """Events in insertion order (copy)."""
        return list(self._events)

    def __len__(self) -> int:
        return len(self._events)

    def __contains__(self, event_id: object) -> bool:
        return any(e.id == event_id for e in self._events)

    def load(self) -> List[CountdownEvent]:
        """
        Replace the in-memory list with the persisted one.

        A missing or unreadable blob is treated as "no data": the store
        becomes empty, or holds the sample events when seeding is on.
        """
        recovered = False
        try:
            blob = self.repo.get(self.key)
            if blob is None:
                raise LookupError("no persisted countdowns")
            self._events = decode_events(blob)
        except (LookupError, ValueError, sqlite3.DatabaseError) as e:
            # json.JSONDecodeError and UnicodeDecodeError are ValueErrors
            debug_log(f"load fallback ({self.key}): {e}")
            recovered = True
            self._events = sample_events() if self.seed_samples else []

        debug_log(f"loaded {len(self._events)} countdowns")
        self.bus.emit(Event.STORE_LOADED, StoreLoadedContext(self, recovered=recovered))
        return self.events

    def save(self) -> None:
        """Overwrite the persisted blob with the full current list."""
        self.repo.set(self.key, encode_events(self._events))
        debug_log(f"saved {len(self._events)} countdowns")

    def get(self, event_id: str) -> Optional[CountdownEvent]:
        for event in self._events:
            if event.id == event_id:
                return event
        return None

    def sorted_events(self) -> List[CountdownEvent]:
        """Events ordered by target date, soonest first."""
        return sorted(self._events, key=lambda e: e.target_date)

    def add(self, event: CountdownEvent) -> CountdownEvent:
        """Append a new event and persist."""
        if event.id in self:
            raise ValueError(f"Event {event.id} already exists")
        self._events.append(event)
        self._on_change("add", event.id)
        return event

    def update(self, event: CountdownEvent) -> bool:
        """Replace the event with the same id. Returns False if none matched."""
        for index, existing in enumerate(self._events):
            if existing.id == event.id:
                self._events[index] = event
                self._on_change("update", event.id)
                return True
        debug_log(f"update ignored, unknown id {event.id}")
        return False

    def delete(self, event_id: str) -> bool:
        """Remove the event with this id. Returns False if none matched."""
        remaining = [e for e in self._events if e.id != event_id]
        if len(remaining) == len(self._events):
            debug_log(f"delete ignored, unknown id {event_id}")
            return False
        self._events = remaining
        self._on_change("delete", event_id)
        return True

    def _on_change(self, action: str, event_id: str) -> None:
        self.save()
        self.bus.emit(Event.STORE_CHANGED, StoreChangedContext(self, action, event_id))
