"""
Data models for the application.
"""
import base64
import binascii
import datetime
import uuid
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional
from . import color as color_codec
from .color import RGB, RGBA


def new_event_id() -> str:
    """Generate a fresh opaque event identifier."""
    return str(uuid.uuid4())


@dataclass(frozen=True)
class CountdownEvent:
    """A single countdown record. Edits produce a new record with the same id."""
    title: str
    target_date: datetime.datetime
    color_hex: str
    image_data: Optional[bytes] = None
    id: str = field(default_factory=new_event_id)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Event id must not be empty")
        # Canonicalize so every stored record carries #RRGGBB
        object.__setattr__(self, "color_hex", color_codec.normalize(self.color_hex))

    @classmethod
    def create(cls, title: str, target_date: datetime.datetime, color: RGB,
               image_data: Optional[bytes] = None,
               event_id: Optional[str] = None) -> "CountdownEvent":
        """Build an event from a picked color, keeping event_id when editing."""
        return cls(
            id=event_id or new_event_id(),
            title=title,
            target_date=target_date,
            color_hex=color_codec.encode(color),
            image_data=image_data,
        )

    @property
    def color(self) -> RGB:
        return color_codec.decode(self.color_hex)

    def card_color(self, opacity: float) -> RGBA:
        """Accent color with the card's translucency applied."""
        return color_codec.with_alpha(self.color, opacity)

    def with_changes(self, **changes: Any) -> "CountdownEvent":
        """Return a copy with fields replaced; the id is kept."""
        changes.pop("id", None)
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with field names preserved."""
        return {
            "id": self.id,
            "title": self.title,
            "targetDate": self.target_date.isoformat(timespec="seconds"),
            "colorHex": self.color_hex,
            "imageData": (base64.b64encode(self.image_data).decode("ascii")
                          if self.image_data is not None else None),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CountdownEvent":
        """
        Deserialize one event.

        Raises:
            ValueError: if a field is missing or has the wrong shape
        """
        try:
            event_id = data["id"]
            title = data["title"]
            target = data["targetDate"]
            hex_str = data["colorHex"]
        except (KeyError, TypeError) as e:
            raise ValueError(f"Malformed event record: {e}") from e

        if not isinstance(event_id, str) or not isinstance(title, str):
            raise ValueError("Event id and title must be strings")
        if not isinstance(target, str) or not isinstance(hex_str, str):
            raise ValueError("Event targetDate and colorHex must be strings")

        image_raw = data.get("imageData")
        image_data: Optional[bytes] = None
        if image_raw is not None:
            if not isinstance(image_raw, str):
                raise ValueError("Event imageData must be a base64 string")
            try:
                image_data = base64.b64decode(image_raw, validate=True)
            except binascii.Error as e:
                raise ValueError(f"Invalid imageData: {e}") from e

        target_date = datetime.datetime.fromisoformat(target)
        if target_date.tzinfo is not None:
            raise ValueError(f"Event targetDate must be local time without offset: {target!r}")

        return cls(
            id=event_id,
            title=title,
            target_date=target_date,
            color_hex=hex_str,
            image_data=image_data,
        )
