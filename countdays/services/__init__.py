"""Business logic services."""
from .event_store import EventStore
from .edit_form import EditForm
from .remaining import format_remaining, days_remaining, card_label

__all__ = ['EventStore', 'EditForm', 'format_remaining', 'days_remaining', 'card_label']
