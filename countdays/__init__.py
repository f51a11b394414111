"""CountDays: local countdown events."""

__version__ = "0.1.0"
