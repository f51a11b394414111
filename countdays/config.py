import os
import json
from typing import Any, Dict

DB_PATH: str = os.path.expanduser(os.environ.get("COUNTDAYS_DB", "~/.local/share/countdays.db"))
TICK_INTERVAL_MS: int = 1000
STORE_KEY: str = "countdowns"
DEFAULT_COLOR_HEX: str = "#A0F0D0"

# User configuration file path
USER_CONFIG_PATH: str = os.path.expanduser("~/.config/countdays/settings.json")

# Debug mode - logs store and form activity
DEBUG_MODE: bool = os.environ.get("COUNTDAYS_DEBUG", "0") == "1"
DEBUG_LOG_PATH: str = os.path.expanduser("~/.local/share/countdays_debug.log")

DISPLAY_MODES = ("compact", "days")


# --- Dynamic Configuration Class ---

class Config:
    """
    Manages user settings loaded from the JSON settings file.

    Values can be reloaded at runtime after the file changes.
    """
    DEFAULT_SEED_SAMPLE_EVENTS: bool = True
    DEFAULT_CARD_OPACITY: float = 0.3
    DEFAULT_DISPLAY_MODE: str = "compact"

    def __init__(self, config_path: str = USER_CONFIG_PATH):
        self.config_path = config_path
        self._user_config: Dict[str, Any] = {}

        self.seed_sample_events: bool = self.DEFAULT_SEED_SAMPLE_EVENTS
        self.card_opacity: float = self.DEFAULT_CARD_OPACITY
        self.display_mode: str = self.DEFAULT_DISPLAY_MODE

        self.reload()

    def _load_user_config(self) -> Dict[str, Any]:
        """Load user configuration from file."""
        if os.path.exists(self.config_path):
            try:
                with open(self.config_path, 'r') as f:
                    data = json.load(f)
                if isinstance(data, dict):
                    return data
            except (json.JSONDecodeError, IOError):
                pass
        return {}

    def reload(self) -> None:
        """
        Reload configuration from disk, updating this object's attributes.
        Unknown or out-of-range values fall back to the class defaults.
        """
        self._user_config = self._load_user_config()

        seed = self._user_config.get('seed_sample_events', self.DEFAULT_SEED_SAMPLE_EVENTS)
        self.seed_sample_events = seed if isinstance(seed, bool) else self.DEFAULT_SEED_SAMPLE_EVENTS

        opacity = self._user_config.get('card_opacity', self.DEFAULT_CARD_OPACITY)
        if not isinstance(opacity, (int, float)) or not 0.0 <= opacity <= 1.0:
            opacity = self.DEFAULT_CARD_OPACITY
        self.card_opacity = float(opacity)

        mode = self._user_config.get('display_mode', self.DEFAULT_DISPLAY_MODE)
        self.display_mode = mode if mode in DISPLAY_MODES else self.DEFAULT_DISPLAY_MODE


# Shared instance used by the application
settings = Config()
