"""Debug logging to a file, enabled with COUNTDAYS_DEBUG=1."""
import datetime
import os
from . import config


def debug_log(message: str) -> None:
    """Write debug message to log file if debug mode is enabled."""
    if config.DEBUG_MODE:
        timestamp = datetime.datetime.now().isoformat(timespec='milliseconds')
        os.makedirs(os.path.dirname(config.DEBUG_LOG_PATH), exist_ok=True)
        with open(config.DEBUG_LOG_PATH, 'a') as f:
            f.write(f"[{timestamp}] {message}\n")
