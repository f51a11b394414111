#!/usr/bin/env python3
"""
Main entrypoint for the CountDays application.
"""
import sys
from PyQt5.QtWidgets import QApplication
from .config import settings, DB_PATH
from .db import ensure_db_exists, KeyValueRepository
from .debug import debug_log
from .services.event_store import EventStore
from .ui.window import CountdownWindow


def main() -> int:
    # Ensure DB schema exists before launching UI
    ensure_db_exists()
    debug_log(f"CountDays starting, db={DB_PATH}")

    app = QApplication(sys.argv)
    app.setApplicationName("CountDays")

    store = EventStore(KeyValueRepository(), seed_samples=settings.seed_sample_events)
    window = CountdownWindow(store)
    store.load()
    window.show()

    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
