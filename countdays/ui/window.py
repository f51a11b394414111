"""Main countdown list window."""
from typing import List, Optional
from PyQt5.QtWidgets import (
    QMainWindow, QScrollArea, QWidget, QVBoxLayout, QLabel, QMenu, QAction, QToolBar
)
from PyQt5.QtCore import Qt, QPoint
from ..events import Event, EventContext
from ..models import CountdownEvent
from ..services.event_store import EventStore
from .card import CountdownCard
from .dialog import CountdownDialog


class CountdownWindow(QMainWindow):
    """
    Scrollable list of countdown cards, soonest first.

    The window never writes to storage itself: it calls the store and
    re-renders when the store announces a change.
    """

    def __init__(self, store: EventStore) -> None:
        super().__init__()
        self.store = store
        self.cards: List[CountdownCard] = []

        self.setWindowTitle("Your Countdowns")
        self.resize(420, 640)

        toolbar = QToolBar("Main")
        toolbar.setMovable(False)
        self.addToolBar(toolbar)
        add_action: QAction = toolbar.addAction("+")  # pyright: ignore[reportAssignmentType]
        add_action.setToolTip("New countdown")
        add_action.triggered.connect(self.open_add_dialog)

        self.scroll = QScrollArea()
        self.scroll.setWidgetResizable(True)
        self.setCentralWidget(self.scroll)

        self.list_widget = QWidget()
        self.list_layout = QVBoxLayout()
        self.list_layout.setSpacing(20)
        self.list_layout.setContentsMargins(16, 16, 16, 16)
        self.list_widget.setLayout(self.list_layout)
        self.scroll.setWidget(self.list_widget)

        self.empty_label = QLabel("No countdowns yet. Press + to add one.")
        self.empty_label.setAlignment(Qt.AlignCenter)  # pyright: ignore[reportAttributeAccessIssue]
        self.empty_label.setStyleSheet("color: gray;")

        self.store.bus.subscribe(Event.STORE_CHANGED, self.on_store_event)
        self.store.bus.subscribe(Event.STORE_LOADED, self.on_store_event)

        self.render_cards()

    def on_store_event(self, ctx: EventContext) -> None:
        self.render_cards()

    def render_cards(self) -> None:
        """Rebuild the card list from the store's sorted events."""
        for card in self.cards:
            card.timer.stop()
        self.cards = []

        while self.list_layout.count():
            item = self.list_layout.takeAt(0)
            widget = item.widget() if item is not None else None
            if widget is not None and widget is not self.empty_label:
                widget.deleteLater()

        events = self.store.sorted_events()
        if not events:
            self.list_layout.addWidget(self.empty_label)
            self.empty_label.show()
        else:
            self.empty_label.hide()
            for event in events:
                card = CountdownCard(event)
                card.setContextMenuPolicy(Qt.CustomContextMenu)  # pyright: ignore[reportAttributeAccessIssue]
                card.customContextMenuRequested.connect(
                    lambda pos, c=card: self.show_card_menu(c, pos))
                self.list_layout.addWidget(card)
                self.cards.append(card)

        self.list_layout.addStretch()

    def show_card_menu(self, card: CountdownCard, pos: QPoint) -> None:
        menu = QMenu(self)
        edit_action: QAction = menu.addAction("Edit")  # pyright: ignore[reportAssignmentType]
        edit_action.triggered.connect(lambda: self.open_edit_dialog(card.event))
        menu.addSeparator()
        delete_action: QAction = menu.addAction("Delete")  # pyright: ignore[reportAssignmentType]
        delete_action.triggered.connect(lambda: self.store.delete(card.event.id))
        menu.exec_(card.mapToGlobal(pos))

    def open_add_dialog(self) -> None:
        event = self._run_dialog(None)
        if event is not None:
            self.store.add(event)

    def open_edit_dialog(self, editing: CountdownEvent) -> None:
        event = self._run_dialog(editing)
        if event is not None:
            self.store.update(event)

    def _run_dialog(self, editing: Optional[CountdownEvent]) -> Optional[CountdownEvent]:
        dialog = CountdownDialog(editing, self)
        if dialog.exec_():
            return dialog.result_event
        return None

    def closeEvent(self, event) -> None:  # type: ignore[override]
        self.store.bus.unsubscribe(Event.STORE_CHANGED, self.on_store_event)
        self.store.bus.unsubscribe(Event.STORE_LOADED, self.on_store_event)
        super().closeEvent(event)
