"""Countdown card widget."""
import datetime
from typing import Optional
from PyQt5.QtWidgets import QWidget, QHBoxLayout, QVBoxLayout, QLabel
from PyQt5.QtGui import QPainter, QColor, QPainterPath, QPixmap, QPaintEvent
from PyQt5.QtCore import QTimer, Qt, QRectF
from ..config import TICK_INTERVAL_MS, settings
from ..models import CountdownEvent
from ..services.remaining import card_label

CARD_HEIGHT = 120
CORNER_RADIUS = 20


class CountdownCard(QWidget):
    """Rounded card showing title, date and a live remaining-time label."""

    def __init__(self, event: CountdownEvent, live: bool = True,
                 parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setFixedHeight(CARD_HEIGHT)
        self.event = event
        self.background: Optional[QPixmap] = None

        layout = QHBoxLayout()
        layout.setContentsMargins(16, 0, 16, 0)
        self.setLayout(layout)

        text_layout = QVBoxLayout()
        text_layout.setSpacing(8)
        self.title_label = QLabel()
        self.title_label.setStyleSheet("font-size: 16px; font-weight: 600;")
        self.date_label = QLabel()
        self.date_label.setStyleSheet("color: gray;")
        text_layout.addStretch()
        text_layout.addWidget(self.title_label)
        text_layout.addWidget(self.date_label)
        text_layout.addStretch()
        layout.addLayout(text_layout)

        layout.addStretch()

        self.remaining_label = QLabel()
        self.remaining_label.setStyleSheet("font-size: 28px; font-weight: bold;")
        layout.addWidget(self.remaining_label)

        self.set_event(event)

        # Tick once per second while the card exists
        self.timer = QTimer(self)
        self.timer.timeout.connect(self.update_remaining)  # pyright: ignore[reportGeneralTypeIssues]
        if live:
            self.timer.start(TICK_INTERVAL_MS)

    def set_event(self, event: CountdownEvent) -> None:
        """Show a (possibly edited) event."""
        self.event = event
        self.title_label.setText(event.title)
        self.date_label.setText(event.target_date.strftime("%B %d, %Y"))

        self.background = None
        if event.image_data:
            pixmap = QPixmap()
            if pixmap.loadFromData(event.image_data):
                self.background = pixmap

        self.update_remaining()
        self.update()

    def update_remaining(self) -> None:
        now = datetime.datetime.now()
        self.remaining_label.setText(
            card_label(now, self.event.target_date, settings.display_mode))

    def paintEvent(self, event: Optional[QPaintEvent] = None) -> None:
        """Draw the rounded background, image first and tint on top."""
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)

        rect = QRectF(self.rect())
        path = QPainterPath()
        path.addRoundedRect(rect, CORNER_RADIUS, CORNER_RADIUS)
        painter.setClipPath(path)

        if self.background is not None:
            scaled = self.background.scaled(
                self.size(), Qt.KeepAspectRatioByExpanding, Qt.SmoothTransformation)  # pyright: ignore[reportAttributeAccessIssue]
            x = (self.width() - scaled.width()) // 2
            y = (self.height() - scaled.height()) // 2
            painter.drawPixmap(x, y, scaled)

        r, g, b, a = self.event.card_color(settings.card_opacity)
        painter.fillPath(path, QColor.fromRgbF(r, g, b, a))
        painter.end()
