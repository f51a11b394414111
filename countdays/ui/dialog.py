"""Add/edit dialog for countdowns."""
from typing import Optional
from PyQt5.QtWidgets import (
    QDialog, QVBoxLayout, QFormLayout, QLineEdit, QDateTimeEdit, QGroupBox,
    QPushButton, QColorDialog, QFileDialog, QHBoxLayout, QDialogButtonBox,
    QLabel, QWidget
)
from PyQt5.QtGui import QColor
from PyQt5.QtCore import Qt, QDateTime, pyqtSignal
from concurrent.futures import Future
from .. import color as color_codec
from ..color import RGB
from ..config import settings
from ..models import CountdownEvent
from ..services.edit_form import EditForm
from .card import CountdownCard

IMAGE_FILTER = "Images (*.png *.jpg *.jpeg *.gif *.bmp *.webp)"


def swatch_style(color: RGB) -> str:
    """Stylesheet for the color swatch, tinted like a card."""
    r, g, b, a = color_codec.with_alpha(color, settings.card_opacity)
    return (f"background-color: rgba({int(r * 255)}, {int(g * 255)}, {int(b * 255)}, {a});"
            " border: 1px solid rgba(128, 128, 128, 0.2); border-radius: 8px;")


class CountdownDialog(QDialog):
    """Dialog for creating a new countdown or editing an existing one."""

    # Emitted from the image loader thread; Qt queues it onto the UI thread
    image_loaded = pyqtSignal()

    def __init__(self, editing: Optional[CountdownEvent] = None,
                 parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.form = EditForm(editing)
        self.result_event: Optional[CountdownEvent] = None

        self.setWindowTitle(self.form.window_title)
        self.setWindowFlags(self.windowFlags() & ~Qt.WindowContextHelpButtonHint)  # pyright: ignore[reportAttributeAccessIssue, reportUnknownArgumentType]
        self.setMinimumWidth(380)

        layout = QVBoxLayout()
        self.setLayout(layout)

        # Event details
        details = QGroupBox("Event Details")
        details_form = QFormLayout()
        details.setLayout(details_form)

        self.title_edit = QLineEdit(self.form.title)
        self.title_edit.setPlaceholderText("Title")
        self.title_edit.textChanged.connect(self.on_title_changed)
        details_form.addRow("Title:", self.title_edit)

        self.date_edit = QDateTimeEdit(QDateTime(self.form.target_date))
        self.date_edit.setCalendarPopup(True)
        self.date_edit.setDisplayFormat("yyyy-MM-dd HH:mm")
        self.date_edit.dateTimeChanged.connect(self.on_date_changed)
        details_form.addRow("Date:", self.date_edit)
        layout.addWidget(details)

        # Card color and background
        appearance = QGroupBox("Card Color")
        appearance_layout = QHBoxLayout()
        appearance.setLayout(appearance_layout)

        self.color_button = QPushButton("Pick a color")
        self.color_button.clicked.connect(self.pick_color)
        appearance_layout.addWidget(self.color_button)

        self.swatch = QLabel()
        self.swatch.setFixedSize(60, 30)
        appearance_layout.addWidget(self.swatch)
        appearance_layout.addStretch()

        self.image_button = QPushButton("Background image...")
        self.image_button.clicked.connect(self.pick_image)
        appearance_layout.addWidget(self.image_button)

        self.clear_image_button = QPushButton("Clear")
        self.clear_image_button.clicked.connect(self.clear_image)
        appearance_layout.addWidget(self.clear_image_button)
        layout.addWidget(appearance)

        # Preview
        preview_box = QGroupBox("Preview")
        preview_layout = QVBoxLayout()
        preview_box.setLayout(preview_layout)
        self.preview_card = CountdownCard(self.form.preview())
        preview_layout.addWidget(self.preview_card)
        layout.addWidget(preview_box)

        # Buttons
        self.buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Save | QDialogButtonBox.StandardButton.Cancel  # pyright: ignore[reportArgumentType, reportCallIssue]
        )
        self.buttons.accepted.connect(self.save_and_close)  # pyright: ignore[reportUnknownMemberType]
        self.buttons.rejected.connect(self.reject)  # pyright: ignore[reportUnknownMemberType]
        layout.addWidget(self.buttons)

        self.image_loaded.connect(self.refresh)
        self.refresh()

    def refresh(self) -> None:
        """Sync swatch, preview and save button with the form state."""
        self.swatch.setStyleSheet(swatch_style(self.form.color))
        self.clear_image_button.setEnabled(self.form.image_data is not None)
        self.preview_card.set_event(self.form.preview())
        save_button = self.buttons.button(QDialogButtonBox.StandardButton.Save)
        if save_button is not None:
            save_button.setEnabled(self.form.can_save)

    def on_title_changed(self, text: str) -> None:
        self.form.title = text
        self.refresh()

    def on_date_changed(self, value: QDateTime) -> None:
        self.form.target_date = value.toPyDateTime().replace(second=0, microsecond=0)
        self.refresh()

    def pick_color(self) -> None:
        current = self.form.color
        chosen = QColorDialog.getColor(QColor.fromRgbF(*current), self, "Pick a color")
        if chosen.isValid():
            self.form.color = RGB(chosen.redF(), chosen.greenF(), chosen.blueF())
            self.refresh()

    def pick_image(self) -> None:
        path, _ = QFileDialog.getOpenFileName(self, "Choose background", "", IMAGE_FILTER)
        if not path:
            return
        future = self.form.load_image(path)
        future.add_done_callback(self._on_image_done)

    def _on_image_done(self, future: "Future[bytes]") -> None:
        if not future.cancelled():
            self.image_loaded.emit()

    def clear_image(self) -> None:
        self.form.clear_image()
        self.refresh()

    def save_and_close(self) -> None:
        """Build the event and close; ignored while the title is empty."""
        if not self.form.can_save:
            return
        self.result_event = self.form.build()
        self.accept()

    def reject(self) -> None:
        if self.form.pending_image is not None:
            self.form.pending_image.cancel()
        super().reject()
