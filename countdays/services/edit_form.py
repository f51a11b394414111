"""State of the add/edit form, independent of any widget toolkit."""
import datetime
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Optional
from .. import color as color_codec
from ..color import RGB
from ..config import DEFAULT_COLOR_HEX
from ..debug import debug_log
from ..models import CountdownEvent

PLACEHOLDER_TITLE = "Event Title"

_image_executor: Optional[ThreadPoolExecutor] = None


def _default_executor() -> ThreadPoolExecutor:
    global _image_executor
    if _image_executor is None:
        _image_executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="image-load")
    return _image_executor


def read_image_bytes(path: str) -> bytes:
    with open(path, 'rb') as f:
        return f.read()


class EditForm:
    """
    Pending values of a countdown being created or edited.

    An edit form keeps the id of the event it was opened for, so saving
    replaces that record instead of adding a new one.
    """

    def __init__(self, editing: Optional[CountdownEvent] = None,
                 now: Optional[datetime.datetime] = None) -> None:
        self.editing = editing
        if editing is not None:
            self.title = editing.title
            self.target_date = editing.target_date
            self.color: RGB = editing.color
            self.image_data: Optional[bytes] = editing.image_data
        else:
            self.title = ""
            self.target_date = now or datetime.datetime.now().replace(microsecond=0)
            self.color = color_codec.decode(DEFAULT_COLOR_HEX)
            self.image_data = None
        self.pending_image: Optional["Future[bytes]"] = None

    @property
    def is_editing(self) -> bool:
        return self.editing is not None

    @property
    def window_title(self) -> str:
        return "Edit Countdown" if self.is_editing else "New Countdown"

    @property
    def can_save(self) -> bool:
        """Saving is only allowed with a non-empty title."""
        return bool(self.title)

    def load_image(self, path: str, executor: Optional[Executor] = None) -> "Future[bytes]":
        """
        Read image bytes in the background.

        The bytes are assigned to ``image_data`` once the future resolves.
        A cancelled or failed load leaves the form unchanged. Starting a
        new load cancels the previous one.
        """
        if self.pending_image is not None:
            self.pending_image.cancel()

        future = (executor or _default_executor()).submit(read_image_bytes, path)
        self.pending_image = future

        def assign(done: "Future[bytes]") -> None:
            # A superseded load must not overwrite a newer pick
            if done is not self.pending_image or done.cancelled():
                return
            error = done.exception()
            if error is not None:
                debug_log(f"image load failed ({path}): {error}")
                return
            self.image_data = done.result()
            debug_log(f"image loaded ({path}): {len(self.image_data)} bytes")

        future.add_done_callback(assign)
        return future

    def clear_image(self) -> None:
        if self.pending_image is not None:
            self.pending_image.cancel()
            self.pending_image = None
        self.image_data = None

    def preview(self) -> CountdownEvent:
        """Event as it would look if saved now; placeholder title when empty."""
        return self._build(self.title or PLACEHOLDER_TITLE)

    def build(self) -> CountdownEvent:
        """
        Build the event to save.

        Raises:
            ValueError: if the title is empty
        """
        if not self.can_save:
            raise ValueError("Countdown title must not be empty")
        return self._build(self.title)

    def _build(self, title: str) -> CountdownEvent:
        return CountdownEvent.create(
            title=title,
            target_date=self.target_date,
            color=self.color,
            image_data=self.image_data,
            event_id=self.editing.id if self.editing is not None else None,
        )
