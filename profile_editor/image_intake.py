"""Profile picture intake: validate an upload and stage it with a preview."""

import asyncio
import base64

import structlog
from config.settings import settings
from profile_editor.errors import TooLarge, UnsupportedType
from profile_editor.models import ImageUpload

log = structlog.get_logger(__name__)


def _to_data_uri(content_type: str, data: bytes) -> str:
    return f"data:{content_type};base64,{base64.b64encode(data).decode('ascii')}"


async def encode_data_uri(upload: ImageUpload) -> str:
    """Encode an upload as a data URI off the event loop."""
    return await asyncio.to_thread(_to_data_uri, upload.content_type, upload.data)


class PendingImage:
    """A staged profile picture.

    The preview is encoded in the background; ``preview`` stays None until that
    finishes. ``data_uri()`` awaits the same work, so the encode happens once.
    """

    def __init__(self, upload: ImageUpload) -> None:
        self.upload = upload
        self.preview: str | None = None
        self._task: asyncio.Task[str] = asyncio.get_running_loop().create_task(
            encode_data_uri(upload)
        )
        self._task.add_done_callback(self._on_encoded)

    def _on_encoded(self, task: asyncio.Task[str]) -> None:
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            log.warning("image_preview_failed", filename=self.upload.filename, error=str(exc))
            return
        self.preview = task.result()

    async def data_uri(self) -> str:
        return await asyncio.shield(self._task)

    def discard(self) -> None:
        if not self._task.done():
            self._task.cancel()


class ImageIntake:
    """Accepts image uploads up to ``max_bytes``."""

    def __init__(self, max_bytes: int | None = None) -> None:
        self.max_bytes = settings.max_image_bytes if max_bytes is None else max_bytes

    def validate(self, upload: ImageUpload) -> None:
        if upload.size > self.max_bytes:
            raise TooLarge(upload.size, self.max_bytes)
        if not (upload.content_type or "").startswith("image/"):
            raise UnsupportedType(upload.content_type)

    def accept(self, upload: ImageUpload) -> PendingImage:
        """Validate and stage. Must be called from a running event loop."""
        self.validate(upload)
        log.debug("image_staged", filename=upload.filename, size=upload.size)
        return PendingImage(upload)
