"""In-process toast queue backing the editor's user-visible notifications."""

import structlog
from notifications.types import Toast

log = structlog.get_logger(__name__)


class ToastQueue:
    """Holds active toasts until the user dismisses them."""

    def __init__(self, limit: int = 5) -> None:
        self._limit = limit
        self._toasts: list[Toast] = []

    def notify(self, toast: Toast) -> None:
        self._toasts.append(toast)
        # Oldest toasts fall off once the limit is reached
        if len(self._toasts) > self._limit:
            self._toasts = self._toasts[-self._limit:]
        log.debug("toast_shown", toast_id=toast.id, variant=toast.variant.value, title=toast.title)

    def dismiss(self, toast_id: int) -> bool:
        before = len(self._toasts)
        self._toasts = [t for t in self._toasts if t.id != toast_id]
        return len(self._toasts) < before

    @property
    def active(self) -> list[Toast]:
        return list(self._toasts)

    @property
    def latest(self) -> Toast | None:
        return self._toasts[-1] if self._toasts else None
