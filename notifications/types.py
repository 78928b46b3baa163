"""Toast notification data class."""

import itertools
from dataclasses import dataclass, field
from config.constants import ToastVariant

_ids = itertools.count(1)


@dataclass
class Toast:
    """A dismissible user-visible notification."""
    title: str
    description: str
    variant: ToastVariant = ToastVariant.DEFAULT
    id: int = field(default_factory=lambda: next(_ids))

    @property
    def is_error(self) -> bool:
        return self.variant == ToastVariant.DESTRUCTIVE
