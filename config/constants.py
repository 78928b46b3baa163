"""Constants used across the application."""

from enum import Enum


class Language(str, Enum):
    ENGLISH = "en"
    HINDI = "hi"


class Route(str, Enum):
    PROFILE = "/profile"


class ToastVariant(str, Enum):
    DEFAULT = "default"
    DESTRUCTIVE = "destructive"


class SaveState(str, Enum):
    IDLE = "idle"
    SAVING = "saving"


# Testimonial cache keys are "recommendations_<user id>"
RECOMMENDATIONS_KEY_PREFIX = "recommendations_"

MIN_RATING = 1
MAX_RATING = 5
DEFAULT_RATING = 5

# Draft fields the editor lets the user change
EDITABLE_FIELDS = ("name", "email", "phone")

MAX_IMAGE_SIZE = 2 * 1024 * 1024  # 2MB
