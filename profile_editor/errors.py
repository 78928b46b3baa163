"""Exceptions raised by the profile editor and its stores."""

from utils.formatting import format_megabytes


class ProfileError(Exception):
    """Base class for profile editor errors."""


class ValidationError(ProfileError):
    """Input rejected before any state was touched.

    ``message_key`` names the user-facing string in the i18n table.
    """

    message_key = "error_generic"

    def message_params(self) -> dict[str, str]:
        return {}


class EmptyFieldError(ValidationError):
    message_key = "error_author_content_required"

    def __init__(self, field: str) -> None:
        super().__init__(f"{field} must not be empty")
        self.field = field


class InvalidRatingError(ValidationError):
    message_key = "error_invalid_rating"

    def __init__(self, rating: object) -> None:
        super().__init__(f"rating must be an integer from 1 to 5, got {rating!r}")
        self.rating = rating


class TooLarge(ValidationError):
    message_key = "error_image_too_large"

    def __init__(self, size: int, limit: int) -> None:
        super().__init__(f"image is {size} bytes, limit is {limit}")
        self.size = size
        self.limit = limit

    def message_params(self) -> dict[str, str]:
        return {"limit": format_megabytes(self.limit)}


class UnsupportedType(ValidationError):
    message_key = "error_image_type"

    def __init__(self, content_type: str) -> None:
        super().__init__(f"unsupported content type: {content_type or 'unknown'}")
        self.content_type = content_type


class PersistenceParseError(ProfileError):
    """Cached testimonial data could not be decoded."""


class SaveFailure(ProfileError):
    """The profile update collaborator (or the image decode before it) failed."""
