"""Profile editor data models.

Pure data structures; validation of user input lives in the repository
and the image intake.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from config.constants import DEFAULT_RATING, MAX_RATING, MIN_RATING
from profile_editor.errors import PersistenceParseError


@dataclass
class UserProfile:
    """The authenticated user's profile, owned by the profile context."""
    id: str
    name: str = ""
    email: str = ""
    phone: str = ""
    profile_picture: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "profilePicture": self.profile_picture,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UserProfile:
        return cls(
            id=str(data["id"]),
            name=data.get("name") or "",
            email=data.get("email") or "",
            phone=data.get("phone") or "",
            profile_picture=data.get("profilePicture"),
        )


@dataclass(frozen=True)
class Recommendation:
    """A testimonial. Immutable once created; only deletion is allowed."""
    id: str
    author: str
    content: str
    rating: int
    date: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "author": self.author,
            "content": self.content,
            "rating": self.rating,
            "date": self.date,
        }

    @classmethod
    def from_dict(cls, data: Any) -> Recommendation:
        """Build from a decoded cache record. Raises PersistenceParseError on bad shape."""
        if not isinstance(data, dict):
            raise PersistenceParseError(f"expected object, got {type(data).__name__}")
        try:
            rec_id, author, content = data["id"], data["author"], data["content"]
            rating, date = data["rating"], data.get("date", "")
        except KeyError as e:
            raise PersistenceParseError(f"missing field {e}") from e
        # Ids are written as strings; older entries may hold the raw millisecond int
        if isinstance(rec_id, bool) or not isinstance(rec_id, (str, int)) or rec_id == "":
            raise PersistenceParseError(f"invalid id {rec_id!r}")
        if not isinstance(author, str) or not isinstance(content, str):
            raise PersistenceParseError("author and content must be strings")
        # bool is an int subclass
        if isinstance(rating, bool) or not isinstance(rating, int):
            raise PersistenceParseError(f"rating must be an integer, got {rating!r}")
        if not MIN_RATING <= rating <= MAX_RATING:
            raise PersistenceParseError(f"rating out of range: {rating}")
        return cls(id=str(rec_id), author=author, content=content, rating=rating, date=str(date))


@dataclass
class DraftForm:
    """Working copy of the editable profile fields."""
    name: str = ""
    email: str = ""
    phone: str = ""

    @classmethod
    def from_user(cls, user: UserProfile) -> DraftForm:
        return cls(name=user.name, email=user.email, phone=user.phone)

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "email": self.email, "phone": self.phone}


@dataclass
class RecommendationForm:
    """The "add new recommendation" inputs."""
    author: str = ""
    content: str = ""
    rating: int = DEFAULT_RATING


@dataclass
class ImageUpload:
    """A file picked by the user for the profile picture."""
    filename: str
    content_type: str
    data: bytes = field(repr=False, default=b"")

    @property
    def size(self) -> int:
        return len(self.data)
