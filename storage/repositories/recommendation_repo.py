"""Recommendation (testimonial) repository: per-user recommendation lists over a key-value store."""

import asyncio
from collections.abc import Callable
from datetime import datetime
from typing import Any

import orjson
import structlog
from config.constants import MAX_RATING, MIN_RATING, RECOMMENDATIONS_KEY_PREFIX
from profile_editor.errors import EmptyFieldError, InvalidRatingError, PersistenceParseError
from profile_editor.models import Recommendation
from storage.kv import KeyValueStore
from utils.time_utils import format_display_date, now_ms

log = structlog.get_logger(__name__)


def recommendations_key(user_id: str) -> str:
    return f"{RECOMMENDATIONS_KEY_PREFIX}{user_id}"


def decode_recommendations(text: str) -> list[Recommendation]:
    """Parse a cached list. Raises PersistenceParseError on anything malformed."""
    try:
        data: Any = orjson.loads(text)
    except orjson.JSONDecodeError as e:
        raise PersistenceParseError(f"invalid JSON: {e}") from e
    if not isinstance(data, list):
        raise PersistenceParseError(f"expected list, got {type(data).__name__}")
    return [Recommendation.from_dict(item) for item in data]


def encode_recommendations(recs: list[Recommendation]) -> str:
    return orjson.dumps([r.to_dict() for r in recs]).decode()


def validate_rating(rating: Any) -> None:
    """Ratings are plain ints from MIN_RATING to MAX_RATING."""
    # bool is an int subclass
    if isinstance(rating, bool) or not isinstance(rating, int):
        raise InvalidRatingError(rating)
    if not MIN_RATING <= rating <= MAX_RATING:
        raise InvalidRatingError(rating)


def validate_recommendation(author: str, content: str, rating: Any) -> None:
    """Reject blank author/content and out-of-range ratings."""
    if not author or not author.strip():
        raise EmptyFieldError("author")
    if not content or not content.strip():
        raise EmptyFieldError("content")
    validate_rating(rating)


class RecommendationRepository:
    """Whole-list read-modify-write over ``recommendations_<user id>``.

    Every write replaces the full list; there is no concurrency check across
    processes, so the last writer wins. Within one process, operations on the
    same user are serialized by a per-user lock.
    """

    def __init__(
        self,
        kv: KeyValueStore,
        clock_ms: Callable[[], int] = now_ms,
        today: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._kv = kv
        self._clock_ms = clock_ms
        self._today = today
        self._locks: dict[str, asyncio.Lock] = {}

    def _lock(self, user_id: str) -> asyncio.Lock:
        lock = self._locks.get(user_id)
        if lock is None:
            lock = self._locks[user_id] = asyncio.Lock()
        return lock

    async def _read(self, user_id: str) -> list[Recommendation]:
        text = await self._kv.read(recommendations_key(user_id))
        if text is None:
            return []
        try:
            return decode_recommendations(text)
        except PersistenceParseError as e:
            # Corrupt cache reads as empty; the entry is left for the next write to replace.
            log.warning("testimonials_parse_failed", user_id=user_id, error=str(e))
            return []

    async def _write(self, user_id: str, recs: list[Recommendation]) -> None:
        await self._kv.write(recommendations_key(user_id), encode_recommendations(recs))

    def _next_id(self, existing: list[Recommendation]) -> str:
        taken = {r.id for r in existing}
        candidate = self._clock_ms()
        while str(candidate) in taken:
            candidate += 1
        return str(candidate)

    async def load(self, user_id: str) -> list[Recommendation]:
        return await self._read(user_id)

    async def add(self, user_id: str, author: str, content: str, rating: int) -> Recommendation:
        validate_recommendation(author, content, rating)
        async with self._lock(user_id):
            recs = await self._read(user_id)
            rec = Recommendation(
                id=self._next_id(recs),
                author=author,
                content=content,
                rating=rating,
                date=format_display_date(self._today()),
            )
            recs.append(rec)
            await self._write(user_id, recs)
        log.info("testimonial_added", user_id=user_id, rec_id=rec.id, rating=rating)
        return rec

    async def remove(self, user_id: str, rec_id: str) -> list[Recommendation]:
        async with self._lock(user_id):
            recs = await self._read(user_id)
            remaining = [r for r in recs if r.id != rec_id]
            if len(remaining) == len(recs):
                log.debug("testimonial_remove_noop", user_id=user_id, rec_id=rec_id)
                return remaining
            await self._write(user_id, remaining)
        log.info("testimonial_removed", user_id=user_id, rec_id=rec_id)
        return remaining
