"""Shared test fixtures for the profile editor test suite."""

import pytest
from datetime import datetime

from config.constants import Route
from i18n.translator import Translator
from notifications.toasts import ToastQueue
from profile_editor.editor import ProfileEditor
from profile_editor.image_intake import ImageIntake
from profile_editor.models import ImageUpload, UserProfile
from storage.kv import MemoryKeyValueStore
from storage.repositories.recommendation_repo import RecommendationRepository


# ── Database Pool Mock ──


class FakeRecord(dict):
    """Mimics asyncpg.Record: supports both dict-style and attribute access."""
    def __getattr__(self, key):
        try:
            return self[key]
        except KeyError:
            raise AttributeError(key)


class FakeConnection:
    """Mock asyncpg connection with configurable return values."""

    def __init__(self):
        self.execute_results: list[str] = ["INSERT 0 1"]
        self.fetchrow_result: dict | None = None
        self._execute_calls: list[tuple] = []
        self._fetchrow_calls: list[tuple] = []

    async def execute(self, query, *args):
        self._execute_calls.append((query, args))
        return self.execute_results[0] if self.execute_results else "UPDATE 0"

    async def fetchrow(self, query, *args):
        self._fetchrow_calls.append((query, args))
        return FakeRecord(self.fetchrow_result) if self.fetchrow_result else None

    def transaction(self):
        return FakeTransaction()


class FakeTransaction:
    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        pass


class FakePool:
    """Mock asyncpg.Pool that yields a FakeConnection."""

    def __init__(self):
        self.conn = FakeConnection()

    def acquire(self):
        return FakePoolContext(self.conn)


class FakePoolContext:
    def __init__(self, conn):
        self.conn = conn

    async def __aenter__(self):
        return self.conn

    async def __aexit__(self, *args):
        pass


@pytest.fixture
def fake_pool():
    """Provide a mock database pool."""
    return FakePool()


@pytest.fixture
def fake_conn(fake_pool):
    """Direct access to the underlying FakeConnection."""
    return fake_pool.conn


# ── Collaborators ──


class FakeProfileContext:
    """Profile context whose update can be made to fail."""

    def __init__(self, user: UserProfile | None):
        self.current_user = user
        self.updates: list[UserProfile] = []
        self.error: Exception | None = None

    async def update_profile(self, user: UserProfile) -> None:
        self.updates.append(user)
        if self.error is not None:
            raise self.error
        self.current_user = user


class RecordingNavigator:
    def __init__(self):
        self.routes: list[Route] = []

    def go_to(self, route: Route) -> None:
        self.routes.append(route)


class FixedClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start: int = 1_700_000_000_000):
        self.value = start

    def __call__(self) -> int:
        return self.value


@pytest.fixture
def user():
    return UserProfile(
        id="u-42",
        name="asha verma",
        email="asha@example.com",
        phone="+91 98765 43210",
        profile_picture=None,
    )


@pytest.fixture
def profiles(user):
    return FakeProfileContext(user)


@pytest.fixture
def navigator():
    return RecordingNavigator()


@pytest.fixture
def toasts():
    return ToastQueue()


@pytest.fixture
def translator():
    return Translator("en")


@pytest.fixture
def kv():
    return MemoryKeyValueStore()


@pytest.fixture
def clock():
    return FixedClock()


@pytest.fixture
def repo(kv, clock):
    return RecommendationRepository(kv, clock_ms=clock, today=lambda: datetime(2025, 3, 7, 10, 30))


@pytest.fixture
def editor(profiles, repo, navigator, toasts, translator):
    return ProfileEditor(
        profiles=profiles,
        recommendations=repo,
        navigator=navigator,
        notifier=toasts,
        language=translator,
        intake=ImageIntake(max_bytes=2 * 1024 * 1024),
    )


# ── Uploads ──

PNG_HEADER = b"\x89PNG\r\n\x1a\n"


@pytest.fixture
def png_upload():
    """A 1 MiB PNG-typed upload."""
    data = PNG_HEADER + b"\x00" * (1024 * 1024 - len(PNG_HEADER))
    return ImageUpload(filename="avatar.png", content_type="image/png", data=data)
