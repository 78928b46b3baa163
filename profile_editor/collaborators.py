"""Interfaces the editor depends on but does not own."""

from typing import Protocol

from config.constants import Route
from notifications.types import Toast
from profile_editor.models import UserProfile


class ProfileContext(Protocol):
    """The authenticated user and the authoritative profile write."""

    @property
    def current_user(self) -> UserProfile | None: ...

    async def update_profile(self, user: UserProfile) -> None: ...


class Navigator(Protocol):
    def go_to(self, route: Route) -> None: ...


class Notifier(Protocol):
    def notify(self, toast: Toast) -> None: ...


class LanguageContext(Protocol):
    current_language: str

    def t(self, string_id: str, **params: str) -> str: ...

    def rating_label(self, rating: int) -> str: ...
