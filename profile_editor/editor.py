"""Profile editor: draft form, testimonials, staged picture and the save workflow."""

from dataclasses import replace
from typing import Any

import structlog
from config.constants import EDITABLE_FIELDS, Route, SaveState, ToastVariant
from i18n.translator import Translator
from notifications.toasts import ToastQueue
from notifications.types import Toast
from profile_editor.collaborators import LanguageContext, Navigator, Notifier, ProfileContext
from profile_editor.errors import InvalidRatingError, SaveFailure, ValidationError
from profile_editor.image_intake import ImageIntake, PendingImage
from profile_editor.models import (
    DraftForm,
    ImageUpload,
    Recommendation,
    RecommendationForm,
    UserProfile,
)
from storage.kv import get_kv_store
from storage.repositories.recommendation_repo import RecommendationRepository, validate_rating
from utils.single_flight import SingleFlight

log = structlog.get_logger(__name__)


class ProfileEditor:
    """State and operations behind the edit-profile screen.

    The draft and the staged image are local to one editor instance and are
    dropped on cancel. Testimonial changes are written through immediately;
    the profile itself is only written by ``save()``.
    """

    def __init__(
        self,
        profiles: ProfileContext,
        recommendations: RecommendationRepository,
        navigator: Navigator,
        notifier: Notifier,
        language: LanguageContext,
        intake: ImageIntake | None = None,
    ) -> None:
        self._profiles = profiles
        self._repo = recommendations
        self._navigator = navigator
        self._notifier = notifier
        self._lang = language
        self._intake = intake or ImageIntake()
        self._save_flight: SingleFlight[bool] = SingleFlight()

        self.draft = DraftForm()
        self.new_recommendation = RecommendationForm()
        self.recommendations: list[Recommendation] = []
        self.pending_image: PendingImage | None = None
        self.state = SaveState.IDLE
        self._opened_for: str | None = None

    # ── State ──

    @property
    def user(self) -> UserProfile | None:
        return self._profiles.current_user

    @property
    def loading(self) -> bool:
        """No user yet, or the user changed and ``open()`` has not caught up."""
        return self.user is None or self.stale

    @property
    def saving(self) -> bool:
        return self.state == SaveState.SAVING

    @property
    def preview(self) -> str | None:
        return self.pending_image.preview if self.pending_image else None

    @property
    def stale(self) -> bool:
        """True when the current user is not the one the editor was opened for."""
        user = self.user
        return user is not None and user.id != self._opened_for

    async def open(self) -> None:
        """Seed the draft from the current user and load their testimonials.

        Anything staged for a previous user is dropped.
        """
        user = self.user
        if user is None:
            return
        if self.pending_image is not None:
            self.pending_image.discard()
            self.pending_image = None
        self._opened_for = user.id
        self.draft = DraftForm.from_user(user)
        self.recommendations = await self._repo.load(user.id)
        log.debug("editor_opened", user_id=user.id, recommendations=len(self.recommendations))

    async def _current_user(self) -> UserProfile | None:
        """The current user, reopening first if they changed since ``open()``."""
        user = self.user
        if user is not None and user.id != self._opened_for:
            log.info("editor_user_changed", previous=self._opened_for, user_id=user.id)
            await self.open()
        return user

    # ── Form input ──

    def update_field(self, name: str, value: str) -> None:
        if name not in EDITABLE_FIELDS:
            raise ValueError(f"Unknown profile field: {name}")
        setattr(self.draft, name, value)

    def update_recommendation_field(self, name: str, value: Any) -> bool:
        """Edit the new-testimonial form. A bad rating is reported and not applied."""
        if name == "rating":
            try:
                rating = int(value)
            except (TypeError, ValueError):
                rating = value
            try:
                validate_rating(rating)
            except InvalidRatingError as e:
                self._error(e.message_key)
                return False
            self.new_recommendation.rating = rating
        elif name in ("author", "content"):
            setattr(self.new_recommendation, name, value)
        else:
            raise ValueError(f"Unknown recommendation field: {name}")
        return True

    def select_image(self, upload: ImageUpload) -> bool:
        """Stage a new profile picture. Rejections leave the current one in place."""
        try:
            pending = self._intake.accept(upload)
        except ValidationError as e:
            log.info("image_rejected", filename=upload.filename, reason=str(e))
            self._error(e.message_key, **e.message_params())
            return False
        if self.pending_image is not None:
            self.pending_image.discard()
        self.pending_image = pending
        return True

    # ── Testimonials ──

    async def add_recommendation(self) -> Recommendation | None:
        user = await self._current_user()
        if user is None:
            return None
        form = self.new_recommendation
        try:
            rec = await self._repo.add(user.id, form.author, form.content, form.rating)
        except ValidationError as e:
            self._error(e.message_key)
            return None
        self.recommendations.append(rec)
        self.new_recommendation = RecommendationForm()
        self._success("recommendation_added")
        return rec

    async def remove_recommendation(self, rec_id: str) -> list[Recommendation]:
        user = await self._current_user()
        if user is None:
            return self.recommendations
        self.recommendations = await self._repo.remove(user.id, rec_id)
        self._success("recommendation_removed")
        return self.recommendations

    # ── Save / cancel ──

    async def save(self) -> bool:
        """Commit the draft (and staged picture). Returns True on success.

        Concurrent calls for the same user join the save already in flight.
        If the current user changed since ``open()``, the draft belongs to
        someone else: the editor reopens for the new user and nothing is written.
        """
        user = self.user
        if user is None:
            return False
        if self.stale:
            await self._current_user()
            return False
        return await self._save_flight.run(user.id, lambda: self._save(user))

    async def _save(self, user: UserProfile) -> bool:
        self.state = SaveState.SAVING
        pending, self.pending_image = self.pending_image, None
        try:
            picture = await self._decode_stage(pending)
            await self._commit_stage(user, picture)
        except SaveFailure as e:
            log.error("profile_update_failed", user_id=user.id, error=str(e))
            self._error("profile_update_failed")
            return False
        finally:
            if pending is not None:
                pending.discard()
            self.state = SaveState.IDLE

        log.info("profile_updated", user_id=user.id, picture=pending is not None)
        self._success("profile_updated")
        self._navigator.go_to(Route.PROFILE)
        return True

    async def _decode_stage(self, pending: PendingImage | None) -> str | None:
        if pending is None:
            return None
        try:
            return await pending.data_uri()
        except Exception as e:
            raise SaveFailure(f"image decode failed: {e}") from e

    async def _commit_stage(self, user: UserProfile, picture: str | None) -> None:
        record = replace(user, **self.draft.to_dict())
        if picture is not None:
            record = replace(record, profile_picture=picture)
        try:
            await self._profiles.update_profile(record)
        except Exception as e:
            raise SaveFailure(str(e)) from e

    def cancel(self) -> None:
        if self.pending_image is not None:
            self.pending_image.discard()
        self.pending_image = None
        self.draft = DraftForm()
        self.new_recommendation = RecommendationForm()
        self._opened_for = None
        self._navigator.go_to(Route.PROFILE)

    # ── View model ──

    def view(self) -> dict[str, Any]:
        t = self._lang.t
        user = self.user
        if user is None or self.stale:
            return {"loading": True, "message": t("loading_profile")}

        labels = {
            key: t(key)
            for key in (
                "edit_profile", "edit_profile_subtitle", "personal_information",
                "name", "name_placeholder", "email", "email_placeholder",
                "phone", "phone_placeholder", "recommendations_title",
                "add_new_recommendation", "author", "author_placeholder",
                "content", "content_placeholder", "rating", "add_recommendation",
                "existing_recommendations", "profile_picture", "upload_picture",
                "cancel",
            )
        }
        labels["save"] = t("saving") if self.saving else t("save")

        return {
            "loading": False,
            "language": self._lang.current_language,
            "labels": labels,
            "draft": self.draft.to_dict(),
            "new_recommendation": {
                "author": self.new_recommendation.author,
                "content": self.new_recommendation.content,
                "rating": self.new_recommendation.rating,
            },
            "rating_options": [
                {"value": n, "label": self._lang.rating_label(n)} for n in range(1, 6)
            ],
            "recommendations": [
                {**rec.to_dict(), "rating_label": self._lang.rating_label(rec.rating)}
                for rec in self.recommendations
            ],
            "empty_message": None if self.recommendations else t("no_recommendations"),
            "avatar": {
                "src": self.preview or user.profile_picture,
                "initial": (user.name or "")[:1].upper(),
            },
            "saving": self.saving,
        }

    # ── Toasts ──

    def _success(self, message_key: str) -> None:
        t = self._lang.t
        self._notifier.notify(Toast(title=t("toast_success"), description=t(message_key)))

    def _error(self, message_key: str, **params: Any) -> None:
        t = self._lang.t
        self._notifier.notify(
            Toast(
                title=t("toast_error"),
                description=t(message_key, **params),
                variant=ToastVariant.DESTRUCTIVE,
            )
        )


async def create_editor(
    profiles: ProfileContext,
    navigator: Navigator,
    notifier: Notifier | None = None,
    language: LanguageContext | None = None,
) -> ProfileEditor:
    """Wire an editor against the configured key-value backend."""
    kv = await get_kv_store()
    return ProfileEditor(
        profiles=profiles,
        recommendations=RecommendationRepository(kv),
        navigator=navigator,
        notifier=notifier or ToastQueue(),
        language=language or Translator(),
    )
