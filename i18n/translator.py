"""String lookup by language tag with fallback to the default language."""

import structlog
from config.constants import Language
from config.settings import settings
from i18n.strings import STRINGS

log = structlog.get_logger(__name__)


def _tag(language: Language | str) -> str:
    return language.value if isinstance(language, Language) else language


class Translator:
    def __init__(
        self,
        language: Language | str | None = None,
        strings: dict[str, dict[str, str]] | None = None,
        fallback: Language | str | None = None,
    ) -> None:
        self._strings = STRINGS if strings is None else strings
        self.fallback = _tag(fallback or settings.default_language)
        self.current_language = _tag(language or self.fallback)

    def t(self, string_id: str, **params: str) -> str:
        """Look up ``string_id``; falls back to the default language, then the id.

        ``params`` fill ``{name}`` placeholders in the looked-up text.
        """
        table = self._strings.get(self.current_language, {})
        text = table.get(string_id)
        if text is None:
            text = self._strings.get(self.fallback, {}).get(string_id)
        if text is None:
            log.warning("missing_translation", language=self.current_language, string_id=string_id)
            return string_id
        return text.format(**params) if params else text

    def rating_label(self, rating: int) -> str:
        return f"{rating} {self.t('star' if rating == 1 else 'stars')}"
