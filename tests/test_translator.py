"""Tests for i18n/translator.py and the string tables."""

import pytest
from config.constants import Language
from i18n.strings import STRINGS
from i18n.translator import Translator


class TestStringTables:
    def test_languages_share_ids(self):
        assert set(STRINGS["en"]) == set(STRINGS["hi"])

    def test_tables_cover_every_language(self):
        assert set(STRINGS) == {lang.value for lang in Language}

    def test_no_empty_strings(self):
        for lang, table in STRINGS.items():
            for key, text in table.items():
                assert text.strip(), f"{lang}.{key} is empty"


class TestTranslator:
    def test_english(self):
        assert Translator("en").t("profile_updated") == "Profile updated successfully"

    def test_hindi(self):
        assert Translator("hi").t("toast_success") == "सफल"

    def test_switch_language(self):
        tr = Translator("en")
        tr.current_language = "hi"
        assert tr.t("cancel") == "रद्द करें"

    def test_unknown_language_falls_back(self):
        assert Translator("ta").t("save") == "Save"

    def test_missing_in_language_falls_back(self):
        strings = {"en": {"a": "Apple", "b": "Ball"}, "hi": {"a": "सेब"}}
        tr = Translator("hi", strings=strings, fallback="en")
        assert tr.t("a") == "सेब"
        assert tr.t("b") == "Ball"

    def test_missing_everywhere_returns_id(self):
        assert Translator("en").t("no_such_string") == "no_such_string"

    def test_default_language(self):
        assert Translator().current_language == "en"

    @pytest.mark.parametrize("rating,label", [(1, "1 Star"), (2, "2 Stars"), (5, "5 Stars")])
    def test_rating_label(self, rating, label):
        assert Translator("en").rating_label(rating) == label

    def test_rating_label_hindi(self):
        assert Translator("hi").rating_label(1) == "1 तारा"

    def test_language_enum(self):
        tr = Translator(Language.HINDI)
        assert tr.current_language == "hi"
        assert tr.t("cancel") == "रद्द करें"

    def test_params_are_formatted(self):
        assert Translator("en").t("error_image_too_large", limit="1MB") == "Image must be smaller than 1MB"
        assert Translator("hi").t("error_image_too_large", limit="2MB") == "छवि 2MB से छोटी होनी चाहिए"
