"""Unit tests for LanguageService."""

import pytest

from modules.localization.languages import LanguageService
from modules.localization.schema import LanguageBranch
from tests.factories.localization import make_schema


@pytest.mark.unit
class TestLanguageService:
    """Tests for enabled language lookup."""

    def test_default_language_first(self):
        service = LanguageService(
            make_schema(
                languages=(("sv", "Svenska"), ("en", "English"), ("da", "Dansk"))
            )
        )

        languages = service.get_languages()

        assert [language.id for language in languages] == ["en", "da", "sv"]
        assert languages[0].is_default

    def test_first_branch_is_default_without_english(self):
        service = LanguageService(
            make_schema(languages=(("sv", "Svenska"), ("da", "Dansk")))
        )

        assert service.get_default_language().id == "sv"

    def test_no_languages_falls_back_to_english(self):
        service = LanguageService(make_schema(languages=()))

        assert service.get_languages() == []
        assert service.get_default_language().id == "en"

    def test_disabled_branch_is_excluded(self):
        schema = make_schema()
        schema.languages[1] = LanguageBranch(
            language_id="sv", name="Svenska", enabled=False
        )

        assert LanguageService(schema).get_language_ids() == ["en"]

    def test_find_ignores_case(self, languages):
        assert languages.find("SV").name == "Svenska"
        assert languages.find("fi") is None

    @pytest.mark.parametrize(
        "code,expected",
        [
            ("en", True),
            ("EN", True),
            ("en-us", True),
            ("sv-FI", True),
            ("fi", False),
            ("", False),
        ],
    )
    def test_is_known(self, languages, code, expected):
        assert languages.is_known(code) is expected
