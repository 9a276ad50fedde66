"""Tests for the supported-language allow-list and display names."""

import pytest

from commons_projects.core.languages import (
    DEFAULT_LANGUAGE,
    NATIVE_NAMES,
    SUPPORTED_LANGUAGES,
    display_name,
    get_native_name,
    is_supported_language,
    language_options,
)


def test_allow_list():
    assert SUPPORTED_LANGUAGES == (
        "as", "bn", "en", "gu", "hi", "kn", "kok", "ml", "mr",
        "ne", "or", "pa", "sa", "sd", "ta", "te", "ur",
    )
    assert DEFAULT_LANGUAGE == "en"


@pytest.mark.parametrize("code", ["fr", "EN", "", "hin"])
def test_unsupported_codes(code):
    assert is_supported_language(code) is False


def test_native_names():
    assert get_native_name("en") == "English"
    assert get_native_name("ta") == "தமிழ்"
    assert get_native_name("kok") is None


def test_display_name_falls_back_to_code():
    assert display_name("kok") == "kok"
    assert display_name("hi", lookup=lambda code: "") == "hi"
    assert display_name("hi", lookup=lambda code: "Hindi") == "Hindi"


def test_language_options():
    options = language_options()
    assert [o["code"] for o in options] == list(SUPPORTED_LANGUAGES)
    assert [o["code"] for o in options if o["default"]] == ["en"]
    assert {o["code"]: o["name"] for o in options}["kok"] == "kok"


def test_display_name_without_code():
    assert display_name(None) == ""
    assert display_name("") == ""


def test_native_names_cover_only_supported_codes():
    assert set(NATIVE_NAMES) == set(SUPPORTED_LANGUAGES) - {"kok"}
