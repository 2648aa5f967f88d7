"""Unit tests for the locale profile registry."""

from __future__ import annotations

import pytest

from voicelookup.text.locales import (
    LocaleProfile,
    available_locales,
    get_locale_profile,
    register_locale_profile,
)
from voicelookup.text.morphology import NoMorphology, SuffixMorphology


def test_default_locale_is_hebrew_with_suffix_morphology() -> None:
    profile = get_locale_profile()

    assert profile.code == "he"
    assert profile.speech_locale == "he-IL"
    assert isinstance(profile.morphology, SuffixMorphology)
    assert profile.normalizer().normalize(" עגבנייה ") == "עגבניה"


def test_english_locale_has_no_morphology_or_glyph_collapsing() -> None:
    profile = get_locale_profile(" EN ")

    assert isinstance(profile.morphology, NoMorphology)
    assert profile.doubled_glyphs == ()
    assert profile.normalizer().normalize("Coffee") == "coffee"


def test_unknown_locale_lists_supported_codes() -> None:
    with pytest.raises(ValueError, match="Unsupported locale `xx`. Supported locales: en, he"):
        get_locale_profile("xx")


def test_with_doubled_glyphs_returns_overridden_copy() -> None:
    """Per-deployment glyph overrides should not mutate the registered profile."""

    base = get_locale_profile("he")
    overridden = base.with_doubled_glyphs(("ו",))

    assert overridden.doubled_glyphs == ("ו",)
    assert base.doubled_glyphs == ("י",)
    assert overridden.normalizer().normalize("עגבנייה") == "עגבנייה"


def test_register_locale_profile_adds_and_guards_codes(monkeypatch: pytest.MonkeyPatch) -> None:
    """Registration should add new codes and refuse silent replacement."""

    registry = {code: get_locale_profile(code) for code in available_locales()}
    monkeypatch.setattr("voicelookup.text.locales._REGISTRY", registry)
    english = get_locale_profile("en")
    spanish = LocaleProfile(
        code="es",
        speech_locale="es-ES",
        doubled_glyphs=(),
        morphology=SuffixMorphology("as", "a", "os"),
        messages=english.messages,
    )

    register_locale_profile(spanish)

    assert available_locales() == ["en", "es", "he"]
    assert get_locale_profile("es") is spanish
    with pytest.raises(ValueError, match="already registered"):
        register_locale_profile(spanish)
    register_locale_profile(spanish, replace_existing=True)


def test_with_doubled_glyphs_rejects_multi_character_glyph_when_normalizer_is_built() -> None:
    profile = get_locale_profile("he").with_doubled_glyphs(("ab",))

    with pytest.raises(ValueError, match="Doubled glyph `ab` must be exactly one character"):
        profile.normalizer()
