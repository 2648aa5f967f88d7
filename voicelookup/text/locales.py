"""Locale profiles bundling normalization, morphology, and session messages.

Responsibilities:
- Describe per-locale normalization and variation strategies.
- Keep a registry so new scripts are added without touching the matcher.

Key types:
- `LocaleMessages`: user-facing session and announcement strings.
- `LocaleProfile`: normalizer configuration plus morphology strategy.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Sequence

from .morphology import MorphologyRules, NoMorphology, SuffixMorphology
from .normalizer import TextNormalizer


DEFAULT_LOCALE = "he"


@dataclass(frozen=True, slots=True)
class LocaleMessages:
    """User-facing strings for session errors and result announcements.

    Attributes:
        unknown_error: Fallback for speech errors without a message.
        no_speech: Shown when the engine heard nothing usable.
        permission_denied: Shown when microphone access is refused.
        found_template: Announcement for one record, with `{name}` and `{id}`.
        not_found: Announcement when a completed lookup matched nothing.
        separator: Joins announcements of multi-record results.
    """

    unknown_error: str
    no_speech: str
    permission_denied: str
    found_template: str
    not_found: str
    separator: str = "; "


@dataclass(frozen=True, slots=True)
class LocaleProfile:
    """Normalization and morphology strategy for one deployment locale.

    Attributes:
        code: Short locale code used in configuration (`he`, `en`).
        speech_locale: Locale tag passed to the speech engine.
        doubled_glyphs: Glyphs whose doubled spelling collapses to one glyph.
        morphology: Variation generator for singular/plural bridging.
        messages: Session and announcement strings.
    """

    code: str
    speech_locale: str
    doubled_glyphs: tuple[str, ...]
    morphology: MorphologyRules
    messages: LocaleMessages

    def normalizer(self) -> TextNormalizer:
        """Build the text normalizer configured for this locale."""

        return TextNormalizer(doubled_glyphs=self.doubled_glyphs)

    def with_doubled_glyphs(self, glyphs: Sequence[str]) -> LocaleProfile:
        """Return a copy using deployment-specific doubled glyphs."""

        return replace(self, doubled_glyphs=tuple(glyphs))


_HEBREW = LocaleProfile(
    code="he",
    speech_locale="he-IL",
    doubled_glyphs=("י",),
    morphology=SuffixMorphology(),
    messages=LocaleMessages(
        unknown_error="שגיאה לא ידועה",
        no_speech="לא שמעתי, נסה שוב",
        permission_denied="אין הרשאה לשימוש במיקרופון",
        found_template="נמצא: {name}, מזהה: {id}",
        not_found="מוצר לא נמצא",
    ),
)

_ENGLISH = LocaleProfile(
    code="en",
    speech_locale="en-US",
    doubled_glyphs=(),
    morphology=NoMorphology(),
    messages=LocaleMessages(
        unknown_error="Unknown error",
        no_speech="Didn't catch that, try again",
        permission_denied="Microphone permission denied",
        found_template="Found: {name}, id: {id}",
        not_found="Product not found",
    ),
)

_REGISTRY: dict[str, LocaleProfile] = {
    _HEBREW.code: _HEBREW,
    _ENGLISH.code: _ENGLISH,
}


def register_locale_profile(profile: LocaleProfile, *, replace_existing: bool = False) -> None:
    """Register a locale profile under its code.

    Raises:
        ValueError: If the code is blank or already registered.
    """

    code = profile.code.strip().lower()
    if not code:
        raise ValueError("Locale profile code must be a non-empty string.")
    if code in _REGISTRY and not replace_existing:
        raise ValueError(f"Locale `{code}` is already registered.")
    _REGISTRY[code] = profile


def get_locale_profile(code: str | None = None) -> LocaleProfile:
    """Return the registered profile for `code`, defaulting to Hebrew.

    Raises:
        ValueError: If no profile is registered for the code.
    """

    resolved = (code or DEFAULT_LOCALE).strip().lower()
    profile = _REGISTRY.get(resolved)
    if profile is None:
        supported = ", ".join(available_locales())
        raise ValueError(f"Unsupported locale `{resolved}`. Supported locales: {supported}.")
    return profile


def available_locales() -> list[str]:
    """Return registered locale codes in sorted order."""

    return sorted(_REGISTRY)
