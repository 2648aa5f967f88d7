"""Text normalization and morphology components.

This package provides deterministic normalization rules, singular/plural
variation generators, and the locale profiles that bundle them.
"""

from .locales import (
    DEFAULT_LOCALE,
    LocaleMessages,
    LocaleProfile,
    available_locales,
    get_locale_profile,
    register_locale_profile,
)
from .morphology import MorphologyRules, NoMorphology, SuffixMorphology
from .normalizer import TextNormalizer
from .rules import (
    CollapseDoubledGlyphs,
    LowercaseText,
    NormalizationRule,
    StripPunctuation,
    TrimWhitespace,
)

__all__ = [
    "TextNormalizer",
    "NormalizationRule",
    "TrimWhitespace",
    "StripPunctuation",
    "LowercaseText",
    "CollapseDoubledGlyphs",
    "MorphologyRules",
    "NoMorphology",
    "SuffixMorphology",
    "LocaleMessages",
    "LocaleProfile",
    "DEFAULT_LOCALE",
    "available_locales",
    "get_locale_profile",
    "register_locale_profile",
]
