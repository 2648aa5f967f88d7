"""Transcript and catalog-name normalization.

Responsibilities:
- Canonicalize raw strings into keys used for equality and containment checks.
- Keep normalization idempotent and configurable per deployment locale.
"""

from __future__ import annotations

from typing import Sequence

from .rules import (
    CollapseDoubledGlyphs,
    LowercaseText,
    NormalizationRule,
    StripPunctuation,
    TrimWhitespace,
)


class TextNormalizer:
    """Normalize raw text into the canonical key representation.

    The default rule chain trims, strips punctuation, lowercases, collapses
    the configured doubled glyphs and trims again, so punctuation at either
    end never leaves dangling whitespace behind.
    """

    def __init__(
        self,
        doubled_glyphs: Sequence[str] = (),
        rules: Sequence[NormalizationRule] | None = None,
    ) -> None:
        """Initialize the rule chain.

        Args:
            doubled_glyphs: Glyphs whose doubled spelling collapses to one glyph.
            rules: Explicit rule chain replacing the default one.
        """

        if rules is None:
            rules = [
                TrimWhitespace(),
                StripPunctuation(),
                LowercaseText(),
                CollapseDoubledGlyphs(tuple(doubled_glyphs)),
                TrimWhitespace(),
            ]
        self.rules: tuple[NormalizationRule, ...] = tuple(rules)

    def normalize(self, text: str) -> str:
        """Return the normalized key for `text`."""

        for rule in self.rules:
            text = rule.apply(text)
        return text
