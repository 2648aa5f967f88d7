"""Deterministic normalization rules for spoken product names.

Responsibilities:
- Provide composable rewrite rules applied to transcripts and catalog names.
- Keep normalization predictable so equal inputs always yield equal keys.
"""

from __future__ import annotations

import re
from typing import Protocol


PUNCTUATION_CHARACTERS = ".,/#!$%^&*;:{}=-_`~()"


class NormalizationRule(Protocol):
    """Protocol for text normalization rules."""

    def apply(self, text: str) -> str:
        """Apply a single normalization transformation."""


class TrimWhitespace:
    """Strip leading and trailing whitespace, keeping internal spacing."""

    def apply(self, text: str) -> str:
        return text.strip()


class StripPunctuation:
    """Remove a fixed set of punctuation characters."""

    def __init__(self, characters: str = PUNCTUATION_CHARACTERS) -> None:
        """Initialize the rule with the characters to delete."""

        self._pattern = re.compile(f"[{re.escape(characters)}]")

    def apply(self, text: str) -> str:
        """Delete every configured punctuation character."""

        return self._pattern.sub("", text)


class LowercaseText:
    """Case-fold text to lowercase; a no-op for caseless scripts."""

    def apply(self, text: str) -> str:
        return text.lower()


class CollapseDoubledGlyphs:
    """Collapse runs of interchangeable doubled glyphs to a single glyph.

    Hebrew casual spelling uses a doubled yod (`יי`) interchangeably with a
    single one (`עגבנייה` / `עגבניה`). Any run of two or more of a configured
    glyph becomes one occurrence.

    The rule runs after lowercasing, so configured glyphs are lowercased too.
    """

    def __init__(self, glyphs: tuple[str, ...] = ()) -> None:
        """Initialize the rule with single-character glyphs to collapse.

        Raises:
            ValueError: If any glyph is not exactly one character.
        """

        for glyph in glyphs:
            if len(glyph) != 1 or len(glyph.lower()) != 1:
                raise ValueError(f"Doubled glyph `{glyph}` must be exactly one character.")
        self.glyphs = tuple(dict.fromkeys(glyph.lower() for glyph in glyphs))
        self._patterns = [
            (re.compile(f"{re.escape(glyph)}{{2,}}"), glyph) for glyph in self.glyphs
        ]

    def apply(self, text: str) -> str:
        """Replace each doubled run with its single form."""

        for pattern, glyph in self._patterns:
            text = pattern.sub(glyph, text)
        return text
