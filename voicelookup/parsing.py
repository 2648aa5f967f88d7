"""Shared parsing helpers for configuration value normalization."""

from __future__ import annotations


_TRUE_BOOLEAN_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_BOOLEAN_TOKENS = frozenset({"0", "false", "no", "off"})


def normalize_optional_string(value: object) -> str | None:
    """Normalize an optional value to a stripped non-empty string.

    Args:
        value: Arbitrary input value.

    Returns:
        Stripped string value, or `None` when the value is empty after trimming.
    """

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return text


def parse_permissive_boolean(value: object) -> bool | None:
    """Parse a permissive boolean token and return `None` for invalid values."""

    if isinstance(value, bool):
        return value

    normalized = normalize_optional_string(value)
    if normalized is None:
        return None

    token = normalized.lower()
    if token in _TRUE_BOOLEAN_TOKENS:
        return True
    if token in _FALSE_BOOLEAN_TOKENS:
        return False
    return None


def parse_glyph_list(value: object) -> tuple[str, ...]:
    """Parse doubled-glyph settings from a comma-separated string or a sequence.

    Args:
        value: Either a string like `"י,ו"` or a list/tuple of strings.

    Returns:
        Tuple of unique single-character glyphs in first-seen order.

    Raises:
        ValueError: If any item is not exactly one character.
    """

    if isinstance(value, str):
        items = [part.strip() for part in value.split(",")]
    elif isinstance(value, (list, tuple)):
        items = [str(part).strip() for part in value]
    else:
        raise ValueError("Doubled glyphs must be a comma-separated string or a list.")

    glyphs: list[str] = []
    for item in items:
        if not item:
            continue
        if len(item) != 1:
            raise ValueError(f"Doubled glyph `{item}` must be exactly one character.")
        if item not in glyphs:
            glyphs.append(item)
    return tuple(glyphs)
