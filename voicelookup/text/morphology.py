"""Morphological variation rules for singular/plural bridging.

Responsibilities:
- Expand one normalized key into alternate keys used during matching.
- Keep variation order deterministic so tier results are reproducible.
"""

from __future__ import annotations

from typing import Protocol


class MorphologyRules(Protocol):
    """Protocol for locale-specific variation generators."""

    def variations(self, key: str) -> tuple[str, ...]:
        """Return ordered, unique variations whose first element is `key`."""


class NoMorphology:
    """Variation generator for locales without productive suffix morphology."""

    def variations(self, key: str) -> tuple[str, ...]:
        return (key,)


class SuffixMorphology:
    """Suffix-swapping variation generator for feminine/masculine plural forms.

    For Hebrew the defaults are the feminine plural `ות`, the feminine singular
    `ה` and the masculine plural `ים`:

    - `עגבניות` -> `עגבניות`, `עגבניה`, `עגבני`, `עגבניותים`
    - `בננה` -> `בננה`, `בננות`, `בננהים`
    - `תפוחים` -> `תפוחים`, `תפוח`

    Generated keys need not be real words; they only widen the search.
    """

    def __init__(
        self,
        feminine_plural: str = "ות",
        feminine_singular: str = "ה",
        masculine_plural: str = "ים",
    ) -> None:
        """Initialize suffix markers.

        Raises:
            ValueError: If any suffix marker is empty.
        """

        for label, value in (
            ("feminine_plural", feminine_plural),
            ("feminine_singular", feminine_singular),
            ("masculine_plural", masculine_plural),
        ):
            if not value:
                raise ValueError(f"`{label}` suffix must be a non-empty string.")
        self.feminine_plural = feminine_plural
        self.feminine_singular = feminine_singular
        self.masculine_plural = masculine_plural

    def variations(self, key: str) -> tuple[str, ...]:
        """Return `key` followed by its singular/plural variations."""

        found: list[str] = [key]

        def add(candidate: str) -> None:
            # A bare suffix would otherwise yield "" which is contained in every name.
            if candidate and candidate not in found:
                found.append(candidate)

        if key.endswith(self.feminine_plural):
            stem = key[: -len(self.feminine_plural)]
            add(stem + self.feminine_singular)
            add(stem)
        elif key.endswith(self.feminine_singular):
            stem = key[: -len(self.feminine_singular)]
            add(stem + self.feminine_plural)

        if key.endswith(self.masculine_plural):
            add(key[: -len(self.masculine_plural)])
        else:
            add(key + self.masculine_plural)

        return tuple(found)
