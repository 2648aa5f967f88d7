"""Tiered transcript-to-catalog matching.

Responsibilities:
- Normalize one transcript and expand it into locale variations.
- Search the catalog index in priority tiers and return the first tier's hits.

Tiers, highest priority first:
- `exact`: a variation equals a product's normalized name; one record.
- `contained`: a variation contains a product name, longest names first; one record.
- `category`: product names containing any variation; every such record.
"""

from __future__ import annotations

from dataclasses import dataclass

from .catalog import CatalogIndex
from .models.datatypes import (
    TIER_CATEGORY,
    TIER_CONTAINED,
    TIER_EXACT,
    CatalogRecord,
    MatchResult,
)
from .text.locales import LocaleProfile, get_locale_profile
from .text.morphology import MorphologyRules
from .text.normalizer import TextNormalizer


@dataclass(frozen=True, slots=True)
class LookupPlan:
    """Normalized key and variations searched for one transcript."""

    transcript: str
    key: str
    variations: tuple[str, ...]


def build_lookup_plan(
    transcript: str,
    normalizer: TextNormalizer,
    morphology: MorphologyRules,
) -> LookupPlan:
    """Normalize `transcript` and expand its key; an empty key has no variations."""

    key = normalizer.normalize(transcript)
    variations = morphology.variations(key) if key else ()
    return LookupPlan(transcript=transcript, key=key, variations=variations)


class ProductMatcher:
    """Match transcripts against an immutable catalog index."""

    def __init__(
        self,
        index: CatalogIndex,
        profile: LocaleProfile | None = None,
        normalizer: TextNormalizer | None = None,
    ) -> None:
        """Initialize the matcher.

        Args:
            index: Catalog index built with the same normalizer configuration.
            profile: Locale profile; defaults to the default registered locale.
            normalizer: Optional normalizer override, else built from `profile`.
        """

        self.index = index
        self.profile = profile if profile is not None else get_locale_profile()
        self.normalizer = normalizer if normalizer is not None else self.profile.normalizer()

    def explain(self, transcript: str) -> LookupPlan:
        """Return the key and variations that a lookup of `transcript` searches."""

        return build_lookup_plan(transcript, self.normalizer, self.profile.morphology)

    def find_matches(self, transcript: str) -> MatchResult | None:
        """Return matches of the first tier with a hit, or `None`."""

        if not transcript or not transcript.strip():
            return None

        plan = self.explain(transcript)
        if not plan.key:
            return None

        for tier, search in (
            (TIER_EXACT, self._exact),
            (TIER_CONTAINED, self._contained),
            (TIER_CATEGORY, self._category),
        ):
            records = search(plan.variations)
            if records:
                return MatchResult(
                    records=records,
                    tier=tier,
                    transcript=transcript,
                    key=plan.key,
                )
        return None

    def _exact(self, variations: tuple[str, ...]) -> tuple[CatalogRecord, ...]:
        for variation in variations:
            record = self.index.exact(variation)
            if record is not None:
                return (record,)
        return ()

    def _contained(self, variations: tuple[str, ...]) -> tuple[CatalogRecord, ...]:
        # Only variation-contains-name: a short name must not shadow a longer one.
        for name_key, record in self.index.by_length_desc():
            for variation in variations:
                if name_key in variation:
                    return (record,)
        return ()

    def _category(self, variations: tuple[str, ...]) -> tuple[CatalogRecord, ...]:
        matched: dict[str, CatalogRecord] = {}
        for variation in variations:
            for name_key, record in self.index.entries():
                if variation in name_key and record.id not in matched:
                    matched[record.id] = record
        return tuple(matched.values())


def find_matches(
    transcript: str,
    index: CatalogIndex,
    profile: LocaleProfile | None = None,
) -> MatchResult | None:
    """Look up `transcript` in `index` using one-off matcher wiring."""

    return ProductMatcher(index, profile).find_matches(transcript)
