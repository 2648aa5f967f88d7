"""Core datatypes shared across voicelookup modules.

Responsibilities:
- Represent immutable catalog records and lookup outcomes.
- Provide explicit typing for deterministic, explainable match results.

Key types:
- `CatalogRecord`, `MatchResult`, and `SessionState`.
"""

from __future__ import annotations

from dataclasses import dataclass


TIER_EXACT = "exact"
TIER_CONTAINED = "contained"
TIER_CATEGORY = "category"
MATCH_TIERS = (TIER_EXACT, TIER_CONTAINED, TIER_CATEGORY)


@dataclass(frozen=True, slots=True)
class CatalogRecord:
    """One product entry of the static catalog.

    Attributes:
        name: Display form of the product name.
        id: Unique, stable product identifier.
    """

    name: str
    id: str

    def to_dict(self) -> dict[str, str]:
        """Return the JSON-compatible `{name, id}` payload."""

        return {"name": self.name, "id": self.id}


@dataclass(frozen=True, slots=True)
class MatchResult:
    """Records matched for one transcript by the first tier with a hit.

    Attributes:
        records: Matched records in discovery order, unique by `id`.
        tier: Matching tier that produced the records (`exact`, `contained`,
            or `category`).
        transcript: Raw transcript that was looked up.
        key: Normalized transcript key used for searching.
    """

    records: tuple[CatalogRecord, ...]
    tier: str
    transcript: str = ""
    key: str = ""

    def __post_init__(self) -> None:
        if not self.records:
            raise ValueError("MatchResult requires at least one record.")
        if self.tier not in MATCH_TIERS:
            raise ValueError(f"Unsupported match tier `{self.tier}`.")

    @property
    def ids(self) -> tuple[str, ...]:
        """Return matched record identifiers in result order."""

        return tuple(record.id for record in self.records)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self):
        return iter(self.records)


@dataclass(frozen=True, slots=True)
class SessionState:
    """Immutable snapshot of one voice-capture session.

    Attributes:
        is_listening: Whether the speech engine is currently capturing audio.
        partial_transcript: Latest informational partial transcript.
        final_transcript: Transcript of the last completed utterance.
        error: User-facing error message, empty when there is none.
        result: Current lookup result, `None` when nothing matched or no lookup ran.
        lookup_attempted: Whether a completed utterance has been looked up.
    """

    is_listening: bool = False
    partial_transcript: str = ""
    final_transcript: str = ""
    error: str = ""
    result: MatchResult | None = None
    lookup_attempted: bool = False
