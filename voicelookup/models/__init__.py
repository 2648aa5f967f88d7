"""Shared typed data models for voicelookup.

This package contains dataclasses used across catalog, matcher, and session
modules to avoid cross-module coupling and circular imports.
"""

from .datatypes import (
    MATCH_TIERS,
    TIER_CATEGORY,
    TIER_CONTAINED,
    TIER_EXACT,
    CatalogRecord,
    MatchResult,
    SessionState,
)

__all__ = [
    "CatalogRecord",
    "MatchResult",
    "SessionState",
    "MATCH_TIERS",
    "TIER_EXACT",
    "TIER_CONTAINED",
    "TIER_CATEGORY",
]
