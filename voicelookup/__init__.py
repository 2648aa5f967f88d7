"""Top-level package for voicelookup.

This package matches speech transcripts against a small static product
catalog using tiered exact, contained-phrase, and category matching. The main
entry points are `CatalogIndex` and `ProductMatcher`.
"""

from .catalog import CatalogIndex
from .matcher import ProductMatcher, find_matches
from .models.datatypes import CatalogRecord, MatchResult

__all__ = [
    "CatalogIndex",
    "CatalogRecord",
    "MatchResult",
    "ProductMatcher",
    "find_matches",
    "__version__",
]

__version__ = "0.1.0"
