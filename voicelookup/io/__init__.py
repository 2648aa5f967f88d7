"""Input/output components for voicelookup.

This package contains the catalog loader used before any lookup runs.
"""

from .catalog_loader import BUNDLED_CATALOG_PATH, CatalogLoader

__all__ = ["CatalogLoader", "BUNDLED_CATALOG_PATH"]
