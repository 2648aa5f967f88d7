"""Catalog loading from bundled or user-provided JSON files.

Responsibilities:
- Read `{name, id}` product entries in source order.
- Fail fast on malformed entries before any lookup runs.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Sequence

from ..errors import CatalogValidationError
from ..models.datatypes import CatalogRecord


BUNDLED_CATALOG_PATH = Path(__file__).resolve().parent.parent / "data" / "products.json"


class CatalogLoader:
    """Factory methods for creating catalog records from external sources."""

    @staticmethod
    def bundled() -> tuple[CatalogRecord, ...]:
        """Load the product catalog shipped with the package."""

        return CatalogLoader.from_json(BUNDLED_CATALOG_PATH)

    @staticmethod
    def from_json(path: Path) -> tuple[CatalogRecord, ...]:
        """Load catalog records from a UTF-8 JSON array file.

        Raises:
            FileNotFoundError: If `path` does not exist.
            CatalogValidationError: If the payload is not valid catalog JSON.
        """

        raw_text = path.read_text(encoding="utf-8")
        try:
            payload = json.loads(raw_text)
        except json.JSONDecodeError as exc:
            raise CatalogValidationError(
                f"Catalog `{path}` is not valid JSON: {exc.msg} (line {exc.lineno})."
            ) from exc
        return CatalogLoader.from_records(payload, source_label=f"Catalog `{path}`")

    @staticmethod
    def from_records(
        payload: Any, source_label: str = "Catalog"
    ) -> tuple[CatalogRecord, ...]:
        """Validate a decoded payload and convert it into catalog records."""

        if not isinstance(payload, Sequence) or isinstance(payload, (str, bytes)):
            raise CatalogValidationError(f"{source_label} must contain a top-level array.")

        return tuple(
            CatalogLoader._record_from_entry(entry, position, source_label)
            for position, entry in enumerate(payload)
        )

    @staticmethod
    def _record_from_entry(entry: Any, position: int, source_label: str) -> CatalogRecord:
        """Build one record from an entry mapping."""

        if not isinstance(entry, dict):
            raise CatalogValidationError(
                f"{source_label} entry {position} must be an object with `name` and `id`."
            )
        name = CatalogLoader._required_string(entry, "name", position, source_label)
        record_id = CatalogLoader._required_string(entry, "id", position, source_label)
        return CatalogRecord(name=name, id=record_id)

    @staticmethod
    def _required_string(
        entry: dict[str, Any], key: str, position: int, source_label: str
    ) -> str:
        """Read a required non-blank string field of one entry."""

        value = entry.get(key)
        if not isinstance(value, str) or not value.strip():
            raise CatalogValidationError(
                f"{source_label} entry {position} requires non-empty string `{key}`."
            )
        return value
