"""Unit tests for JSON catalog loading and validation."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from voicelookup.catalog import CatalogIndex
from voicelookup.errors import CatalogValidationError
from voicelookup.io.catalog_loader import CatalogLoader
from voicelookup.models.datatypes import CatalogRecord
from voicelookup.text.locales import get_locale_profile


def test_from_json_loads_records_in_source_order(onion_catalog_path: Path) -> None:
    records = CatalogLoader.from_json(onion_catalog_path)

    assert records == (
        CatalogRecord(name="Onion", id="1"),
        CatalogRecord(name="Red Onion", id="2"),
    )


def test_bundled_catalog_loads_and_indexes_with_hebrew_rules() -> None:
    """The packaged catalog should be well-formed for the default locale."""

    records = CatalogLoader.bundled()
    index = CatalogIndex.build(records, get_locale_profile("he").normalizer())

    assert len(index) == len(records) > 0
    assert len({record.id for record in records}) == len(records)


def test_from_json_rejects_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("[{\"name\": \"Onion\",", encoding="utf-8")

    with pytest.raises(CatalogValidationError, match="is not valid JSON"):
        CatalogLoader.from_json(path)


def test_from_json_propagates_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        CatalogLoader.from_json(tmp_path / "missing.json")


@pytest.mark.parametrize(
    ("payload", "message"),
    [
        ({"name": "Onion", "id": "1"}, "must contain a top-level array"),
        ("Onion", "must contain a top-level array"),
        (["Onion"], "entry 0 must be an object"),
        ([{"id": "1"}], "entry 0 requires non-empty string `name`"),
        ([{"name": "Onion", "id": "1"}, {"name": "Leek"}], "entry 1 requires non-empty string `id`"),
        ([{"name": "  ", "id": "1"}], "requires non-empty string `name`"),
        ([{"name": "Onion", "id": 7}], "requires non-empty string `id`"),
    ],
)
def test_from_records_rejects_malformed_payloads(payload: object, message: str) -> None:
    """Malformed entries should fail fast with the offending entry position."""

    with pytest.raises(CatalogValidationError, match=message):
        CatalogLoader.from_records(payload)


def test_from_records_uses_source_label_in_messages(tmp_path: Path) -> None:
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps([{"name": "Onion"}]), encoding="utf-8")

    with pytest.raises(CatalogValidationError, match=r"Catalog `.*catalog\.json` entry 0"):
        CatalogLoader.from_json(path)
