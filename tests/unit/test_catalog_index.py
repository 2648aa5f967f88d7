"""Unit tests for catalog index construction and views."""

from __future__ import annotations

import pytest

from voicelookup.catalog import CatalogIndex
from voicelookup.errors import CatalogValidationError
from voicelookup.models.datatypes import CatalogRecord
from voicelookup.text.normalizer import TextNormalizer


def _records(*pairs: tuple[str, str]) -> list[CatalogRecord]:
    return [CatalogRecord(name=name, id=record_id) for name, record_id in pairs]


def test_index_precomputes_keys_and_keeps_source_order() -> None:
    """Index should expose source-order records with normalized keys."""

    records = _records(("Onion", "1"), ("Red Onion", "2"), ("Leek", "3"))
    index = CatalogIndex.build(records, TextNormalizer())

    assert index.records == tuple(records)
    assert list(index.entries()) == [
        ("onion", records[0]),
        ("red onion", records[1]),
        ("leek", records[2]),
    ]
    assert index.key_for(records[1]) == "red onion"
    assert index.exact("red onion") == records[1]
    assert index.exact("red") is None
    assert len(index) == 3
    assert list(index) == records


def test_length_view_is_longest_first_and_stable_for_ties() -> None:
    """Equal-length names should keep catalog order in the length-sorted view."""

    records = _records(("Kiwi", "1"), ("Red Onion", "2"), ("Leek", "3"), ("Onion", "4"))
    index = CatalogIndex.build(records, TextNormalizer())

    assert [record.id for _, record in index.by_length_desc()] == ["2", "4", "1", "3"]


def test_duplicate_ids_are_rejected() -> None:
    records = _records(("Onion", "1"), ("Leek", "1"))

    with pytest.raises(CatalogValidationError, match="duplicates id `1`"):
        CatalogIndex.build(records, TextNormalizer())


def test_duplicate_normalized_names_are_rejected() -> None:
    """Names equal after normalization would make exact matching ambiguous."""

    records = _records(("Red Onion", "1"), ("red onion!", "2"))

    with pytest.raises(CatalogValidationError, match="share the normalized name `red onion`"):
        CatalogIndex.build(records, TextNormalizer())


def test_duplicate_names_after_glyph_collapsing_are_rejected() -> None:
    records = _records(("עגבניה", "1"), ("עגבנייה", "2"))

    with pytest.raises(CatalogValidationError, match="share the normalized name"):
        CatalogIndex.build(records, TextNormalizer(doubled_glyphs=("י",)))


def test_names_normalizing_to_empty_key_are_rejected() -> None:
    records = _records(("(--)", "X-1"))

    with pytest.raises(CatalogValidationError, match="normalizes to an empty key"):
        CatalogIndex.build(records, TextNormalizer())


def test_key_for_unknown_record_raises_key_error() -> None:
    index = CatalogIndex.build(_records(("Onion", "1")), TextNormalizer())

    with pytest.raises(KeyError):
        index.key_for(CatalogRecord(name="Leek", id="2"))
