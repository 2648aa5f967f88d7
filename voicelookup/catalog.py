"""Immutable catalog index used by the matcher.

Responsibilities:
- Precompute normalized catalog keys once at startup.
- Provide the source-order and length-descending views searched by match tiers.
- Reject catalogs whose records cannot be matched unambiguously.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from .errors import CatalogValidationError
from .models.datatypes import CatalogRecord
from .text.normalizer import TextNormalizer


class CatalogIndex:
    """Read-only view of catalog records keyed by normalized name."""

    __slots__ = ("_records", "_keys", "_by_key", "_by_length_desc")

    def __init__(
        self,
        records: tuple[CatalogRecord, ...],
        keys: tuple[str, ...],
    ) -> None:
        """Initialize the index from records and their precomputed keys.

        Use `CatalogIndex.build` instead of calling this directly.
        """

        if len(records) != len(keys):
            raise ValueError("Every catalog record requires exactly one normalized key.")
        self._records = records
        self._keys = keys
        self._by_key = dict(zip(keys, records))
        # sorted() is stable, so equal lengths keep catalog order.
        self._by_length_desc = tuple(
            sorted(zip(keys, records), key=lambda item: len(item[0]), reverse=True)
        )

    @classmethod
    def build(
        cls, records: Iterable[CatalogRecord], normalizer: TextNormalizer
    ) -> CatalogIndex:
        """Validate records and build an index using `normalizer` for names.

        Raises:
            CatalogValidationError: On duplicate ids, names that normalize to an
                empty key, or two records sharing one normalized name.
        """

        ordered = tuple(records)
        seen_ids: dict[str, int] = {}
        seen_keys: dict[str, CatalogRecord] = {}
        keys: list[str] = []

        for position, record in enumerate(ordered):
            if record.id in seen_ids:
                raise CatalogValidationError(
                    f"Catalog entry {position} duplicates id `{record.id}` "
                    f"(first seen at entry {seen_ids[record.id]})."
                )
            seen_ids[record.id] = position

            key = normalizer.normalize(record.name)
            if not key:
                raise CatalogValidationError(
                    f"Catalog entry {position} (`{record.id}`) has a name that "
                    "normalizes to an empty key."
                )
            previous = seen_keys.get(key)
            if previous is not None:
                raise CatalogValidationError(
                    f"Catalog entries `{previous.id}` and `{record.id}` share the "
                    f"normalized name `{key}`."
                )
            seen_keys[key] = record
            keys.append(key)

        return cls(ordered, tuple(keys))

    @property
    def records(self) -> tuple[CatalogRecord, ...]:
        """Return records in source order."""

        return self._records

    def entries(self) -> Iterator[tuple[str, CatalogRecord]]:
        """Yield `(normalized_key, record)` pairs in source order."""

        return zip(self._keys, self._records)

    def by_length_desc(self) -> tuple[tuple[str, CatalogRecord], ...]:
        """Return `(normalized_key, record)` pairs, longest key first."""

        return self._by_length_desc

    def exact(self, key: str) -> CatalogRecord | None:
        """Return the record whose normalized name equals `key`."""

        return self._by_key.get(key)

    def key_for(self, record: CatalogRecord) -> str:
        """Return the precomputed normalized key of an indexed record.

        Raises:
            KeyError: If the record is not part of this index.
        """

        for key, candidate in self.entries():
            if candidate == record:
                return key
        raise KeyError(record.id)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[CatalogRecord]:
        return iter(self._records)
