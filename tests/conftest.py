"""Shared pytest fixtures for the full voicelookup test suite."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from voicelookup.catalog import CatalogIndex
from voicelookup.matcher import ProductMatcher
from voicelookup.models.datatypes import CatalogRecord
from voicelookup.text.locales import LocaleProfile, get_locale_profile


GADGET_RECORDS = (
    CatalogRecord(name="Classic Widget", id="W-001"),
    CatalogRecord(name="Mega Gadget", id="G-1024"),
    CatalogRecord(name="Super Spanner", id="S-SPAN-01"),
)

ONION_RECORDS = (
    CatalogRecord(name="Onion", id="1"),
    CatalogRecord(name="Red Onion", id="2"),
)

HEBREW_RECORDS = (
    CatalogRecord(name="עגבניות שרי", id="9"),
    CatalogRecord(name="מלפפון", id="10"),
    CatalogRecord(name="בננה", id="11"),
    CatalogRecord(name="תפוח", id="12"),
    CatalogRecord(name="תפוח אדמה", id="13"),
)


def _matcher(records: tuple[CatalogRecord, ...], profile: LocaleProfile) -> ProductMatcher:
    """Build a matcher over synthetic records for one locale."""

    return ProductMatcher(CatalogIndex.build(records, profile.normalizer()), profile)


@pytest.fixture
def english_profile() -> LocaleProfile:
    return get_locale_profile("en")


@pytest.fixture
def hebrew_profile() -> LocaleProfile:
    return get_locale_profile("he")


@pytest.fixture
def gadget_matcher(english_profile: LocaleProfile) -> ProductMatcher:
    """Provide an English matcher over the widget/gadget/spanner catalog."""

    return _matcher(GADGET_RECORDS, english_profile)


@pytest.fixture
def onion_matcher(english_profile: LocaleProfile) -> ProductMatcher:
    """Provide an English matcher over the onion/red onion catalog."""

    return _matcher(ONION_RECORDS, english_profile)


@pytest.fixture
def hebrew_matcher(hebrew_profile: LocaleProfile) -> ProductMatcher:
    """Provide a Hebrew matcher with suffix morphology enabled."""

    return _matcher(HEBREW_RECORDS, hebrew_profile)


@pytest.fixture
def onion_catalog_path(tmp_path: Path) -> Path:
    """Write the onion catalog as a JSON file and return its path."""

    path = tmp_path / "onions.json"
    path.write_text(
        json.dumps([record.to_dict() for record in ONION_RECORDS], ensure_ascii=False),
        encoding="utf-8",
    )
    return path


@pytest.fixture(autouse=True)
def _clear_voicelookup_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host `VOICELOOKUP_*` variables from leaking into config resolution."""

    for key in (
        "VOICELOOKUP_CATALOG",
        "VOICELOOKUP_LOCALE",
        "VOICELOOKUP_DOUBLED_GLYPHS",
        "VOICELOOKUP_LOG_STAGES",
    ):
        monkeypatch.delenv(key, raising=False)
