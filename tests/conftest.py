"""Shared fixtures for the locale generator tests."""

from __future__ import annotations

import json
import zipfile
from pathlib import Path

import pytest

from localegen.sources import StaticLocaleDataSource

LANGUAGE_NAMES = {
    "de": "German",
    "en": "English",
    "fr": "French",
}

TERRITORY_NAMES = {
    "CA": "Canada",
    "FR": "France",
    "GB": "United Kingdom",
    "GB-alt-short": "UK",
    "US": "United States",
}

AVAILABLE_LOCALES = ["root", "de", "en", "en-GB", "en-US", "fr", "fr-CA", "fr-FR"]

CURRENCIES = {
    "USD": {"displayName": "US Dollar", "symbol": "US$"},
    "EUR": {"displayName": "Euro", "symbol": "€"},
    "GBP": {"displayName": "British Pound", "symbol": "£"},
}


@pytest.fixture
def scenario_source() -> StaticLocaleDataSource:
    """The three identifier example: en_US, en_GB and fr_FR."""
    return StaticLocaleDataSource.create(
        ["en_US", "en_GB", "fr_FR"],
        language_names={"en": "English", "fr": "French"},
        country_names={
            "US": "United States",
            "GB": "United Kingdom",
            "FR": "France",
        },
    )


def _write_json(path: Path, payload: dict) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")


@pytest.fixture
def cldr_tree(tmp_path: Path) -> Path:
    """A minimal extracted CLDR JSON tree."""
    root = tmp_path / "cldr-tree"
    identity = {"language": "en"}
    _write_json(
        root / "cldr-core" / "availableLocales.json",
        {"availableLocales": {"modern": ["en"], "full": AVAILABLE_LOCALES}},
    )
    _write_json(
        root / "cldr-localenames-full" / "main" / "en" / "languages.json",
        {
            "main": {
                "en": {
                    "identity": identity,
                    "localeDisplayNames": {"languages": LANGUAGE_NAMES},
                }
            }
        },
    )
    _write_json(
        root / "cldr-localenames-full" / "main" / "en" / "territories.json",
        {
            "main": {
                "en": {
                    "identity": identity,
                    "localeDisplayNames": {"territories": TERRITORY_NAMES},
                }
            }
        },
    )
    _write_json(
        root / "cldr-numbers-full" / "main" / "en" / "currencies.json",
        {
            "main": {
                "en": {
                    "identity": identity,
                    "numbers": {"currencies": CURRENCIES},
                }
            }
        },
    )
    return root


@pytest.fixture
def cldr_zip(cldr_tree: Path, tmp_path: Path) -> Path:
    """The minimal CLDR tree packed like the upstream release archive."""
    archive_path = tmp_path / "cldr-test-json-full.zip"
    with zipfile.ZipFile(archive_path, "w") as archive:
        for path in sorted(cldr_tree.rglob("*")):
            if path.is_file():
                archive.write(path, path.relative_to(cldr_tree).as_posix())
        archive.writestr("README.md", "not extracted")
    return archive_path
