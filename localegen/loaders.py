"""CLDR data loaders with Pydantic validation."""

from __future__ import annotations

from pathlib import Path

from .io import load_json
from .models import (
    AvailableLocalesData,
    CurrenciesJsonMain,
    LanguagesJsonMain,
    TerritoriesJsonMain,
)


def localenames_root(cldr_root: Path) -> Path:
    return cldr_root / "cldr-localenames-full" / "main"


def load_available_locales(cldr_root: Path) -> list[str]:
    """Load and parse availableLocales.json."""
    path = cldr_root / "cldr-core" / "availableLocales.json"
    data = AvailableLocalesData.model_validate(load_json(path))
    return data.full


def load_language_names(cldr_root: Path, locale: str) -> dict[str, str]:
    """Load and parse a locale's languages.json."""
    path = localenames_root(cldr_root) / locale / "languages.json"
    data = LanguagesJsonMain.model_validate(load_json(path))
    return data.main[locale].locale_display_names.languages


def load_territory_names(cldr_root: Path, locale: str) -> dict[str, str]:
    """Load and parse a locale's territories.json."""
    path = localenames_root(cldr_root) / locale / "territories.json"
    data = TerritoriesJsonMain.model_validate(load_json(path))
    return data.main[locale].locale_display_names.territories


def load_currency_codes(cldr_root: Path, locale: str) -> list[str]:
    """Load the ISO 4217 codes listed in a locale's currencies.json."""
    path = cldr_root / "cldr-numbers-full" / "main" / locale / "currencies.json"
    data = CurrenciesJsonMain.model_validate(load_json(path))
    return sorted(data.main[locale].numbers.currencies)
