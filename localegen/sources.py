"""Locale data facilities consumed by the relational model builder."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Protocol

from .loaders import (
    load_available_locales,
    load_currency_codes,
    load_language_names,
    load_territory_names,
)
from .models import Locale


class CodeKind(str, Enum):
    LANGUAGE = "language"
    COUNTRY = "country"


class LocaleDataSource(Protocol):
    """Read-only access to locale identifiers and their display names."""

    def list_locale_identifiers(self) -> list[str]: ...

    def decompose(self, identifier: str) -> tuple[str | None, str | None]: ...

    def display_name(self, kind: CodeKind, code: str) -> str | None: ...

    def list_currency_codes(self) -> list[str]: ...


def decompose_identifier(identifier: str) -> tuple[str | None, str | None]:
    """Split a locale identifier into ``(language_code, country_code)``."""
    locale = Locale.parse(identifier)
    return locale.language or None, locale.region


@dataclass(frozen=True, slots=True)
class StaticLocaleDataSource:
    """In-memory source, mostly for tests and fixtures."""

    identifiers: tuple[str, ...]
    language_names: Mapping[str, str]
    country_names: Mapping[str, str]
    currency_codes: tuple[str, ...] = ()

    @classmethod
    def create(
        cls,
        identifiers: Iterable[str],
        language_names: Mapping[str, str],
        country_names: Mapping[str, str],
        currency_codes: Iterable[str] = (),
    ) -> StaticLocaleDataSource:
        return cls(
            tuple(identifiers),
            dict(language_names),
            dict(country_names),
            tuple(currency_codes),
        )

    def list_locale_identifiers(self) -> list[str]:
        return list(self.identifiers)

    def decompose(self, identifier: str) -> tuple[str | None, str | None]:
        return decompose_identifier(identifier)

    def display_name(self, kind: CodeKind, code: str) -> str | None:
        names = (
            self.language_names if kind is CodeKind.LANGUAGE else self.country_names
        )
        return names.get(code) or None

    def list_currency_codes(self) -> list[str]:
        return sorted(self.currency_codes)


@dataclass(slots=True)
class CldrLocaleDataSource:
    """Locale data backed by an extracted CLDR JSON archive."""

    available_locales: list[str]
    language_names: dict[str, str]
    territory_names: dict[str, str]
    currency_codes: list[str] = field(default_factory=list)

    @classmethod
    def from_directory(
        cls, cldr_root: Path, display_locale: str = "en"
    ) -> CldrLocaleDataSource:
        """Load everything the generator needs from ``cldr_root``.

        Raises:
            FileNotFoundError: If a required CLDR JSON file is missing.
            pydantic.ValidationError: If a CLDR JSON file has an unexpected shape.
        """
        return cls(
            available_locales=load_available_locales(cldr_root),
            language_names=load_language_names(cldr_root, display_locale),
            territory_names=load_territory_names(cldr_root, display_locale),
            currency_codes=load_currency_codes(cldr_root, display_locale),
        )

    def list_locale_identifiers(self) -> list[str]:
        return list(self.available_locales)

    def decompose(self, identifier: str) -> tuple[str | None, str | None]:
        return decompose_identifier(identifier)

    def display_name(self, kind: CodeKind, code: str) -> str | None:
        if kind is CodeKind.LANGUAGE:
            return self.language_names.get(code) or None
        return self.territory_names.get(code) or None

    def list_currency_codes(self) -> list[str]:
        return list(self.currency_codes)
