"""Pydantic models for CLDR JSON structures and the language/country model."""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, Field

from .naming import sanitize


class Locale(BaseModel, frozen=True):
    """BCP-47 locale representation."""

    language: str
    script: str | None = None
    region: str | None = None
    variants: tuple[str, ...] = ()

    @classmethod
    def parse(cls, tag: str) -> Locale:
        """Parse a BCP-47 (or ICU style ``en_US``) tag into a Locale."""
        subtags = tag.replace("_", "-").split("-")
        language = subtags[0].lower()
        script: str | None = None
        region: str | None = None
        variants_list: list[str] = []
        for subtag in subtags[1:]:
            if len(subtag) == 4 and subtag.isalpha():
                script = subtag.title()
            elif (len(subtag) == 2 and subtag.isalpha()) or (
                len(subtag) == 3 and subtag.isdigit()
            ):
                region = subtag.upper()
            elif subtag:
                variants_list.append(subtag.lower())
        return cls(
            language=language,
            script=script,
            region=region,
            variants=tuple(variants_list),
        )


class _Entity(BaseModel, frozen=True):
    type_name: ClassVar[str] = ""

    id: str
    display_name: str

    @property
    def name(self) -> str:
        """Identifier-safe CamelCase form of the display name."""
        return sanitize(self.display_name)

    @property
    def case_name(self) -> str:
        return f".{self.name}"

    @property
    def protocol_name(self) -> str:
        return f"{self.name}{self.type_name}Type"


class Country(_Entity):
    """A country (CLDR territory) and the languages spoken in it."""

    type_name: ClassVar[str] = "Country"

    language_ids: frozenset[str] = frozenset()


class Language(_Entity):
    """A language and the countries it is spoken in."""

    type_name: ClassVar[str] = "Language"

    country_ids: frozenset[str] = frozenset()

    @property
    def speaking_country_enum_name(self) -> str:
        return f"{self.name}Speaking{Country.type_name}"


class AvailableLocalesData(BaseModel):
    """Model for availableLocales.json."""

    available_locales: dict[str, list[str]] = Field(alias="availableLocales")

    @property
    def full(self) -> list[str]:
        return self.available_locales["full"]


class LocaleIdentity(BaseModel):
    """Identity block in locale data."""

    language: str
    script: str | None = None
    territory: str | None = None


class LocaleDisplayNames(BaseModel):
    """Locale display names block."""

    languages: dict[str, str]


class LocaleEntry(BaseModel):
    """Entry for a single locale in languages.json."""

    identity: LocaleIdentity
    locale_display_names: LocaleDisplayNames = Field(alias="localeDisplayNames")


class LanguagesJsonMain(BaseModel):
    """Main block in languages.json."""

    main: dict[str, LocaleEntry]


class TerritoryDisplayNames(BaseModel):
    """Territory display names block."""

    territories: dict[str, str]


class TerritoriesLocaleEntry(BaseModel):
    """Entry for a single locale in territories.json."""

    locale_display_names: TerritoryDisplayNames = Field(alias="localeDisplayNames")


class TerritoriesJsonMain(BaseModel):
    """Main block in territories.json."""

    main: dict[str, TerritoriesLocaleEntry]


class CurrencyInfo(BaseModel):
    """A single currency in currencies.json."""

    display_name: str | None = Field(default=None, alias="displayName")


class CurrencyNumbers(BaseModel):
    """Numbers block holding the currency table."""

    currencies: dict[str, CurrencyInfo]


class CurrenciesLocaleEntry(BaseModel):
    """Entry for a single locale in currencies.json."""

    numbers: CurrencyNumbers


class CurrenciesJsonMain(BaseModel):
    """Main block in currencies.json."""

    main: dict[str, CurrenciesLocaleEntry]
