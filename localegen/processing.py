"""Build the language/country relational model from locale identifiers."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .models import Country, Language
from .sources import CodeKind, LocaleDataSource


def _by_name(entity: Language | Country) -> tuple[str, str]:
    return entity.name, entity.id


@dataclass(frozen=True, slots=True)
class LocaleInfo:
    """The finished relational model and its derived views."""

    languages_by_id: Mapping[str, Language]
    countries_by_id: Mapping[str, Country]
    languages: tuple[Language, ...]
    countries: tuple[Country, ...]
    languages_with_less_than_two_countries: tuple[Language, ...]
    languages_with_more_than_one_country: tuple[Language, ...]

    @classmethod
    def from_maps(
        cls,
        languages_by_id: Mapping[str, Language],
        countries_by_id: Mapping[str, Country],
    ) -> LocaleInfo:
        """Freeze the two maps and compute the sorted views over them."""
        languages = tuple(
            sorted(
                languages_by_id.values(),
                key=lambda language: (-len(language.country_ids), language.id),
            )
        )
        countries = tuple(
            sorted(
                countries_by_id.values(),
                key=lambda country: (-len(country.language_ids), country.id),
            )
        )
        return cls(
            languages_by_id=MappingProxyType(dict(languages_by_id)),
            countries_by_id=MappingProxyType(dict(countries_by_id)),
            languages=languages,
            countries=countries,
            languages_with_less_than_two_countries=tuple(
                sorted(
                    (lang for lang in languages if len(lang.country_ids) < 2),
                    key=_by_name,
                )
            ),
            languages_with_more_than_one_country=tuple(
                sorted(
                    (lang for lang in languages if len(lang.country_ids) > 1),
                    key=_by_name,
                )
            ),
        )

    def languages_by_name(self) -> list[Language]:
        """All languages in lexicographic order of their sanitized name."""
        return sorted(self.languages, key=_by_name)

    def countries_for(self, language: Language) -> list[Country]:
        """Resolve a language's countries, ordered by ascending country id."""
        return [
            self.countries_by_id[country_id]
            for country_id in sorted(language.country_ids)
            if country_id in self.countries_by_id
        ]


class RelationBuilder:
    """Accumulates languages and countries, recording each pairing on both sides."""

    def __init__(self, source: LocaleDataSource) -> None:
        self._source = source
        self._languages: dict[str, Language] = {}
        self._countries: dict[str, Country] = {}

    def add(self, identifier: str) -> None:
        """Fold one locale identifier into the model.

        Codes without an English display name are left out of the model.
        """
        language_id, country_id = self._source.decompose(identifier)
        language = self._language(language_id) if language_id else None
        country = self._country(country_id) if country_id else None
        if language is not None and country is not None:
            self._link(language, country)

    def add_all(self, identifiers: Iterable[str]) -> RelationBuilder:
        for identifier in identifiers:
            self.add(identifier)
        return self

    def build(self) -> LocaleInfo:
        return LocaleInfo.from_maps(self._languages, self._countries)

    def _language(self, language_id: str) -> Language | None:
        language = self._languages.get(language_id)
        if language is None:
            display_name = self._source.display_name(CodeKind.LANGUAGE, language_id)
            if not display_name:
                return None
            language = Language(id=language_id, display_name=display_name)
            self._languages[language_id] = language
        return language

    def _country(self, country_id: str) -> Country | None:
        country = self._countries.get(country_id)
        if country is None:
            display_name = self._source.display_name(CodeKind.COUNTRY, country_id)
            if not display_name:
                return None
            country = Country(id=country_id, display_name=display_name)
            self._countries[country_id] = country
        return country

    def _link(self, language: Language, country: Country) -> None:
        self._languages[language.id] = language.model_copy(
            update={"country_ids": language.country_ids | {country.id}}
        )
        self._countries[country.id] = country.model_copy(
            update={"language_ids": country.language_ids | {language.id}}
        )


def build_locale_info(source: LocaleDataSource) -> LocaleInfo:
    """Build the relational model from every identifier ``source`` lists."""
    return RelationBuilder(source).add_all(source.list_locale_identifiers()).build()
