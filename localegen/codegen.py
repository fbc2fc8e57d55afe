"""Swift source generation for currencies, money aliases and locale enums."""

from __future__ import annotations

from collections.abc import Iterable

from .models import Language
from .naming import ensure_unique_names
from .processing import LocaleInfo

FRONT_MATTER = (
    "// ",
    "// Money, https://github.com/danthorpe/Money",
    "// Created by Dan Thorpe, @danthorpe",
    "// ",
    "// The MIT License (MIT)",
    "// ",
    "// Copyright (c) 2015 Daniel Thorpe",
    "// ",
    "// Permission is hereby granted, free of charge, to any person obtaining a copy",
    '// of this software and associated documentation files (the "Software"), to deal',
    "// in the Software without restriction, including without limitation the rights",
    "// to use, copy, modify, merge, publish, distribute, sublicense, and/or sell",
    "// copies of the Software, and to permit persons to whom the Software is",
    "// furnished to do so, subject to the following conditions:",
    "// ",
    "// The above copyright notice and this permission notice shall be included in all",
    "// copies or substantial portions of the Software.",
    "// ",
    '// THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR',
    "// IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,",
    "// FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE",
    "// AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER",
    "// LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,",
    "// OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE",
    "// SOFTWARE.",
    "// ",
    "// Autogenerated from build scripts, do not manually edit this file.",
    "",
)


def create_front_matter() -> list[str]:
    return list(FRONT_MATTER)


# Currencies


def create_currency_types(currency_codes: Iterable[str]) -> list[str]:
    lines = ["extension Currency {"]
    for code in currency_codes:
        lines += [
            "",
            f"    /// Currency {code}",
            f"    public final class {code}: Currency.Base, ISOCurrencyType {{",
            f'        public static var sharedInstance = {code}(code: "{code}")',
            "    }",
        ]
    lines.append("}")
    return lines


def create_money_types(currency_codes: Iterable[str]) -> list[str]:
    lines = [""]
    for code in currency_codes:
        lines += [
            f"/// {code} Money",
            f"public typealias {code} = _Money<Currency.{code}>",
        ]
    return lines


# Locales


def check_names(info: LocaleInfo) -> None:
    """Fail before rendering if any generated identifier would be ambiguous.

    Raises:
        NameCollisionError: If two entities in one enum share a case name.
        InvalidNameError: If a display name does not sanitize to an identifier.
    """
    ensure_unique_names(info.languages_by_name(), "Locale")
    for language in info.languages_with_more_than_one_country:
        ensure_unique_names(
            info.countries_for(language), language.speaking_country_enum_name
        )


def create_language_speaking_country(
    language: Language, info: LocaleInfo
) -> list[str]:
    """Render the ``<Language>SpeakingCountry`` enum for one language."""
    name = language.speaking_country_enum_name
    countries = info.countries_for(language)
    joined_case_names = ", ".join(country.case_name for country in countries)

    lines = ["", f"public enum {name}: CountryType {{", ""]
    lines += [f"    case {country.name}" for country in countries]
    lines += [
        "",
        f"    public static let all: [{name}] = [ {joined_case_names} ]",
        "",
        "    public var countryIdentifier: String {",
        "        switch self {",
    ]
    for country in countries:
        lines += [
            f"        case {country.case_name}:",
            f'            return "{country.id}"',
        ]
    lines += [
        "        }",
        "    }",
        "}",
    ]
    return lines


def create_language_speaking_countries(info: LocaleInfo) -> list[str]:
    lines = ["", "// MARK: - Country Types"]
    for language in info.languages_with_more_than_one_country:
        lines += create_language_speaking_country(language, info)
    return lines


def _has_many_countries(language: Language) -> bool:
    return len(language.country_ids) > 1


def create_locale_enum(info: LocaleInfo) -> list[str]:
    lines = ["", "public enum Locale {", ""]
    for language in info.languages_by_name():
        if _has_many_countries(language):
            lines.append(
                f"    case {language.name}({language.speaking_country_enum_name})"
            )
        else:
            lines.append(f"    case {language.name}")
    lines.append("}")
    return lines


def create_language_type_extension(info: LocaleInfo) -> list[str]:
    lines = [
        "",
        "extension Locale: LanguageType {",
        "",
        "    public var languageIdentifier: String {",
        "        switch self {",
    ]
    for language in info.languages_by_name():
        pattern = language.case_name
        if _has_many_countries(language):
            pattern += "(_)"
        lines += [
            f"        case {pattern}:",
            f'            return "{language.id}"',
        ]
    lines += ["        }", "    }", "}"]
    return lines


def create_country_type_extension(info: LocaleInfo) -> list[str]:
    lines = [
        "",
        "extension Locale: CountryType {",
        "",
        "    public var countryIdentifier: String {",
        "        switch self {",
    ]
    single = info.languages_with_less_than_two_countries
    if single:
        joined_case_names = ", ".join(language.case_name for language in single)
        lines += [
            f"        case {joined_case_names}:",
            '            return ""',
        ]
    for language in info.languages_with_more_than_one_country:
        lines += [
            f"        case {language.case_name}(let country):",
            "            return country.countryIdentifier",
        ]
    lines += ["        }", "    }", "}"]
    return lines


def create_locale_type_extension() -> list[str]:
    return [
        "",
        "extension Locale: LocaleType {",
        "    // Uses default implementation",
        "}",
    ]


def create_locale(info: LocaleInfo) -> list[str]:
    lines = ["", "// MARK: - Locale"]
    lines += create_locale_enum(info)
    lines += create_language_type_extension(info)
    lines += create_country_type_extension(info)
    lines += create_locale_type_extension()
    return lines


def create_locale_types(info: LocaleInfo) -> list[str]:
    return create_language_speaking_countries(info) + create_locale(info)


def generate_source(info: LocaleInfo, currency_codes: Iterable[str] = ()) -> str:
    """Render the complete generated Swift source file."""
    check_names(info)
    codes = list(currency_codes)

    lines = create_front_matter()
    if codes:
        lines += create_currency_types(codes)
        lines.append("")
        lines += create_money_types(codes)
        lines.append("")
    lines += create_locale_types(info)
    return "\n".join(lines) + "\n"
