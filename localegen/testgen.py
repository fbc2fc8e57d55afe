"""XCTest generation for the language speaking country enums."""

from __future__ import annotations

from .codegen import check_names, create_front_matter
from .models import Country, Language
from .processing import LocaleInfo

DEFAULT_MODULE_NAME = "Money"


def create_unit_test_imports(module_name: str = DEFAULT_MODULE_NAME) -> list[str]:
    return ["import XCTest", f"@testable import {module_name}"]


def create_country_identifier_test(country: Country) -> list[str]:
    return [
        "",
        f"    func test__country_identifier_for_{country.name}() {{",
        f"        country = {country.case_name}",
        f'        XCTAssertEqual(country.countryIdentifier, "{country.id}")',
        "    }",
    ]


def create_language_speaking_country_tests(
    language: Language, info: LocaleInfo
) -> list[str]:
    name = language.speaking_country_enum_name
    lines = ["", f"class {name}Tests: XCTestCase {{", "", f"    var country: {name}!"]
    for country in info.countries_for(language):
        lines += create_country_identifier_test(country)
    lines.append("}")
    return lines


def generate_tests(info: LocaleInfo, module_name: str = DEFAULT_MODULE_NAME) -> str:
    """Render the XCTest file mirroring every generated country enum."""
    check_names(info)

    lines = create_front_matter()
    lines += create_unit_test_imports(module_name)
    lines += ["", "// MARK: - Country Types Tests"]
    for language in info.languages_with_more_than_one_country:
        lines += create_language_speaking_country_tests(language, info)
    return "\n".join(lines) + "\n"
