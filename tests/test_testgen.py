"""Tests for XCTest generation."""

from __future__ import annotations

import re
from textwrap import dedent

from localegen.codegen import FRONT_MATTER, generate_source
from localegen.processing import build_locale_info
from localegen.testgen import create_unit_test_imports, generate_tests

from tests.test_codegen import parse_country_enums
from tests.test_processing import world_source

SCENARIO_TESTS = dedent(
    """\
    import XCTest
    @testable import Money

    // MARK: - Country Types Tests

    class EnglishSpeakingCountryTests: XCTestCase {

        var country: EnglishSpeakingCountry!

        func test__country_identifier_for_UnitedKingdom() {
            country = .UnitedKingdom
            XCTAssertEqual(country.countryIdentifier, "GB")
        }

        func test__country_identifier_for_UnitedStates() {
            country = .UnitedStates
            XCTAssertEqual(country.countryIdentifier, "US")
        }
    }
    """
)

TEST_CLASS_PATTERN = re.compile(
    r"class (\w+)Tests: XCTestCase \{\n(.*?)\n\}\n", re.DOTALL
)
ASSERTION_PATTERN = re.compile(
    r'country = \.(\w+)\n\s+XCTAssertEqual\(country\.countryIdentifier, "(\w+)"\)'
)


class TestGenerateTests:
    """Tests for generate_tests()."""

    def test_scenario(self, scenario_source):
        tests = generate_tests(build_locale_info(scenario_source))

        assert tests == "\n".join(FRONT_MATTER) + "\n" + SCENARIO_TESTS

    def test_custom_module_name(self):
        assert create_unit_test_imports("MoneyKit") == [
            "import XCTest",
            "@testable import MoneyKit",
        ]

    def test_mirrors_generated_enums(self):
        info = build_locale_info(world_source())

        enums = parse_country_enums(generate_source(info))
        tests = generate_tests(info)

        classes = {
            name: dict(ASSERTION_PATTERN.findall(body))
            for name, body in TEST_CLASS_PATTERN.findall(tests)
        }
        assert list(classes) == [
            lang.speaking_country_enum_name
            for lang in info.languages_with_more_than_one_country
        ]
        assert classes == enums

    def test_no_classes_without_multi_country_languages(self):
        info = build_locale_info(world_source(["fr_FR", "ja_JP"]))

        tests = generate_tests(info)

        assert tests.endswith("// MARK: - Country Types Tests\n")
        assert "XCTestCase" not in tests

    def test_deterministic(self):
        assert generate_tests(build_locale_info(world_source())) == generate_tests(
            build_locale_info(world_source(list(reversed(world_source().identifiers))))
        )
