"""CLDR driven generator for the Money library's locale and currency types."""

from .codegen import generate_source
from .models import Country, Language, Locale
from .naming import GenerationError, NameCollisionError, sanitize
from .processing import LocaleInfo, RelationBuilder, build_locale_info
from .sources import CldrLocaleDataSource, LocaleDataSource, StaticLocaleDataSource
from .testgen import generate_tests
from .writers import write_generated

__all__ = [
    "CldrLocaleDataSource",
    "Country",
    "GenerationError",
    "Language",
    "Locale",
    "LocaleDataSource",
    "LocaleInfo",
    "NameCollisionError",
    "RelationBuilder",
    "StaticLocaleDataSource",
    "build_locale_info",
    "generate_source",
    "generate_tests",
    "sanitize",
    "write_generated",
]
