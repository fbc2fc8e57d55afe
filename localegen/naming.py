"""Identifier sanitization for generated type and case names."""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Protocol

# Apostrophe variants seen in CLDR English names, e.g. "Côte d’Ivoire".
STRIPPED_CHARACTERS = (" ", "-", "'", "’", "ʼ", ".", "&", "(", ")")

# A word is a run of letters, apostrophes inside it included.
_WORD_PATTERN = re.compile(r"[^\W\d_]+(?:['’ʼ][^\W\d_]+)*")


class GenerationError(Exception):
    """Raised when the locale model cannot be turned into valid source code."""


class NameCollisionError(GenerationError):
    """Raised when two entities sanitize to the same identifier."""


class InvalidNameError(GenerationError):
    """Raised when a sanitized name is not a usable identifier."""


class NamedEntity(Protocol):
    id: str
    display_name: str

    @property
    def name(self) -> str: ...


def capitalize_words(text: str) -> str:
    """Uppercase the first letter of every word and lowercase the rest."""
    return _WORD_PATTERN.sub(lambda match: match.group(0).capitalize(), text)


def sanitize(display_name: str) -> str:
    """Convert a human-readable display name into a CamelCase identifier.

    >>> sanitize("St. Kitts & Nevis")
    'StKittsNevis'
    >>> sanitize("Congo - Kinshasa")
    'CongoKinshasa'
    """
    name = capitalize_words(display_name)
    for character in STRIPPED_CHARACTERS:
        name = name.replace(character, "")
    return name


def ensure_unique_names(entities: Iterable[NamedEntity], scope: str) -> None:
    """Check that every entity in ``scope`` has a distinct, valid identifier.

    Raises:
        InvalidNameError: If a sanitized name is not an identifier.
        NameCollisionError: If two entities share a sanitized name.
    """
    seen: dict[str, NamedEntity] = {}
    for entity in entities:
        name = entity.name
        if not name.isidentifier():
            raise InvalidNameError(
                f"{scope}: '{entity.display_name}' ({entity.id}) sanitizes to "
                f"'{name}', which is not a valid identifier."
            )
        previous = seen.get(name)
        if previous is not None and previous.id != entity.id:
            raise NameCollisionError(
                f"{scope}: '{previous.display_name}' ({previous.id}) and "
                f"'{entity.display_name}' ({entity.id}) both sanitize to '{name}'."
            )
        seen[name] = entity
