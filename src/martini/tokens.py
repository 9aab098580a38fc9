"""Tokens produced by the lexer.

All tokens carry the line number (starting from 1) they were read from.
"""

import dataclasses


@dataclasses.dataclass(frozen=True, slots=True)
class Comment:
    """A comment line, i.e. ; text."""

    text: str
    line: int = 0


@dataclasses.dataclass(frozen=True, slots=True)
class SectionName:
    """A section header, i.e. [name]."""

    name: str
    line: int = 0


@dataclasses.dataclass(frozen=True, slots=True)
class MapsTo:
    """The delimiter between a property's key and value."""

    line: int = 0


@dataclasses.dataclass(frozen=True, slots=True)
class Name:
    """A property key or value."""

    text: str
    line: int = 0


Token = Comment | SectionName | MapsTo | Name
