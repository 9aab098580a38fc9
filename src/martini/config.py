import enum
from collections.abc import Mapping
from typing import Any, Self

import attrs

from ._conv import converter

COMMENT_MARKERS = (";", "#")
DELIMITERS = ("=", " ", ":")


class DuplicatePolicy(enum.Enum):
    """What to do when a key appears twice within the same section."""

    #: Keep both properties, in order.
    ALLOW = "allow"
    #: Keep the first property and discard the new one.
    IGNORE = "ignore"
    #: Remove the first property and insert the new one.
    OVERWRITE = "overwrite"


def _check_markers(instance, attribute, value):
    if not value:
        raise ValueError("at least one comment marker is required")

    for marker in value:
        if marker not in COMMENT_MARKERS:
            raise ValueError(f"invalid comment marker: '{marker}'")


@attrs.frozen
class ParserConfig:
    """Options for the lexer and parser.

    A single config is shared by the lexer and parser of a parse,
    so both agree on the grammar.

    Attributes:
        comment_markers: Characters that start a comment line.
            Either or both of ';' and '#'. Defaults to ';'.
        delimiter: The character between a key and its value.
            One of '=', ' ' or ':'. Defaults to '='.
        allow_global_properties: Whether or not properties may appear before the first section.
            They are placed into an implicit section named default_section.
        allow_blank_values: Whether or not a property may have an empty value.
        enable_subsections: Whether or not dotted section names ([parent.child])
            are nested under their parent.
        duplicate_policy: How repeated keys within a section are handled.
        default_section: Name of the implicit section for global properties.
        subsection_separator: Separator between parent and child section names.
    """

    comment_markers: tuple[str, ...] = attrs.field(
        default=(";",), converter=tuple, validator=_check_markers
    )
    delimiter: str = attrs.field(default="=", validator=attrs.validators.in_(DELIMITERS))
    allow_global_properties: bool = False
    allow_blank_values: bool = False
    enable_subsections: bool = False
    duplicate_policy: DuplicatePolicy = attrs.field(
        default=DuplicatePolicy.ALLOW, converter=DuplicatePolicy
    )
    default_section: str = attrs.field(
        default="DEFAULT", validator=attrs.validators.min_len(1)
    )
    subsection_separator: str = attrs.field(
        default=".", validator=attrs.validators.in_((".",))
    )

    def to_dict(self) -> dict[str, Any]:
        """Serialize the config to a dict.

        Returns:
            The dict.
        """

        return converter.unstructure(self)

    @classmethod
    def from_dict(cls, config: Mapping[str, Any]) -> Self:
        """Parse a config from a dict. Missing options keep their defaults.

        Args:
            config: The dict to parse from.

        Returns:
            The config.
        """

        return converter.structure(dict(config), cls)


DEFAULT_CONFIG = ParserConfig()
