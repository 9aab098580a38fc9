import enum
from typing import Annotated, Optional

import cattrs
import typer

from .. import config

DELIMITER_ALIASES = {"space": " "}


class Duplicates(str, enum.Enum):
    allow = "allow"
    ignore = "ignore"
    overwrite = "overwrite"


CommentMarkers = Annotated[
    Optional[list[str]],
    typer.Option(
        "--comment-marker", "-c", help="comment marker (';' or '#'), may be repeated"
    ),
]
Delimiter = Annotated[
    str, typer.Option("--delimiter", "-d", help="key/value delimiter: '=', ':' or 'space'")
]
Global = Annotated[
    bool, typer.Option("--global/--no-global", help="allow properties before any section")
]
Blank = Annotated[bool, typer.Option("--blank/--no-blank", help="allow empty values")]
Subsections = Annotated[
    bool,
    typer.Option("--subsections/--no-subsections", help="nest [parent.child] sections"),
]
DuplicateKeys = Annotated[
    Duplicates, typer.Option("--duplicates", help="how to handle repeated keys")
]


def make_config(
    comment_markers: list[str] | None,
    delimiter: str,
    allow_global: bool,
    allow_blank: bool,
    subsections: bool,
    duplicates: Duplicates,
) -> config.ParserConfig:
    """Build a parser config from command line options.

    Raises:
        typer.BadParameter: An option value is invalid.
    """

    options = {
        "delimiter": DELIMITER_ALIASES.get(delimiter, delimiter),
        "allow_global_properties": allow_global,
        "allow_blank_values": allow_blank,
        "enable_subsections": subsections,
        "duplicate_policy": duplicates.value,
    }
    if comment_markers:
        options["comment_markers"] = comment_markers

    try:
        return config.ParserConfig.from_dict(options)
    except (ValueError, cattrs.BaseValidationError) as e:
        raise typer.BadParameter(str(e)) from e
