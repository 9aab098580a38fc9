import logging
from collections.abc import Iterable

from . import tokens
from .config import DEFAULT_CONFIG, ParserConfig

SECTION_OPEN = "["
SECTION_CLOSE = "]"
QUOTE = '"'

_log = logging.getLogger(__name__)


class Lexer:
    """Splits INI lines into tokens.

    Each line is lexed on its own:
    * A comment line becomes a Comment token.
    * A section header becomes a SectionName token.
    * A property becomes a key Name, MapsTo and value Name token.

    Blank lines and lines that match none of the above are skipped.

    Attributes:
        config: The grammar options (comment markers and delimiter).
    """

    config: ParserConfig

    def __init__(self, config: ParserConfig = DEFAULT_CONFIG):
        self.config = config

    def lex_line(self, line: str, lineno: int = 0) -> list[tokens.Token]:
        """Lex a single line.

        Args:
            line: The line to lex, without a trailing newline.
            lineno: The line number to tag tokens with.

        Returns:
            The tokens in the line, which may be empty.
        """

        if not line.strip():
            return []

        first = line[0]

        if first in self.config.comment_markers:
            return [tokens.Comment(line[1:].strip(), lineno)]

        if first == SECTION_OPEN:
            name, _, _ = line[1:].partition(SECTION_CLOSE)
            return [tokens.SectionName(name.replace(QUOTE, "").strip(), lineno)]

        delimiter = self.config.delimiter
        if first.isalnum() and delimiter in line:
            key, _, value = line.partition(delimiter)
            return [
                tokens.Name(key.strip(), lineno),
                tokens.MapsTo(lineno),
                tokens.Name(value.strip().replace(QUOTE, ""), lineno),
            ]

        _log.debug("skipping unrecognized line %d: %r", lineno, line)
        return []

    def tokenize(self, lines: Iterable[str]) -> list[tokens.Token]:
        """Lex a sequence of lines into tokens.

        Args:
            lines: The lines to lex, without trailing newlines.

        Returns:
            The tokens of all lines, in order.
        """

        result = []

        for lineno, line in enumerate(lines, start=1):
            result.extend(self.lex_line(line, lineno))

        return result
