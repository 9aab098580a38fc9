import io
import pathlib
from collections.abc import Iterable, Iterator

from .config import DEFAULT_CONFIG, ParserConfig
from .document import Document
from .lexer import Lexer
from .parser import Parser


def read_lines(file: Iterable[str]) -> Iterator[str]:
    """Yield the lines of a file without their trailing newlines.

    Lines are taken as the file yields them, so characters like form feeds stay part of a line.
    """

    for line in file:
        yield line.rstrip("\r\n")


def parse_lines(lines: Iterable[str], config: ParserConfig | None = None) -> Document:
    """Parse INI lines into a document.

    Args:
        lines: The lines to parse, without trailing newlines.
        config: The grammar and policies to parse with.
            Defaults to DEFAULT_CONFIG.

    Returns:
        The document.

    Raises:
        ParseError: The lines could not be parsed.
    """

    config = config or DEFAULT_CONFIG

    return Parser(config).parse(Lexer(config).tokenize(lines))


def load(file: Iterable[str], config: ParserConfig | None = None) -> Document:
    """Parse an INI file.

    Args:
        file: The file to parse. Trailing newlines are stripped from each line.
        config: See parse_lines().

    Returns:
        See parse_lines().

    Raises:
        See parse_lines().
    """

    return parse_lines(read_lines(file), config)


def loads(text: str, config: ParserConfig | None = None) -> Document:
    """Parse an INI text.

    Args:
        text: The text to parse.
        config: See parse_lines().

    Returns:
        See parse_lines().

    Raises:
        See parse_lines().
    """

    with io.StringIO(text) as buf:
        return load(buf, config)


def load_path(
    path: str | pathlib.Path,
    config: ParserConfig | None = None,
    encoding: str = "utf-8",
) -> Document:
    """Parse an INI file on disk.

    Args:
        path: The path to the file.
        config: See parse_lines().
        encoding: The file's encoding. Defaults to UTF-8.

    Returns:
        See parse_lines().

    Raises:
        See parse_lines().
    """

    with pathlib.Path(path).open(encoding=encoding) as f:
        return load(f, config)
