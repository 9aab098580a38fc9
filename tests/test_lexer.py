import pytest

from martini import ParserConfig
from martini.lexer import Lexer
from martini.tokens import Comment, MapsTo, Name, SectionName

LEXER = Lexer()


def test_lex_comment():
    assert LEXER.lex_line(";  a comment  ", 3) == [Comment("a comment", 3)]


def test_lex_comment_hash_disabled():
    assert LEXER.lex_line("# not a comment") == []


def test_lex_comment_hash_enabled():
    lexer = Lexer(ParserConfig(comment_markers=(";", "#")))
    assert lexer.lex_line("# hello") == [Comment("hello")]
    assert lexer.lex_line("; world") == [Comment("world")]


def test_lex_section():
    assert LEXER.lex_line("[this is a section]") == [SectionName("this is a section")]


def test_lex_section_quoted():
    assert LEXER.lex_line('[ "server" ]') == [SectionName("server")]


def test_lex_section_trailing_text():
    assert LEXER.lex_line("[server] ; comment") == [SectionName("server")]


def test_lex_section_hanging_bracket():
    assert LEXER.lex_line("[hanging bracket") == [SectionName("hanging bracket")]


def test_lex_section_empty():
    assert LEXER.lex_line("[]") == [SectionName("")]


def test_lex_property():
    assert LEXER.lex_line("こんにちは=konnichiwa", 1) == [
        Name("こんにちは", 1),
        MapsTo(1),
        Name("konnichiwa", 1),
    ]


def test_lex_property_with_spaces():
    assert LEXER.lex_line("key = value") == [Name("key"), MapsTo(), Name("value")]


def test_lex_property_first_delimiter():
    assert LEXER.lex_line("url=http://x/?a=b") == [
        Name("url"),
        MapsTo(),
        Name("http://x/?a=b"),
    ]


def test_lex_property_quoted():
    assert LEXER.lex_line('path = "/tmp/x"') == [Name("path"), MapsTo(), Name("/tmp/x")]


def test_lex_property_blank_value():
    assert LEXER.lex_line("key=") == [Name("key"), MapsTo(), Name("")]


@pytest.mark.parametrize(
    "delimiter,line",
    [(":", "key: value"), (" ", "key value")],
)
def test_lex_property_delimiters(delimiter, line):
    lexer = Lexer(ParserConfig(delimiter=delimiter))
    assert lexer.lex_line(line) == [Name("key"), MapsTo(), Name("value")]


def test_lex_property_wrong_delimiter():
    lexer = Lexer(ParserConfig(delimiter=":"))
    assert lexer.lex_line("key=value") == []


@pytest.mark.parametrize(
    "line",
    ["", "   ", "=empty property key", "]", "  indented=1", "-dash=1", "no delimiter"],
)
def test_lex_skipped(line):
    assert LEXER.lex_line(line) == []


def test_tokenize_line_numbers():
    stream = LEXER.tokenize(["; header", "", "[s]", "a=1"])

    assert stream == [
        Comment("header", 1),
        SectionName("s", 3),
        Name("a", 4),
        MapsTo(4),
        Name("1", 4),
    ]


def test_tokenize_skip_logged(caplog):
    with caplog.at_level("DEBUG", logger="martini.lexer"):
        assert LEXER.tokenize(["???"]) == []

    assert "skipping unrecognized line 1" in caplog.text
