import logging
import pathlib
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from .. import document, errors, lexer, loader, tokens, values

from .console import console, err_console
from .options import (
    Blank,
    CommentMarkers,
    Delimiter,
    DuplicateKeys,
    Duplicates,
    Global,
    Subsections,
    make_config,
)

LOG_LEVELS = [
    logging.CRITICAL,
    logging.ERROR,
    logging.WARNING,
    logging.INFO,
    logging.DEBUG,
]

app = typer.Typer(no_args_is_help=True)

IniFile = Annotated[
    pathlib.Path, typer.Argument(exists=True, dir_okay=False, resolve_path=True)
]
Encoding = Annotated[str, typer.Option(help="file encoding")]


@app.callback()
def common(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, min=0, max=5, help="set logging level"
        ),
    ] = 0
):
    """Parse INI files into sections and typed properties."""

    if verbose == 0:
        logging.disable()
    else:
        logging.disable(logging.NOTSET)
        logging.basicConfig(level=LOG_LEVELS[verbose - 1])


def _section_tree(tree: Tree, section: document.Section):
    branch = tree.add(f"[bold]\\[{escape(section.name)}][/bold]")

    for prop in section.properties:
        branch.add(
            f"{escape(prop.key)} = {escape(repr(prop.value))} "
            f"[dim]({values.type_name(prop.value)})[/dim]"
        )

    for child in section.children:
        _section_tree(branch, child)


def render(doc: document.Document, title: str) -> Tree:
    """Render a document as a tree of sections, properties and comments."""

    tree = Tree(escape(title))

    for section in doc:
        _section_tree(tree, section)

    if doc.comments:
        comments = tree.add("[italic]comments[/italic]")
        for comment in doc.comments:
            comments.add(f"[dim]; {escape(comment)}[/dim]")

    return tree


@app.command()
def show(
    file: IniFile,
    json: Annotated[bool, typer.Option("--json", help="print as JSON")] = False,
    comment_markers: CommentMarkers = None,
    delimiter: Delimiter = "=",
    allow_global: Global = False,
    allow_blank: Blank = False,
    subsections: Subsections = False,
    duplicates: DuplicateKeys = Duplicates.allow,
    encoding: Encoding = "utf-8",
):
    """Parse an INI file and print its sections."""

    config = make_config(
        comment_markers, delimiter, allow_global, allow_blank, subsections, duplicates
    )

    try:
        doc = loader.load_path(file, config, encoding=encoding)
    except (errors.ParseError, UnicodeDecodeError) as e:
        err_console.print(f"[red]error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if json:
        console.print_json(data=doc.to_dict())
    else:
        console.print(render(doc, str(file)))


def _token_text(token: tokens.Token) -> str:
    match token:
        case tokens.Comment(text=text) | tokens.Name(text=text):
            return text
        case tokens.SectionName(name=name):
            return name

    return ""


@app.command("tokens")
def show_tokens(
    file: IniFile,
    comment_markers: CommentMarkers = None,
    delimiter: Delimiter = "=",
    encoding: Encoding = "utf-8",
):
    """Print the tokens of an INI file."""

    config = make_config(
        comment_markers, delimiter, False, False, False, Duplicates.allow
    )

    try:
        with file.open(encoding=encoding) as f:
            stream = lexer.Lexer(config).tokenize(loader.read_lines(f))
    except UnicodeDecodeError as e:
        err_console.print(f"[red]error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    table = Table()
    for column in ("Line", "Token", "Text"):
        table.add_column(column)

    for token in stream:
        table.add_row(str(token.line), type(token).__name__, escape(_token_text(token)))

    console.print(table)
