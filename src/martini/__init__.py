"""This module provides a configurable parser for INI files."""

from .config import DEFAULT_CONFIG, DuplicatePolicy, ParserConfig
from .document import Document, Property, Section
from .errors import (
    DanglingProperty,
    DisallowedBlankValue,
    DisallowedGlobalProperty,
    MalformedSection,
    MartiniError,
    ParseError,
)
from .lexer import Lexer
from .loader import load, load_path, loads, parse_lines, read_lines
from .parser import Parser
from .values import Value, infer
