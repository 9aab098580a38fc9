import dataclasses
import logging
from collections.abc import Iterable

from . import errors, tokens, values
from .config import DEFAULT_CONFIG, DuplicatePolicy, ParserConfig
from .document import Document, Property, Section

_log = logging.getLogger(__name__)


@dataclasses.dataclass(slots=True)
class _SectionBuilder:
    name: str
    properties: list[Property] = dataclasses.field(default_factory=list)
    children: list["_SectionBuilder"] = dataclasses.field(default_factory=list)

    def build(self) -> Section:
        return Section(
            name=self.name,
            properties=tuple(self.properties),
            children=tuple(c.build() for c in self.children),
        )


@dataclasses.dataclass(slots=True)
class _Context:
    """State of a single parse."""

    sections: list[_SectionBuilder] = dataclasses.field(default_factory=list)
    comments: list[str] = dataclasses.field(default_factory=list)

    # The section under construction.
    section: _SectionBuilder | None = None
    # The key waiting for its value.
    pending: tokens.Name | None = None
    # Whether the pending key is an ignored duplicate.
    skipping: bool = False
    # Keys already inserted into the current section.
    seen: set[str] = dataclasses.field(default_factory=set)

    def open_section(self, section: _SectionBuilder):
        self.section = section
        self.seen.clear()


class Parser:
    """Assembles lexer tokens into a document.

    The parser keeps no state between calls to parse(),
    so one parser can be reused for any number of token streams.

    Attributes:
        config: Policies for global properties, blank values, subsections and duplicate keys.
    """

    config: ParserConfig

    def __init__(self, config: ParserConfig = DEFAULT_CONFIG):
        self.config = config

    def parse(self, stream: Iterable[tokens.Token]) -> Document:
        """Parse tokens into a document.

        Args:
            stream: The tokens to parse.

        Returns:
            The document.

        Raises:
            MalformedSection: A section has no name.
            DisallowedGlobalProperty: A property appeared before the first section.
            DisallowedBlankValue: A property has an empty value.
            DanglingProperty: A property key has no value.
        """

        ctx = _Context()

        for token in stream:
            match token:
                case tokens.Comment(text=text):
                    if text:
                        ctx.comments.append(text)

                case tokens.SectionName():
                    self._section(ctx, token)

                case tokens.MapsTo():
                    pass

                case tokens.Name() if ctx.pending is None:
                    self._key(ctx, token)

                case tokens.Name():
                    self._value(ctx, token)

        if ctx.pending is not None:
            raise errors.DanglingProperty(ctx.pending.text, ctx.pending.line)

        _log.debug(
            "parsed %d section(s) and %d comment(s)",
            len(ctx.sections),
            len(ctx.comments),
        )

        return Document(
            sections=tuple(s.build() for s in ctx.sections),
            comments=tuple(ctx.comments),
        )

    def _section(self, ctx: _Context, token: tokens.SectionName):
        if not token.name:
            raise errors.MalformedSection(token.line)

        if ctx.pending is not None:
            raise errors.DanglingProperty(ctx.pending.text, ctx.pending.line)

        section = _SectionBuilder(token.name)

        # Sections are attached as soon as they are opened.
        # As sections never overlap, this keeps them in the order they were declared.
        if self.config.enable_subsections:
            parent_name, sep, child_name = token.name.partition(
                self.config.subsection_separator
            )
            if sep and not child_name:
                raise errors.MalformedSection(token.line)

            if sep:
                if parent := self._find_parent(ctx, parent_name):
                    section.name = child_name
                    parent.children.append(section)
                    ctx.open_section(section)
                    return

                _log.warning(
                    "line %d: parent section '%s' of '%s' was never opened",
                    token.line,
                    parent_name,
                    token.name,
                )

        ctx.sections.append(section)
        ctx.open_section(section)

    def _find_parent(self, ctx: _Context, name: str) -> _SectionBuilder | None:
        # The most recently opened top-level section wins.
        for section in reversed(ctx.sections):
            if section.name == name:
                return section

        return None

    def _key(self, ctx: _Context, token: tokens.Name):
        if ctx.section is None:
            if not self.config.allow_global_properties:
                raise errors.DisallowedGlobalProperty(token.text, token.line)

            section = _SectionBuilder(self.config.default_section)
            ctx.sections.append(section)
            ctx.open_section(section)

        ctx.pending = token
        ctx.skipping = False

        if token.text not in ctx.seen:
            return

        match self.config.duplicate_policy:
            case DuplicatePolicy.IGNORE:
                _log.debug("line %d: ignoring duplicate key '%s'", token.line, token.text)
                ctx.skipping = True

            case DuplicatePolicy.OVERWRITE:
                _log.debug(
                    "line %d: overwriting duplicate key '%s'", token.line, token.text
                )
                ctx.section.properties = [
                    p for p in ctx.section.properties if p.key != token.text
                ]

    def _value(self, ctx: _Context, token: tokens.Name):
        key = ctx.pending
        assert key is not None and ctx.section is not None

        ctx.pending = None

        if ctx.skipping:
            ctx.skipping = False
            return

        if not token.text and not self.config.allow_blank_values:
            raise errors.DisallowedBlankValue(key.text, token.line)

        ctx.section.properties.append(Property(key.text, values.infer(token.text)))
        ctx.seen.add(key.text)
