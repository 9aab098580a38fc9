class MartiniError(Exception):
    pass


class ParseError(MartiniError):
    """An INI text could not be parsed.

    Attributes:
        line: The line number (starting from 1) where parsing stopped, if known.
    """

    line: int | None

    def __init__(self, message: str, line: int | None = None):
        self.line = line

        if line is not None:
            message = f"line {line}: {message}"

        super().__init__(message)


class MalformedSection(ParseError):
    """A section header has no name."""

    def __init__(self, line: int | None = None):
        super().__init__("section header is missing a name", line)


class DisallowedGlobalProperty(ParseError):
    """A property appeared before any section while global properties are disabled."""

    def __init__(self, key: str, line: int | None = None):
        self.key = key
        super().__init__(f"property '{key}' is outside of any section", line)


class DisallowedBlankValue(ParseError):
    """A property has an empty value while blank values are disabled."""

    def __init__(self, key: str, line: int | None = None):
        self.key = key
        super().__init__(f"property '{key}' has a blank value", line)


class DanglingProperty(ParseError):
    """A property key was never given a value."""

    def __init__(self, key: str, line: int | None = None):
        self.key = key
        super().__init__(f"property '{key}' has no value", line)
