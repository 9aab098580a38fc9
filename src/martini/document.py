from collections.abc import Iterator
from typing import Any

import attrs

from ._conv import converter
from .values import Value


@attrs.frozen
class Property:
    """An INI property, i.e. key=value.

    Attributes:
        key: The property's name.
        value: The typed value (int, float or str).
    """

    key: str
    value: Value


@attrs.frozen
class Section:
    """An INI section, i.e. [name].

    Attributes:
        name: The section's name.
        properties: The properties in the order they were declared.
            Keys may repeat if duplicates are allowed.
        children: Nested sections, i.e. [name.child].
    """

    name: str
    properties: tuple[Property, ...] = ()
    children: tuple["Section", ...] = ()

    def __contains__(self, key: object) -> bool:
        return any(p.key == key for p in self.properties)

    def __getitem__(self, key: str) -> Value:
        for prop in reversed(self.properties):
            if prop.key == key:
                return prop.value

        raise KeyError(key)

    def get(self, key: str, default: Value | None = None) -> Value | None:
        """Get the value of a property.

        Args:
            key: The property's key.
            default: What to return if the key is not present.

        Returns:
            The value of the last property with the key, or default.
        """

        try:
            return self[key]
        except KeyError:
            return default

    def get_all(self, key: str) -> list[Value]:
        """Get the values of all properties with the key, in order."""

        return [p.value for p in self.properties if p.key == key]

    def keys(self) -> list[str]:
        """Get the unique property keys in the order they were first declared."""

        return list(dict.fromkeys(p.key for p in self.properties))

    def child(self, name: str) -> "Section | None":
        """Get the first child section with the name, or None."""

        return next((c for c in self.children if c.name == name), None)


attrs.resolve_types(Section)


@attrs.frozen
class Document:
    """A parsed INI text.

    Attributes:
        sections: The top-level sections in the order their headers were encountered.
            Sections with the same name are not merged.
        comments: The comment lines, with the comment marker stripped.
    """

    sections: tuple[Section, ...] = ()
    comments: tuple[str, ...] = ()

    def __iter__(self) -> Iterator[Section]:
        return iter(self.sections)

    def __len__(self) -> int:
        return len(self.sections)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.section(name) is not None

    def find(self, name: str) -> list[Section]:
        """Get all top-level sections with the name."""

        return [s for s in self.sections if s.name == name]

    def section(self, name: str, separator: str = ".") -> Section | None:
        """Get a section by name.

        If no top-level section has the name and it contains the separator,
        it is looked up as parent.child instead.

        Args:
            name: The section's name.
            separator: The separator between parent and child names.

        Returns:
            The first matching section, or None.
        """

        if found := self.find(name):
            return found[0]

        parent_name, sep, child_name = name.partition(separator)
        if sep:
            for parent in self.find(parent_name):
                if child := parent.child(child_name):
                    return child

        return None

    def to_dict(self) -> dict[str, Any]:
        """Serialize the document to plain dicts and lists (i.e. for JSON).

        Returns:
            The dict.
        """

        return converter.unstructure(self)
