"""Reflected component properties, used by the editor and the serializer."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, ClassVar

_GET_PATTERN = re.compile("get", re.IGNORECASE)


def split_at_capital(text: str) -> str:
    """Insert a space before each capital letter that differs from the first character."""
    if not text:
        return ""
    first = text[0]
    return "".join(
        f" {ch}" if ch.isupper() and ch != first else ch for ch in text
    )


@dataclass(frozen=True)
class Property:
    """A named, editable value of a component.

    ``name`` is the name shown to tools; ``attribute`` is the instance
    attribute that holds the value (defaults to ``name``).  A getter property
    is named after its accessor, e.g. ``GetPosition``.
    """

    name: str
    hidden: bool = False
    attribute: str | None = None
    is_getter: bool = False

    @property
    def _target(self) -> str:
        return self.attribute or self.name

    def beautified_name(self) -> str:
        """A human readable label for the property."""
        if not self.name:
            return ""
        label = self.name[0].upper() + self.name[1:]
        if self.is_getter:
            label = _GET_PATTERN.sub("", label)
        return split_at_capital(label)

    def get(self, instance: Any) -> Any:
        return getattr(instance, self._target)

    def set(self, instance: Any, value: Any) -> None:
        setattr(instance, self._target, value)


class Component:
    """Base class for components; subclasses list their reflected properties."""

    PROPERTIES: ClassVar[tuple[Property, ...]] = ()

    @classmethod
    def component_properties(cls) -> list[Property]:
        """The reflected properties, in declaration order."""
        return list(cls.PROPERTIES)

    @classmethod
    def component_name(cls) -> str:
        return cls.__name__