"""
Tag grammar for string values.

Two reserved prefixes turn an ordinary string slot into a reference:

* ``"@@=name"`` – a function reference, resolved by the configured
  ``convert_function`` callback.
* ``"@@#name"`` – a constant reference; when ``name`` is not a registered
  constant it is read as ``"<EnumName>.<MemberName>"``.

Parsing is kept separate from resolution: this module only classifies a
string, :mod:`json_converter.conversion.string_resolver` looks the result up
in a configuration.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Union

FUNCTION_IDENTIFIER: Final[str] = "@@="
CONSTANT_IDENTIFIER: Final[str] = "@@#"

# Field marking a mapping as a class-instance descriptor unless overridden.
DEFAULT_TYPE_KEY: Final[str] = "type"


@dataclass(frozen=True)
class PlainString:
    """A string carrying no reference."""

    value: str


@dataclass(frozen=True)
class FunctionRef:
    """``@@=`` reference; ``name`` is the string with the prefix stripped."""

    name: str

    @property
    def raw(self) -> str:
        return FUNCTION_IDENTIFIER + self.name


@dataclass(frozen=True)
class ConstantRef:
    """``@@#`` reference to a constant or, failing that, an enum member."""

    name: str


@dataclass(frozen=True)
class EnumRef:
    """Enumeration member reference derived from a :class:`ConstantRef`."""

    enum_name: str
    member_name: str

    @classmethod
    def from_name(cls, name: str) -> EnumRef:
        # Only the first dot separates the enum from its member.
        enum_name, _, member_name = name.partition(".")
        return cls(enum_name=enum_name, member_name=member_name)


TaggedString = Union[PlainString, FunctionRef, ConstantRef]


def parse_string_tag(value: str) -> TaggedString:
    """Classify ``value`` by its reserved prefix, if any."""
    if value.startswith(FUNCTION_IDENTIFIER):
        return FunctionRef(value[len(FUNCTION_IDENTIFIER):])
    if value.startswith(CONSTANT_IDENTIFIER):
        return ConstantRef(value[len(CONSTANT_IDENTIFIER):])
    return PlainString(value)
