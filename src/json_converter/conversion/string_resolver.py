"""Resolves tagged string values against a configuration."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Mapping

from ..configuration import JSONConfiguration
from ..exceptions import ConfigurationError, UnresolvedReferenceError
from ..tags import (
    CONSTANT_IDENTIFIER,
    ConstantRef,
    EnumRef,
    FunctionRef,
    parse_string_tag,
)


class StringResolver:
    """
    Turns ``@@=`` and ``@@#`` strings into the values they reference.

    Plain strings are returned unchanged. Resolution of function tags is
    opportunistic: without a ``convert_function`` the tagged string is kept
    verbatim, prefix included. Constant and enum tags are mandatory: an
    unknown name raises :class:`UnresolvedReferenceError`.
    """

    def __init__(
        self,
        configuration: JSONConfiguration,
        logger: logging.Logger | None = None,
    ) -> None:
        self.configuration = configuration
        self.logger = logger or logging.getLogger(__name__)

    def resolve(self, value: str, key: str) -> Any:
        """
        Resolve a single string found under ``key``.

        Args:
            value: The raw document string
            key: Name of the field (or stringified index) holding the value

        Returns:
            The referenced value, or ``value`` itself if it carries no tag
        """
        tag = parse_string_tag(value)
        if isinstance(tag, FunctionRef):
            return self._resolve_function(tag, key)
        if isinstance(tag, ConstantRef):
            return self._resolve_constant(tag)
        return tag.value

    # ------------------------------------------------------------------ #
    # Private resolution methods
    # ------------------------------------------------------------------ #

    def _resolve_function(self, ref: FunctionRef, key: str) -> Any:
        convert_function = self.configuration.convert_function
        if convert_function is None:
            return ref.raw
        self.logger.debug("Resolving function '%s' for key '%s'", ref.name, key)
        return convert_function(ref.name, key, self.configuration)

    def _resolve_constant(self, ref: ConstantRef) -> Any:
        constants = self.configuration.constants
        if ref.name in constants:
            return constants[ref.name]
        return self._resolve_enum(EnumRef.from_name(ref.name))

    def _resolve_enum(self, ref: EnumRef) -> Any:
        reference = f"{CONSTANT_IDENTIFIER}{ref.enum_name}.{ref.member_name}"
        enumerations = self.configuration.enumerations

        if ref.enum_name not in enumerations:
            available = ", ".join(sorted(enumerations)) or "none"
            raise UnresolvedReferenceError(
                f"Unknown enumeration '{ref.enum_name}' in '{reference}'. "
                f"Available enumerations: {available}"
            )
        members = enumerations[ref.enum_name]

        if isinstance(members, type) and issubclass(members, Enum):
            try:
                return members[ref.member_name]
            except KeyError:
                raise UnresolvedReferenceError(
                    f"Enumeration '{ref.enum_name}' has no member "
                    f"'{ref.member_name}' (in '{reference}')"
                ) from None

        if isinstance(members, Mapping):
            if ref.member_name not in members:
                raise UnresolvedReferenceError(
                    f"Enumeration '{ref.enum_name}' has no member "
                    f"'{ref.member_name}' (in '{reference}')"
                )
            return members[ref.member_name]

        raise ConfigurationError(
            f"Enumeration '{ref.enum_name}' is neither an Enum subclass "
            f"nor a mapping"
        )
