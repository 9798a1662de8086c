"""Recursive conversion of document values into live objects"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping

from ..configuration import JSONConfiguration
from ..exceptions import ConfigurationError
from .helpers.primitives import is_class_instance, is_mapping, is_sequence
from .instantiator import ClassInstantiator
from .string_resolver import StringResolver


class JSONTreeConverter:
    """
    Walks a document value depth-first and returns its converted copy.

    Dispatch order matters because a class-instance descriptor is also a
    mapping:

        1. list / tuple           → list of converted elements
        2. mapping with type tag  → instantiated object
        3. any other mapping      → dict of converted values
        4. str                    → tag resolution
        5. anything else          → returned unchanged

    The input is never mutated. Nesting depth is bounded by Python's
    recursion limit; deeper documents raise ``RecursionError``.
    """

    def __init__(
        self,
        configuration: JSONConfiguration,
        logger: logging.Logger | None = None,
    ) -> None:
        """
        Initialize the converter.

        Args:
            configuration: Registries and hooks to resolve against
            logger: Parent logger; defaults to this module's logger
        """
        self.configuration = configuration
        self.logger = logger or logging.getLogger(__name__)
        self._strings = StringResolver(
            configuration, self.logger.getChild("strings")
        )
        self._instantiator = ClassInstantiator(
            configuration, self.logger.getChild("instantiator")
        )

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    def convert(self, value: Any, key: str = "") -> Any:
        """
        Convert ``value`` found under ``key``.

        Args:
            value: Any document value
            key: Field name or stringified index; passed to function
                resolution as context (``""`` at the root)

        Returns:
            The converted value
        """
        if is_sequence(value):
            return self._convert_sequence(value)

        if is_class_instance(value, self.configuration.type_key):
            return self._convert_class_instance(value)

        if is_mapping(value):
            return self._convert_plain_object(value)

        if isinstance(value, str):
            return self._strings.resolve(value, key)

        # number, boolean, None
        return value

    # ------------------------------------------------------------------ #
    # Private conversion methods
    # ------------------------------------------------------------------ #

    def _convert_sequence(self, value: Any) -> List[Any]:
        return [self.convert(element, str(i)) for i, element in enumerate(value)]

    def _convert_class_instance(self, value: Mapping[str, Any]) -> Any:
        type_key = self.configuration.type_key
        type_name = value[type_key]

        props = {k: v for k, v in value.items() if k != type_key}
        props = self._convert_plain_object(props)

        self.logger.debug("Converting class instance of type %s", type_name)
        return self._instantiator.instantiate(type_name, props)

    def _convert_plain_object(self, value: Any) -> Dict[str, Any]:
        if not is_mapping(value):
            raise ConfigurationError(
                f"Expected a mapping, got {type(value).__name__}"
            )
        return {k: self.convert(v, str(k)) for k, v in value.items()}
