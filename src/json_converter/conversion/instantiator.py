"""Builds objects from class-instance descriptors."""

from __future__ import annotations

import functools
import logging
from importlib import import_module
from typing import Any, Callable, Dict

from ..configuration import JSONConfiguration, UnregisteredClassPolicy
from ..exceptions import ClassInstantiationError, ClassNotFoundError

# Length of the props preview included in warnings.
_PROPS_PREVIEW_LENGTH = 40


def takes_props(factory: Callable[..., Any]) -> Callable[..., Any]:
    """
    Adapt a factory that expects one props mapping instead of keywords.

    The instantiator always calls ``factory(**props)``; wrapping a factory
    with this helper makes that call become ``factory(props)``.
    """

    @functools.wraps(factory)
    def _call_with_props(**props: Any) -> Any:
        return factory(props)

    return _call_with_props


class ClassInstantiator:
    """
    Looks up and invokes the factory registered for a type name.

    This is the only part of the converter allowed to construct objects;
    everything else is pure data transformation.

    Lookup order:
        1. ``configuration.classes``
        2. dotted import path, if it lies under ``allowed_modules``
        3. ``on_unregistered_class`` policy (raises by default)
    """

    def __init__(
        self,
        configuration: JSONConfiguration,
        logger: logging.Logger | None = None,
    ) -> None:
        self.configuration = configuration
        self.logger = logger or logging.getLogger(__name__)

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    def instantiate(self, type_name: Any, props: Dict[str, Any]) -> Any:
        """
        Create the object described by ``type_name`` and converted ``props``.

        Args:
            type_name: Value of the type-tag field
            props: Fully converted constructor arguments, tag removed

        Returns:
            The new instance, or whatever the unregistered-class policy
            yields for an unknown type

        Raises:
            ClassNotFoundError: If no factory exists and the policy is RAISE
            ClassInstantiationError: If the factory itself fails
        """
        if not isinstance(type_name, str):
            raise ClassNotFoundError(
                type_name, f"Class not found: type tag {type_name!r} is not a string"
            )

        factory = self.resolve_factory(type_name)
        if factory is None:
            return self._handle_unregistered(type_name, props)

        props = self.configuration.pre_process_class_props(
            factory, props, self.configuration
        )
        try:
            instance = factory(**props)
        except Exception as e:
            raise ClassInstantiationError(type_name, e) from e

        self.logger.debug("Instantiated %s", type_name)
        return instance

    def resolve_factory(self, type_name: str) -> Callable[..., Any] | None:
        """Return the factory for ``type_name``, or None if there is none."""
        factory = self.configuration.classes.get(type_name)
        if factory is not None:
            return factory
        if self._is_allowlisted(type_name):
            return self._import_class(type_name)
        return None

    # ------------------------------------------------------------------ #
    # Private helpers
    # ------------------------------------------------------------------ #

    def _is_allowlisted(self, type_name: str) -> bool:
        module_name, _, _ = type_name.rpartition(".")
        return bool(module_name) and self._is_allowed_module(module_name)

    def _is_allowed_module(self, module_name: str) -> bool:
        return any(
            module_name == prefix or module_name.startswith(prefix + ".")
            for prefix in self.configuration.allowed_modules
        )

    def _import_class(self, type_name: str) -> Callable[..., Any]:
        # Longest importable module prefix first; the rest are attributes
        # (``pkg.mod.Outer.Inner``).
        parts = type_name.split(".")
        factory: Any = None
        attributes: list[str] = []
        for split in range(len(parts) - 1, 0, -1):
            module_name = ".".join(parts[:split])
            if not self._is_allowed_module(module_name):
                break
            try:
                factory = import_module(module_name)
            except ModuleNotFoundError:
                continue
            except ImportError as e:
                raise ClassNotFoundError(
                    type_name,
                    f"Class not found: cannot import module '{module_name}'",
                ) from e
            attributes = parts[split:]
            break

        if factory is None:
            raise ClassNotFoundError(
                type_name, f"Class not found: no importable module in '{type_name}'"
            )

        for part in attributes:
            factory = getattr(factory, part, None)
            if factory is None:
                raise ClassNotFoundError(type_name)

        if not callable(factory):
            raise ClassNotFoundError(
                type_name, f"Class not found: '{type_name}' is not callable"
            )
        self.logger.debug("Imported allowlisted class %s", type_name)
        return factory

    def _handle_unregistered(self, type_name: str, props: Dict[str, Any]) -> Any:
        policy = self.configuration.on_unregistered_class

        if policy is UnregisteredClassPolicy.WARN:
            self.logger.warning(
                "No registered class of type %s(%s...)",
                type_name,
                _preview(props),
            )
            return None

        if policy is UnregisteredClassPolicy.PASSTHROUGH:
            self.logger.debug(
                "No registered class of type %s, keeping props", type_name
            )
            return props

        available = ", ".join(sorted(self.configuration.classes)) or "none"
        raise ClassNotFoundError(
            type_name,
            f"Class not found: '{type_name}'. Registered classes: {available}",
        )


def _preview(props: Dict[str, Any]) -> str:
    return repr(props)[:_PROPS_PREVIEW_LENGTH]
