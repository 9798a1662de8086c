"""Resolver for ``@@=`` strings backed by the ``functions`` registry."""

from __future__ import annotations

from typing import Any, Callable

from .configuration import JSONConfiguration
from .exceptions import UnresolvedReferenceError


def resolve_registered_function(
    name: str, key: str, configuration: JSONConfiguration
) -> Callable[..., Any]:
    """
    Look up ``name`` in ``configuration.functions``.

    Intended to be set as ``convert_function``::

        JSONConfiguration(
            functions={"get_position": get_position},
            convert_function=resolve_registered_function,
        )

    Raises:
        UnresolvedReferenceError: If no function is registered under ``name``
    """
    try:
        return configuration.functions[name]
    except KeyError:
        available = ", ".join(sorted(configuration.functions)) or "none"
        raise UnresolvedReferenceError(
            f"Unknown function '{name}' for key '{key}'. "
            f"Available functions: {available}"
        ) from None
