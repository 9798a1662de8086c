"""
Package façade – a single import gives users everything they need.


Design
------
* Thin wrapper around JSONConverter (keeps public API tiny).
* Re-exports only what external callers should see.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from .configuration import JSONConfiguration, UnregisteredClassPolicy
from .conversion import convert_json_tree, takes_props
from .exceptions import (
    ClassInstantiationError,
    ClassNotFoundError,
    ConfigurationError,
    DocumentLoadError,
    JSONConverterError,
    MalformedDocumentError,
    UnresolvedReferenceError,
)
from .facade import JSONConverter
from .functions import resolve_registered_function
from .tags import CONSTANT_IDENTIFIER, DEFAULT_TYPE_KEY, FUNCTION_IDENTIFIER

__all__ = [
    "CONSTANT_IDENTIFIER",
    "DEFAULT_TYPE_KEY",
    "FUNCTION_IDENTIFIER",
    "ClassInstantiationError",
    "ClassNotFoundError",
    "ConfigurationError",
    "DocumentLoadError",
    "JSONConfiguration",
    "JSONConverter",
    "JSONConverterError",
    "MalformedDocumentError",
    "UnregisteredClassPolicy",
    "UnresolvedReferenceError",
    "convert_json",
    "convert_json_tree",
    "resolve_registered_function",
    "takes_props",
]


def convert_json(
    source: Any,
    configuration: JSONConfiguration | Mapping[str, Any] | None = None,
    *,
    logger: logging.Logger | None = None,
) -> Any:
    """
    Convenience helper that hides the facade.

    Parameters
    ----------
    source
        Document value, JSON text, or a Path to a .json/.yaml/.yml file.
    configuration
        `JSONConfiguration` or a mapping of options (default: defaults).
    """
    converter = JSONConverter(
        {"configuration": JSONConfiguration.coerce(configuration)}, logger=logger
    )
    return converter.convert(source)
