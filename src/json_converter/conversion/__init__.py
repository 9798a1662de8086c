"""
Conversion package

Transforms a parsed document value into live objects without performing
any I/O.

Public helpers
--------------
convert_json_tree(document, configuration, logger=None) -> Any
    Convenience wrapper that runs the recursive converter from the root
    and applies the configuration's post-processing hook.
"""

from __future__ import annotations

import logging
from typing import Any

from ..configuration import JSONConfiguration
from .converter import JSONTreeConverter
from .instantiator import ClassInstantiator, takes_props
from .string_resolver import StringResolver

__all__ = [
    "ClassInstantiator",
    "JSONTreeConverter",
    "StringResolver",
    "convert_json_tree",
    "takes_props",
]


def convert_json_tree(
    document: Any,
    configuration: JSONConfiguration,
    *,
    logger: logging.Logger | None = None,
) -> Any:
    """High-level helper used by the converter facade."""
    converter = JSONTreeConverter(configuration, logger=logger)
    converted = converter.convert(document, "")
    return configuration.post_process_converted_json(converted)
