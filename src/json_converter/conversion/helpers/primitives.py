"""Small, pure shape predicates used by the tree converter."""

from __future__ import annotations

from typing import Any, Mapping


def is_sequence(value: Any) -> bool:
    """
    Return True for document arrays.

    Only ``list`` and ``tuple`` count: strings and bytes are scalars in a
    document even though they are Python sequences.
    """
    return isinstance(value, (list, tuple))


def is_mapping(value: Any) -> bool:
    """Return True for keyed containers (JSON objects)."""
    return isinstance(value, Mapping)


def is_class_instance(value: Any, type_key: str) -> bool:
    """
    Return True if ``value`` is a mapping whose ``type_key`` is truthy.

    Mere presence of the key is not enough: ``{"type": ""}`` or
    ``{"type": None}`` stay plain mappings.
    """
    return is_mapping(value) and bool(value.get(type_key))
