"""
JSONConverter – stateful entry point for callers.

Responsibilities
----------------
1.   Hold the active configuration (replaceable via `configure`).
2.   Normalise the input: document value, JSON text or a file path.
3.   Run the recursive converter and the post-processing hook.
4.   Remember the last input/output pair so the same input object is only
     converted once.

A facade instance is not thread-safe; callers sharing one must serialise
access themselves.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

from .configuration import JSONConfiguration
from .conversion import convert_json_tree
from .io import load_document

_CONFIGURATION_KEY = "configuration"
_ON_CHANGE_KEYS = ("on_json_change", "onJSONChange")


def _noop(*args: Any, **kwargs: Any) -> None:
    return None


def _is_empty(document: Any) -> bool:
    if document is None:
        return True
    if isinstance(document, (str, bytes, bytearray)):
        return not document.strip()
    return False


class JSONConverter:
    """Converts documents to live objects, caching the latest result."""

    def __init__(
        self,
        props: Mapping[str, Any] | None = None,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        """
        Parameters
        ----------
        props
            Options forwarded to `configure`.
        logger
            Logger used for this facade and the converters it runs.
        """
        self.logger = logger or logging.getLogger(__name__)
        self.configuration = JSONConfiguration()
        self.on_json_change: Callable[..., Any] = _noop
        self.json: Any = None
        self.converted_json: Any = None
        if props:
            self.configure(props)

    def configure(self, props: Mapping[str, Any]) -> None:
        """
        Apply recognised options.

        ``configuration`` accepts a `JSONConfiguration`, which replaces the
        held configuration, or a mapping of options, which is merged into
        it with `JSONConfiguration.merge`. ``on_json_change``
        (alias ``onJSONChange``) stores a callback for the host
        application; the facade never calls it.
        """
        for key in props:
            if key != _CONFIGURATION_KEY and key not in _ON_CHANGE_KEYS:
                self.logger.debug("Ignoring unknown converter option: %s", key)

        if _CONFIGURATION_KEY in props:
            configuration = props[_CONFIGURATION_KEY]
            if isinstance(configuration, Mapping):
                self.configuration = self.configuration.merge(configuration)
            else:
                self.configuration = JSONConfiguration.coerce(configuration)

        for key in _ON_CHANGE_KEYS:
            if key in props:
                self.on_json_change = props[key]

    def convert(self, document: Any) -> Any:
        """
        Return the converted form of ``document`` (raises on failure).

        An empty input, or the very object converted last time, returns
        the cached result without converting again. The cache is only
        replaced once a conversion succeeds.
        """
        if _is_empty(document) or document is self.json:
            return self.converted_json

        parsed = load_document(document)
        converted = convert_json_tree(
            parsed, self.configuration, logger=self.logger.getChild("tree")
        )

        self.json = document
        self.converted_json = converted
        self.logger.info("Conversion succeeded (%s)", type(converted).__name__)
        return converted
