"""Turn a raw input into a document value."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from .file_loader import FileLoader
from .parser import parse_json_text

logger = logging.getLogger(__name__)


def load_document(source: Any) -> Any:
    """
    Normalise ``source`` into a document value.

    * ``pathlib.Path``   → read by :class:`FileLoader` (``.json``/``.yaml``/``.yml``)
    * ``str`` / ``bytes`` → parsed as JSON text
    * anything else      → assumed to already be a document value
    """
    if isinstance(source, Path):
        logger.debug("Loading document file: %s", source)
        return FileLoader.load(source)
    if isinstance(source, (str, bytes, bytearray)):
        logger.debug("Parsing document text")
        return parse_json_text(source)
    return source
