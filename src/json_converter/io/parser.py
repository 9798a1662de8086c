"""Parse JSON text into a document value."""

from __future__ import annotations

import json
import logging
from typing import Any

from ..exceptions import MalformedDocumentError

logger = logging.getLogger(__name__)


def parse_json_text(text: str | bytes | bytearray) -> Any:
    """
    Return the document value encoded by ``text``.

    Raises:
        MalformedDocumentError: If ``text`` is not valid JSON
    """
    try:
        if isinstance(text, (bytes, bytearray)):
            text = text.decode("utf-8")
        data = json.loads(text)
    except (ValueError, UnicodeDecodeError) as exc:
        raise MalformedDocumentError(f"Cannot parse JSON document: {exc}") from exc

    logger.debug("Parsed JSON document (%s)", type(data).__name__)
    return data
