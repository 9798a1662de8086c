"""Concrete Loader that supports local YAML / JSON files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Final

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ..exceptions import DocumentLoadError, MalformedDocumentError
from .parser import parse_json_text

logger = logging.getLogger(__name__)

_YAML_EXTS: Final[set[str]] = {".yaml", ".yml"}
_JSON_EXTS: Final[set[str]] = {".json"}

_yaml_parser = YAML(typ="safe")  # safe loader, YAML 1.2


class FileLoader:
    """Read a document file from disk and return its document value."""

    supported_exts: set[str] = _YAML_EXTS | _JSON_EXTS

    @staticmethod
    def load(path: str | Path) -> Any:
        file_path = Path(path)

        # validation
        if not file_path.is_file():
            logger.error("File not found: %s", file_path)
            raise DocumentLoadError(f"File not found: {file_path}")

        suffix = file_path.suffix.lower()
        if suffix not in FileLoader.supported_exts:
            raise DocumentLoadError(
                f"Unsupported extension '{file_path.suffix}'. "
                f"Supported: {', '.join(sorted(FileLoader.supported_exts))}"
            )

        raw_text = file_path.read_text(encoding="utf-8")

        # parse
        if suffix in _JSON_EXTS:
            data = parse_json_text(raw_text)
        else:
            try:
                data = _yaml_parser.load(raw_text)
            except YAMLError as exc:
                raise MalformedDocumentError(
                    f"Cannot parse {file_path.name}: {exc}"
                ) from exc

        logger.debug("Document file loaded: %s", file_path)
        return data
