"""
I/O layer – turns raw input (text, bytes, files) into document values.

The converter itself never touches the filesystem; the facade calls
:func:`load_document` before conversion.
"""

from __future__ import annotations

from .file_loader import FileLoader
from .loader import load_document
from .parser import parse_json_text

__all__ = ["FileLoader", "load_document", "parse_json_text"]
