"""
exceptions.py

Custom, typed exception hierarchy used across the JSON → object converter
"""

from __future__ import annotations

# --------------------------------------------------------------------------- #
#                              Base hierarchy                                 #
# --------------------------------------------------------------------------- #


class JSONConverterError(Exception):
    """
    Root of all errors raised by this project.
    """


class DocumentLoadError(JSONConverterError):
    """
    Raised by the I/O layer when a document cannot be obtained.

    Examples
    --------
    * File does not exist / bad extension
    * Input of an unsupported Python type
    """


class MalformedDocumentError(DocumentLoadError, ValueError):
    """
    Raised when a textual document (JSON or YAML) cannot be parsed into a
    document value.
    """


class ConfigurationError(JSONConverterError):
    """
    Raised when a configuration cannot be built from the supplied options,
    or when the converter detects a broken internal invariant (e.g. a
    value expected to be a mapping is not one).
    """


class UnresolvedReferenceError(JSONConverterError, LookupError):
    """
    Raised when a tagged string names a constant, enumeration, enumeration
    member or function that the configuration does not define.
    """


class ClassNotFoundError(JSONConverterError, LookupError):
    """Raised when a class-instance descriptor names an unregistered type."""

    def __init__(self, type_name: object, message: str | None = None) -> None:
        self.type_name = type_name
        super().__init__(message or f"Class not found: '{type_name}'")


class ClassInstantiationError(JSONConverterError):
    """
    Raised when a registered factory fails while building an instance.

    The original exception is always available as ``__cause__``.
    """

    def __init__(self, type_name: str, cause: BaseException) -> None:
        self.type_name = type_name
        super().__init__(f"Failed to instantiate '{type_name}': {cause}")
