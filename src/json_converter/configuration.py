from __future__ import annotations

"""
configuration.py – Converter configuration contract
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Registries and hooks consulted while a document is converted. Every field has
a usable default, so the converter never has to check whether an option was
provided.
"""

from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)

from .exceptions import ConfigurationError
from .tags import DEFAULT_TYPE_KEY

# Registries merged key by key in JSONConfiguration.merge().
_REGISTRY_FIELDS: Tuple[str, ...] = (
    "classes",
    "constants",
    "enumerations",
    "functions",
)


def _identity(value: Any) -> Any:
    return value


def _identity_props(
    factory: Callable[..., Any],
    props: Dict[str, Any],
    configuration: "JSONConfiguration",
) -> Dict[str, Any]:
    return props


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class UnregisteredClassPolicy(str, Enum):
    """What the instantiator does with a type that has no factory."""

    RAISE = "raise"
    WARN = "warn"
    PASSTHROUGH = "passthrough"


# ---------------------------------------------------------------------------
# Configuration model
# ---------------------------------------------------------------------------


class JSONConfiguration(BaseModel):
    """Read-only registry of classes, constants, enumerations and hooks."""

    type_key: str = Field(
        DEFAULT_TYPE_KEY,
        alias="typeKey",
        min_length=1,
        description="Field marking a mapping as a class-instance descriptor.",
    )
    classes: Dict[str, Callable[..., Any]] = Field(
        default_factory=dict,
        description="Type name → factory invoked with the converted props.",
    )
    constants: Dict[str, Any] = Field(
        default_factory=dict, description="Targets of `@@#NAME` strings."
    )
    enumerations: Dict[str, Any] = Field(
        default_factory=dict,
        description="Enum name → `Enum` subclass or mapping of members.",
    )
    functions: Dict[str, Callable[..., Any]] = Field(
        default_factory=dict,
        description="Named callables for `resolve_registered_function`.",
    )
    convert_function: Optional[Callable[..., Any]] = Field(
        None,
        alias="convertFunction",
        description="`(name, key, configuration)` resolver for `@@=` strings.",
    )
    pre_process_class_props: Callable[..., Any] = Field(
        _identity_props,
        alias="preProcessClassProps",
        description="`(factory, props, configuration)` hook run before "
        "instantiation; returns the props to use.",
    )
    post_process_converted_json: Callable[[Any], Any] = Field(
        _identity,
        alias="postProcessConvertedJson",
        description="Applied once to the fully converted document.",
    )
    allowed_modules: Tuple[str, ...] = Field(
        (),
        alias="allowedModules",
        description="Module prefixes whose classes may be imported by "
        "dotted path without registration.",
    )
    on_unregistered_class: UnregisteredClassPolicy = Field(
        UnregisteredClassPolicy.RAISE,
        alias="onUnregisteredClass",
        description="Policy for type names with no factory.",
    )

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        arbitrary_types_allowed=True,
        populate_by_name=True,
    )

    # ----- validators --------------------------------------------------------
    @field_validator("enumerations")
    @classmethod
    def _validate_enumerations(cls, v: Dict[str, Any]) -> Dict[str, Any]:
        for name, members in v.items():
            is_enum = isinstance(members, type) and issubclass(members, Enum)
            if not is_enum and not isinstance(members, Mapping):
                raise ValueError(
                    f"Enumeration '{name}' must be an Enum subclass or a "
                    f"mapping, got {type(members).__name__}"
                )
        return v

    @field_validator("allowed_modules")
    @classmethod
    def _validate_allowed_modules(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        if any(not prefix.strip(".") for prefix in v):
            raise ValueError("allowed_modules entries must not be empty")
        return tuple(prefix.strip(".") for prefix in v)

    # ----- construction helpers ----------------------------------------------
    @classmethod
    def coerce(cls, value: Any) -> JSONConfiguration:
        """
        Normalise ``value`` into a configuration.

        Accepts ``None`` (defaults), a ready ``JSONConfiguration`` (returned
        unchanged) or a mapping of options using snake_case or camelCase
        keys.

        Raises:
            ConfigurationError: If the options do not validate
        """
        if value is None:
            return cls()
        if isinstance(value, JSONConfiguration):
            return value
        if not isinstance(value, Mapping):
            raise ConfigurationError(
                "configuration must be a JSONConfiguration or a mapping, "
                f"got {type(value).__name__}"
            )
        try:
            return cls.model_validate(dict(value))
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid configuration: {exc}") from exc

    def merge(self, other: JSONConfiguration | Mapping[str, Any]) -> JSONConfiguration:
        """
        Return a new configuration combining ``self`` with ``other``.

        Registries are merged key by key (``other`` wins on conflicts); any
        other field is taken from ``other`` only where ``other`` set it
        explicitly.
        """
        other = JSONConfiguration.coerce(other)
        update: Dict[str, Any] = {
            name: {**getattr(self, name), **getattr(other, name)}
            for name in _REGISTRY_FIELDS
        }
        for name in other.model_fields_set:
            if name not in _REGISTRY_FIELDS:
                update[name] = getattr(other, name)
        return self.model_copy(update=update)
