"""Introspection schema entities."""

from __future__ import annotations

from dataclasses import dataclass

WRAPPER_KINDS = frozenset({"NON_NULL", "LIST"})


@dataclass(frozen=True)
class TypeRef:
    """Type as declared at a use site, possibly wrapped by NON_NULL or LIST."""

    kind: str
    name: str | None = None
    of_type: TypeRef | None = None

    @property
    def is_wrapper(self) -> bool:
        return self.kind in WRAPPER_KINDS


@dataclass(frozen=True)
class NamedTypeRef:
    """Reference to a type by name only (schema root pointers, possible types)."""

    name: str


@dataclass(frozen=True)
class InputValue:
    """Argument or input object field."""

    name: str
    type: TypeRef
    description: str | None = None
    default_value: str | None = None


@dataclass(frozen=True)
class Field:
    """Member of an object or interface type."""

    name: str
    type: TypeRef
    args: tuple[InputValue, ...] = ()
    description: str | None = None
    is_deprecated: bool = False
    deprecation_reason: str | None = None


@dataclass(frozen=True)
class EnumValue:
    """Enum member definition."""

    name: str
    description: str | None = None
    is_deprecated: bool = False
    deprecation_reason: str | None = None


@dataclass(frozen=True)
class FullType:  # pylint: disable=too-many-instance-attributes
    """Named type declaration from the introspection `types` list."""

    kind: str
    name: str
    description: str | None = None
    fields: tuple[Field, ...] | None = None
    input_fields: tuple[InputValue, ...] | None = None
    interfaces: tuple[TypeRef, ...] | None = None
    enum_values: tuple[EnumValue, ...] | None = None
    possible_types: tuple[TypeRef, ...] | None = None

    @property
    def has_fields(self) -> bool:
        return bool(self.fields)


@dataclass(frozen=True)
class Schema:
    """Decoded `__schema` object."""

    query_type: NamedTypeRef
    mutation_type: NamedTypeRef | None
    subscription_type: NamedTypeRef | None
    types: tuple[FullType, ...]
