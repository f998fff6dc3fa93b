"""GraphQL type syntax rendering for introspection type references."""

from __future__ import annotations

from gql_smoke_tester.schema_decoding.introspection_decoder import MAX_TYPE_REF_DEPTH
from gql_smoke_tester.schema_decoding.schema_models import TypeRef

COMPOSITE_KINDS = frozenset({"OBJECT", "INTERFACE", "UNION"})


class TypeReferenceError(Exception):
    """Raised when a wrapper chain does not end at a named type."""


def render_type_reference(type_ref: TypeRef) -> str:
    """Render a type reference as GraphQL type syntax, e.g. `[String!]!`."""
    return _render(type_ref, depth=0)


def unwrap_type_reference(type_ref: TypeRef) -> TypeRef:
    """Strip NON_NULL and LIST wrappers down to the named type."""
    current = type_ref
    for _ in range(MAX_TYPE_REF_DEPTH + 1):
        if not current.is_wrapper:
            return current
        current = _inner(current)
    raise TypeReferenceError(_too_deep_message())


def is_composite_type(type_ref: TypeRef) -> bool:
    """Whether the named type behind `type_ref` needs a selection set."""
    return unwrap_type_reference(type_ref).kind in COMPOSITE_KINDS


def _render(type_ref: TypeRef, depth: int) -> str:
    if depth > MAX_TYPE_REF_DEPTH:
        raise TypeReferenceError(_too_deep_message())
    if type_ref.kind == "NON_NULL":
        return _render(_inner(type_ref), depth + 1) + "!"
    if type_ref.kind == "LIST":
        return "[" + _render(_inner(type_ref), depth + 1) + "]"
    return type_ref.name or ""


def _inner(type_ref: TypeRef) -> TypeRef:
    if type_ref.of_type is None:
        raise TypeReferenceError(f"{type_ref.kind} type reference has no ofType.")
    return type_ref.of_type


def _too_deep_message() -> str:
    return f"Type reference wraps more than {MAX_TYPE_REF_DEPTH} levels."
