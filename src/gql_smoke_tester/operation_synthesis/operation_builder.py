"""Smoke-test operation synthesis service."""

from __future__ import annotations

from enum import StrEnum

from gql_smoke_tester.schema_decoding.schema_models import Field

from .type_rendering import is_composite_type, render_type_reference

TYPENAME_SELECTION = " { __typename }"


class OperationKind(StrEnum):
    """Operation keyword emitted in the operation header."""

    QUERY = "query"
    MUTATION = "mutation"


def build_operation(field: Field, operation_kind: OperationKind | str) -> str:
    """Build a single-line operation that calls `field` with one variable per argument.

    Args:
      field: Root field to call.
      operation_kind: `query` or `mutation`.

    Returns:
      The operation text, e.g. `query user($id: ID!) { user(id: $id) { __typename } }`.

    Raises:
      TypeReferenceError: If an argument or return type reference is malformed.
    """
    variable_definitions = [f"${arg.name}: {render_type_reference(arg.type)}" for arg in field.args]
    argument_bindings = [f"{arg.name}: ${arg.name}" for arg in field.args]

    keyword = str(operation_kind)
    if variable_definitions:
        header = f"{keyword} {field.name}({', '.join(variable_definitions)})"
    else:
        header = keyword

    call = field.name
    if argument_bindings:
        call += f"({', '.join(argument_bindings)})"

    selection = TYPENAME_SELECTION if is_composite_type(field.type) else ""
    return f"{header} {{ {call}{selection} }}"
