"""Smoke-test operation generation use-case service."""

from __future__ import annotations

import logging

from gql_smoke_tester.operation_synthesis import (
    OperationKind,
    TypeReferenceError,
    build_operation,
)
from gql_smoke_tester.schema_decoding import (
    FullType,
    Schema,
    SchemaDecodeError,
    find_field_bearing_type,
    load_introspection_file,
)

from .run_contracts import GeneratedOperation, GenerationOutcome, GenerationRequest

logger = logging.getLogger(__name__)

NO_MUTATIONS_NOTICE = "No mutations defined in the schema."


class GenerationError(Exception):
    """Raised when a generation run cannot be completed."""


class IntrospectionReadError(GenerationError):
    """Raised when the introspection file cannot be read."""


class IntrospectionDecodeError(GenerationError):
    """Raised when the introspection file cannot be decoded."""


class RootTypeNotFoundError(GenerationError):
    """Raised when a root type name has no field-bearing type entry."""

    def __init__(self, operation_kind: OperationKind, type_name: str) -> None:
        super().__init__(f"Could not find {operation_kind} type with name {type_name}")
        self.operation_kind = operation_kind
        self.type_name = type_name


class MalformedTypeReferenceError(GenerationError):
    """Raised when a root field carries an unterminated type reference."""


def generate_smoke_operations(request: GenerationRequest) -> GenerationOutcome:
    """Read, decode and synthesize one operation per root field."""
    try:
        schema = load_introspection_file(request.input_path)
    except OSError as exc:
        raise IntrospectionReadError(f"Error reading file: {exc}") from exc
    except SchemaDecodeError as exc:
        raise IntrospectionDecodeError(str(exc)) from exc
    return synthesize_schema_operations(schema, include_mutations=request.include_mutations)


def synthesize_schema_operations(
    schema: Schema, *, include_mutations: bool = False
) -> GenerationOutcome:
    """Synthesize operations for the query root and, on request, the mutation root.

    Every root type is resolved before any operation is built, so a failing run
    yields no partial output.
    """
    query_root = _resolve_root(schema, OperationKind.QUERY, schema.query_type.name)
    roots: list[tuple[OperationKind, FullType]] = [(OperationKind.QUERY, query_root)]
    notices: list[str] = []

    if include_mutations:
        if schema.mutation_type is None:
            logger.debug("schema declares no mutation root type")
            notices.append(NO_MUTATIONS_NOTICE)
        else:
            mutation_root = _resolve_root(
                schema, OperationKind.MUTATION, schema.mutation_type.name
            )
            roots.append((OperationKind.MUTATION, mutation_root))

    operations: list[GeneratedOperation] = []
    for operation_kind, root_type in roots:
        operations.extend(_synthesize(operation_kind, root_type))
    logger.debug("synthesized %d operations", len(operations))
    return GenerationOutcome(operations=tuple(operations), notices=tuple(notices))


def _resolve_root(schema: Schema, operation_kind: OperationKind, type_name: str) -> FullType:
    root_type = find_field_bearing_type(schema.types, type_name)
    if root_type is None:
        raise RootTypeNotFoundError(operation_kind, type_name)
    logger.debug("resolved %s root type %s", operation_kind, type_name)
    return root_type


def _synthesize(
    operation_kind: OperationKind, root_type: FullType
) -> tuple[GeneratedOperation, ...]:
    operations = []
    for field in root_type.fields or ():
        try:
            text = build_operation(field, operation_kind)
        except TypeReferenceError as exc:
            raise MalformedTypeReferenceError(
                f"{root_type.name}.{field.name}: {exc}"
            ) from exc
        operations.append(
            GeneratedOperation(operation_kind=operation_kind, field_name=field.name, text=text)
        )
    return tuple(operations)
