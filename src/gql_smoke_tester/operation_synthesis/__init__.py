"""Operation synthesis exports."""

from .operation_builder import TYPENAME_SELECTION, OperationKind, build_operation
from .type_rendering import (
    COMPOSITE_KINDS,
    TypeReferenceError,
    is_composite_type,
    render_type_reference,
    unwrap_type_reference,
)

__all__ = [
    "COMPOSITE_KINDS",
    "TYPENAME_SELECTION",
    "OperationKind",
    "TypeReferenceError",
    "build_operation",
    "is_composite_type",
    "render_type_reference",
    "unwrap_type_reference",
]
