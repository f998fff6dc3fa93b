"""Run execution domain exports."""

from .generation_use_case import (
    NO_MUTATIONS_NOTICE,
    GenerationError,
    IntrospectionDecodeError,
    IntrospectionReadError,
    MalformedTypeReferenceError,
    RootTypeNotFoundError,
    generate_smoke_operations,
    synthesize_schema_operations,
)
from .run_contracts import GeneratedOperation, GenerationOutcome, GenerationRequest

__all__ = [
    "GenerationRequest",
    "GenerationOutcome",
    "GeneratedOperation",
    "GenerationError",
    "IntrospectionDecodeError",
    "IntrospectionReadError",
    "MalformedTypeReferenceError",
    "RootTypeNotFoundError",
    "NO_MUTATIONS_NOTICE",
    "generate_smoke_operations",
    "synthesize_schema_operations",
]
