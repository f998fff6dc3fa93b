"""Schema decoding exports."""

from .introspection_decoder import (
    MAX_TYPE_REF_DEPTH,
    SchemaDecodeError,
    decode_introspection_document,
    find_field_bearing_type,
    load_introspection_file,
)
from .schema_models import EnumValue, Field, FullType, InputValue, NamedTypeRef, Schema, TypeRef

__all__ = [
    "EnumValue",
    "Field",
    "FullType",
    "InputValue",
    "NamedTypeRef",
    "Schema",
    "TypeRef",
    "MAX_TYPE_REF_DEPTH",
    "SchemaDecodeError",
    "decode_introspection_document",
    "find_field_bearing_type",
    "load_introspection_file",
]
