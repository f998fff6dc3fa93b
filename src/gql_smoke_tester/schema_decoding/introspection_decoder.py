"""Introspection document decoding and root type lookup service."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping, Sequence
from pathlib import Path
from typing import Any, TypeVar

from .schema_models import (
    EnumValue,
    Field,
    FullType,
    InputValue,
    NamedTypeRef,
    Schema,
    TypeRef,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Comfortably above the seven levels requested by the standard introspection query.
MAX_TYPE_REF_DEPTH = 32


class SchemaDecodeError(Exception):
    """Raised when an introspection document cannot be decoded."""


def load_introspection_file(path: Path | str) -> Schema:
    """Read an introspection response file and decode it.

    Raises:
      OSError: If the file cannot be read.
      SchemaDecodeError: If the contents are not a decodable introspection response.
    """
    payload = Path(path).read_bytes()
    logger.debug("read %d bytes from %s", len(payload), path)
    return decode_introspection_document(payload)


def decode_introspection_document(payload: bytes | str) -> Schema:
    """Decode an introspection response into a `Schema`.

    Missing keys decode to their empty value; only a missing `data.__schema`
    object is fatal.
    """
    try:
        document = json.loads(payload)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise SchemaDecodeError(f"Error parsing JSON: {exc}") from exc
    except RecursionError as exc:
        raise SchemaDecodeError("Error parsing JSON: document is nested too deeply.") from exc

    root = _require_mapping(document, "document")
    data = _optional_mapping(root.get("data"), "data")
    raw_schema = data.get("__schema") if data is not None else None
    if raw_schema is None:
        raise SchemaDecodeError("Introspection document does not contain data.__schema.")
    section = _require_mapping(raw_schema, "data.__schema")

    query_type = _decode_named_ref(section.get("queryType"), "queryType")
    schema = Schema(
        query_type=query_type if query_type is not None else NamedTypeRef(name=""),
        mutation_type=_decode_named_ref(section.get("mutationType"), "mutationType"),
        subscription_type=_decode_named_ref(
            section.get("subscriptionType"), "subscriptionType"
        ),
        types=_decode_list(section.get("types"), "types", _decode_full_type) or (),
    )
    logger.debug("decoded schema with %d types", len(schema.types))
    return schema


def find_field_bearing_type(types: Sequence[FullType], name: str) -> FullType | None:
    """Return the first type named `name` that declares at least one field.

    A type with the right name but no fields is treated as absent.
    """
    for candidate in types:
        if candidate.name == name and candidate.has_fields:
            return candidate
    return None


def _decode_named_ref(value: Any, label: str) -> NamedTypeRef | None:
    section = _optional_mapping(value, label)
    if section is None:
        return None
    return NamedTypeRef(name=_string(section.get("name"), f"{label}.name"))


def _decode_full_type(value: Any, label: str) -> FullType:
    section = _require_mapping(value, label)
    return FullType(
        kind=_string(section.get("kind"), f"{label}.kind"),
        name=_string(section.get("name"), f"{label}.name"),
        description=_optional_string(section.get("description"), f"{label}.description"),
        fields=_decode_list(section.get("fields"), f"{label}.fields", _decode_field),
        input_fields=_decode_list(
            section.get("inputFields"), f"{label}.inputFields", _decode_input_value
        ),
        interfaces=_decode_list(section.get("interfaces"), f"{label}.interfaces", _decode_type_ref),
        enum_values=_decode_list(
            section.get("enumValues"), f"{label}.enumValues", _decode_enum_value
        ),
        possible_types=_decode_list(
            section.get("possibleTypes"), f"{label}.possibleTypes", _decode_type_ref
        ),
    )


def _decode_field(value: Any, label: str) -> Field:
    section = _require_mapping(value, label)
    return Field(
        name=_string(section.get("name"), f"{label}.name"),
        type=_decode_type_ref(section.get("type"), f"{label}.type"),
        args=_decode_list(section.get("args"), f"{label}.args", _decode_input_value) or (),
        description=_optional_string(section.get("description"), f"{label}.description"),
        is_deprecated=_boolean(section.get("isDeprecated"), f"{label}.isDeprecated"),
        deprecation_reason=_optional_string(
            section.get("deprecationReason"), f"{label}.deprecationReason"
        ),
    )


def _decode_input_value(value: Any, label: str) -> InputValue:
    section = _require_mapping(value, label)
    return InputValue(
        name=_string(section.get("name"), f"{label}.name"),
        type=_decode_type_ref(section.get("type"), f"{label}.type"),
        description=_optional_string(section.get("description"), f"{label}.description"),
        default_value=_optional_string(section.get("defaultValue"), f"{label}.defaultValue"),
    )


def _decode_enum_value(value: Any, label: str) -> EnumValue:
    section = _require_mapping(value, label)
    return EnumValue(
        name=_string(section.get("name"), f"{label}.name"),
        description=_optional_string(section.get("description"), f"{label}.description"),
        is_deprecated=_boolean(section.get("isDeprecated"), f"{label}.isDeprecated"),
        deprecation_reason=_optional_string(
            section.get("deprecationReason"), f"{label}.deprecationReason"
        ),
    )


def _decode_type_ref(value: Any, label: str, depth: int = 0) -> TypeRef:
    if depth > MAX_TYPE_REF_DEPTH:
        raise SchemaDecodeError(
            f"{label} nests more than {MAX_TYPE_REF_DEPTH} type references."
        )
    section = _optional_mapping(value, label)
    if section is None:
        return TypeRef(kind="")
    raw_of_type = section.get("ofType")
    return TypeRef(
        kind=_string(section.get("kind"), f"{label}.kind"),
        name=_optional_string(section.get("name"), f"{label}.name"),
        of_type=(
            None
            if raw_of_type is None
            else _decode_type_ref(raw_of_type, f"{label}.ofType", depth + 1)
        ),
    )


def _decode_list(
    value: Any, label: str, decode_item: Callable[[Any, str], T]
) -> tuple[T, ...] | None:
    items = _optional_sequence(value, label)
    if items is None:
        return None
    return tuple(decode_item(item, f"{label}[{index}]") for index, item in enumerate(items))


def _require_mapping(value: Any, label: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise SchemaDecodeError(f"{label} must be a JSON object.")
    return value


def _optional_mapping(value: Any, label: str) -> Mapping[str, Any] | None:
    if value is None:
        return None
    return _require_mapping(value, label)


def _optional_sequence(value: Any, label: str) -> Sequence[Any] | None:
    if value is None:
        return None
    if not isinstance(value, list):
        raise SchemaDecodeError(f"{label} must be a JSON array.")
    return value


def _string(value: Any, label: str) -> str:
    return _optional_string(value, label) or ""


def _optional_string(value: Any, label: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise SchemaDecodeError(f"{label} must be a string.")
    return value


def _boolean(value: Any, label: str) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise SchemaDecodeError(f"{label} must be a boolean.")
    return value
