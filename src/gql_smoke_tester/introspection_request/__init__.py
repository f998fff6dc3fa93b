"""Introspection request exports."""

from .query_encodings import (
    DEFAULT_ENDPOINT_URL,
    INTROSPECTION_QUERY,
    IntrospectionRequestEncodings,
    build_request_encodings,
    render_request_encodings,
)

__all__ = [
    "DEFAULT_ENDPOINT_URL",
    "INTROSPECTION_QUERY",
    "IntrospectionRequestEncodings",
    "build_request_encodings",
    "render_request_encodings",
]
