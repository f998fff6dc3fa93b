"""Introspection request encodings for fetching a schema from a live endpoint."""

from __future__ import annotations

import json
import shlex
from dataclasses import dataclass
from urllib.parse import urlencode

DEFAULT_ENDPOINT_URL = "https://example.com/graphql"

INTROSPECTION_QUERY = (
    "{__schema{queryType{name}mutationType{name}subscriptionType{name}"
    "types{...FullType}directives{name description locations args{...InputValue}}}}"
    "fragment FullType on __Type{kind name description "
    "fields(includeDeprecated:true){name description args{...InputValue}type{...TypeRef}"
    "isDeprecated deprecationReason}inputFields{...InputValue}interfaces{...TypeRef}"
    "enumValues(includeDeprecated:true){name description isDeprecated deprecationReason}"
    "possibleTypes{...TypeRef}}"
    "fragment InputValue on __InputValue{name description type{...TypeRef}defaultValue}"
    "fragment TypeRef on __Type{kind name ofType{kind name ofType{kind name ofType{kind name "
    "ofType{kind name ofType{kind name ofType{kind name}}}}}}}"
)


@dataclass(frozen=True)
class IntrospectionRequestEncodings:
    """The introspection query packaged three ways."""

    json_body: str
    form_body: str
    curl_command: str


def build_request_encodings(
    endpoint_url: str = DEFAULT_ENDPOINT_URL, query: str = INTROSPECTION_QUERY
) -> IntrospectionRequestEncodings:
    """Encode `query` as a JSON body, a form body and an example curl request.

    `endpoint_url` only appears in the curl example.
    """
    json_body = json.dumps({"query": query}, separators=(",", ":"))
    form_body = urlencode({"query": query})
    curl_command = (
        f'curl -X POST {endpoint_url} -H "Content-Type: application/json" '
        f"-d {shlex.quote(json_body)}"
    )
    return IntrospectionRequestEncodings(
        json_body=json_body, form_body=form_body, curl_command=curl_command
    )


def render_request_encodings(encodings: IntrospectionRequestEncodings) -> str:
    """Render the encodings as labelled, blank-line separated sections."""
    sections = (
        ("JSON encoding:", encodings.json_body),
        ("URL encoding:", encodings.form_body),
        ("curl example:", encodings.curl_command),
    )
    return "\n\n".join(f"{label}\n{body}" for label, body in sections) + "\n"
