from __future__ import annotations

import json
from typing import Any, Mapping
from urllib.parse import quote, urljoin

API_VERSION = "api/v1"

# same unreserved set as JS encodeURIComponent
_URI_COMPONENT_SAFE = "-_.!~*'()"


def _encode_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def encode_params_for_url(params: Mapping[str, Any] | None) -> str:
    if not params:
        return ""
    parts: list[str] = []
    for key, value in params.items():
        if value is None:
            continue
        raw = value if isinstance(value, str) else json.dumps(value, separators=(",", ":"))
        parts.append(f"{_encode_component(str(key))}={_encode_component(raw)}")
    return "&".join(parts)


def with_query(route: str, params: Mapping[str, Any] | None) -> str:
    query = encode_params_for_url(params)
    return route + (f"?{query}" if query else "")


def build_api_url(realm: str, route: str) -> str:
    return urljoin(realm, f"/{API_VERSION}/{route}")
