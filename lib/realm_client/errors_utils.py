from __future__ import annotations

import json

from .errors import ApiError, NetworkError, RealmClientError, RequestError


def describe_error(exc: RealmClientError) -> str:
    if isinstance(exc, ApiError):
        return f"{exc} (HTTP {exc.http_status}, code {exc.code})"
    if isinstance(exc, RequestError):
        if exc.data is None:
            return f"{exc} (HTTP {exc.http_status})"
        try:
            body = json.dumps(exc.data, ensure_ascii=False)
        except (TypeError, ValueError):
            body = repr(exc.data)
        return f"{exc} (HTTP {exc.http_status}): {body[:1000]}"
    if isinstance(exc, NetworkError):
        return f"network error: {exc}"
    return str(exc)
