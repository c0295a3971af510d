from __future__ import annotations

from typing import Any

from .errors import ApiError, MalformedResponseError, Server5xxError, UnexpectedHttpStatusError


def interpret_api_response(http_status: int, data: Any) -> Any:
    """Turn a status code and parsed JSON body into a result or an exception.

    `data` is None when the body was missing or not valid JSON.
    """
    if 200 <= http_status <= 299:
        # success status, but nothing we could parse
        if data is None:
            raise MalformedResponseError(http_status, data)
        return data

    if 400 <= http_status <= 499:
        if isinstance(data, dict):
            msg = data.get("msg")
            code = data.get("code", "BAD_REQUEST")
            if data.get("result") == "error" and isinstance(msg, str) and isinstance(code, str):
                raise ApiError(http_status, data)
        raise MalformedResponseError(http_status, data)

    if 500 <= http_status <= 599:
        raise Server5xxError(http_status)

    raise UnexpectedHttpStatusError(http_status, data)
