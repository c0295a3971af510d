from __future__ import annotations

from typing import Any


class RealmClientError(Exception):
    """Base client error."""


class NetworkError(RealmClientError):
    """Transport/network layer error."""


class RequestError(RealmClientError):
    """The server answered, but not with something we can use."""

    def __init__(self, http_status: int, data: Any = None, message: str | None = None):
        super().__init__(message or f"request failed with {http_status}")
        self.http_status = http_status
        self.data = data


class ApiError(RequestError):
    def __init__(self, http_status: int, data: dict[str, Any]):
        super().__init__(http_status, data, str(data.get("msg") or ""))
        self.code = str(data.get("code") or "BAD_REQUEST")


class ServerError(RequestError):
    """Server misbehaved; the request itself was probably fine."""


class Server5xxError(ServerError):
    def __init__(self, http_status: int):
        super().__init__(http_status, None, f"server error {http_status}")


class MalformedResponseError(ServerError):
    def __init__(self, http_status: int, data: Any = None):
        super().__init__(http_status, data, f"malformed response (status {http_status})")


class UnexpectedHttpStatusError(ServerError):
    def __init__(self, http_status: int, data: Any = None):
        super().__init__(http_status, data, f"unexpected HTTP status {http_status}")
