from .client import (
    RealmClient,
    api_call,
    api_delete,
    api_file,
    api_get,
    api_head,
    api_patch,
    api_post,
    api_put,
)
from .config_types import Auth, ClientConfig
from .errors import (
    ApiError,
    MalformedResponseError,
    NetworkError,
    RealmClientError,
    RequestError,
    Server5xxError,
    ServerError,
    UnexpectedHttpStatusError,
)

__all__ = [
    "RealmClient",
    "Auth",
    "ClientConfig",
    "api_call",
    "api_get",
    "api_post",
    "api_file",
    "api_put",
    "api_delete",
    "api_patch",
    "api_head",
    "RealmClientError",
    "NetworkError",
    "RequestError",
    "ApiError",
    "ServerError",
    "Server5xxError",
    "MalformedResponseError",
    "UnexpectedHttpStatusError",
]
