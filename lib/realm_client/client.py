from __future__ import annotations

from typing import Any, Mapping

import httpx

from .config_types import Auth, ClientConfig
from .network_activity import NetworkActivity
from .transport import Transport
from .url import encode_params_for_url, with_query


class RealmClient:
    def __init__(
            self,
            auth: Auth,
            cfg: ClientConfig | None = None,
            *,
            activity: NetworkActivity | None = None,
            http_transport: httpx.BaseTransport | None = None,
    ):
        self.auth = auth
        self._t = Transport(cfg, activity=activity, http_transport=http_transport)

    def close(self) -> None:
        self._t.close()

    def __enter__(self) -> RealmClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def api_call(self, route: str, params: dict[str, Any], is_silent: bool = False) -> Any:
        return self._t.api_call(self.auth, route, params, is_silent)

    # --- verb wrappers ---
    def get(self, route: str, params: Mapping[str, Any] | None = None, *, is_silent: bool = False) -> Any:
        return self.api_call(with_query(route, params), {"method": "get"}, is_silent)

    def post(self, route: str, params: Mapping[str, Any] | None = None) -> Any:
        return self.api_call(route, {"method": "post", "body": encode_params_for_url(params)})

    def file(self, route: str, files: Mapping[str, Any], data: Mapping[str, Any] | None = None) -> Any:
        """Multipart upload. `files` takes whatever httpx accepts for `files=`."""
        params: dict[str, Any] = {"method": "post", "files": dict(files)}
        if data:
            params["data"] = dict(data)
        return self.api_call(route, params)

    def put(self, route: str, params: Mapping[str, Any] | None = None) -> Any:
        return self.api_call(route, {"method": "put", "body": encode_params_for_url(params)})

    def delete(self, route: str, params: Mapping[str, Any] | None = None) -> Any:
        return self.api_call(route, {"method": "delete", "body": encode_params_for_url(params)})

    def patch(self, route: str, params: Mapping[str, Any] | None = None) -> Any:
        return self.api_call(route, {"method": "patch", "body": encode_params_for_url(params)})

    def head(self, route: str, params: Mapping[str, Any] | None = None) -> Any:
        return self.api_call(with_query(route, params), {"method": "head"})


def api_call(auth: Auth, route: str, params: dict[str, Any], is_silent: bool = False) -> Any:
    with RealmClient(auth) as client:
        return client.api_call(route, params, is_silent)


def api_get(auth: Auth, route: str, params: Mapping[str, Any] | None = None, is_silent: bool = False) -> Any:
    with RealmClient(auth) as client:
        return client.get(route, params, is_silent=is_silent)


def api_post(auth: Auth, route: str, params: Mapping[str, Any] | None = None) -> Any:
    with RealmClient(auth) as client:
        return client.post(route, params)


def api_file(auth: Auth, route: str, files: Mapping[str, Any], data: Mapping[str, Any] | None = None) -> Any:
    with RealmClient(auth) as client:
        return client.file(route, files, data)


def api_put(auth: Auth, route: str, params: Mapping[str, Any] | None = None) -> Any:
    with RealmClient(auth) as client:
        return client.put(route, params)


def api_delete(auth: Auth, route: str, params: Mapping[str, Any] | None = None) -> Any:
    with RealmClient(auth) as client:
        return client.delete(route, params)


def api_patch(auth: Auth, route: str, params: Mapping[str, Any] | None = None) -> Any:
    with RealmClient(auth) as client:
        return client.patch(route, params)


def api_head(auth: Auth, route: str, params: Mapping[str, Any] | None = None) -> Any:
    with RealmClient(auth) as client:
        return client.head(route, params)
