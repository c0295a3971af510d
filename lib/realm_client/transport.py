from __future__ import annotations

import json
import logging
from typing import Any, Mapping

import httpx
import sentry_sdk

from .auth import get_auth_headers
from .config_types import Auth, ClientConfig
from .errors import MalformedResponseError, NetworkError, RequestError
from .interpret import interpret_api_response
from .network_activity import NetworkActivity, network_activity
from .url import build_api_url
from .user_agent import user_agent

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded; charset=utf-8"
NO_RESPONSE = "(none, or not valid JSON)"


def get_fetch_params(auth: Auth, params: dict[str, Any], *, ua: str | None = None) -> dict[str, Any]:
    """Request options for `params` plus content-type, user-agent and auth headers.

    `params` must not carry its own `headers`. Multipart uploads get no
    explicit Content-Type: httpx adds it together with the boundary.
    """
    headers: dict[str, str] = {}
    if "files" not in params:
        headers["Content-Type"] = FORM_CONTENT_TYPE
    headers["User-Agent"] = ua or user_agent()
    headers.update(get_auth_headers(auth))
    return {"headers": headers, **params}


def _loggable(params: dict[str, Any]) -> dict[str, Any]:
    out = dict(params)
    files = out.get("files")
    if files is not None:
        # field names only; httpx accepts a mapping or a list of (field, file) pairs
        pairs = files.items() if isinstance(files, Mapping) else files
        out["files"] = sorted({str(field) for field, _ in pairs})
    return out


class Transport:
    def __init__(
            self,
            cfg: ClientConfig | None = None,
            *,
            activity: NetworkActivity | None = None,
            http_transport: httpx.BaseTransport | None = None,
    ):
        self._cfg = cfg or ClientConfig()
        self._activity = activity or network_activity
        self._ua = self._cfg.user_agent or user_agent()
        self._client = httpx.Client(
            timeout=self._cfg.timeout_s,
            follow_redirects=True,
            transport=http_transport,
        )

    def close(self) -> None:
        self._client.close()

    def fetch(self, auth: Auth, route: str, params: dict[str, Any]) -> httpx.Response:
        opts = get_fetch_params(auth, params, ua=self._ua)
        return self._client.request(
            str(opts.get("method", "get")).upper(),
            build_api_url(auth.realm, route),
            headers=opts["headers"],
            content=opts.get("body"),
            data=opts.get("data"),
            files=opts.get("files"),
        )

    def api_call(self, auth: Auth, route: str, params: dict[str, Any], is_silent: bool = False) -> Any:
        """Send one request and return the interpreted JSON result.

        Callers get back whatever the server sent; no shape is checked here.
        """
        try:
            self._activity.start(is_silent)

            try:
                response = self.fetch(auth, route, params)
            except httpx.RequestError as e:
                raise NetworkError(str(e)) from e

            data: Any = None
            try:
                data = response.json()
            except ValueError:
                data = None

            return interpret_api_response(response.status_code, data)
        except Exception as error:
            http_status = error.http_status if isinstance(error, RequestError) else None
            data = error.data if isinstance(error, RequestError) else None
            shown = data if data is not None else NO_RESPONSE

            logger.info(
                "api call failed: %s",
                {"route": route, "params": _loggable(params), "http_status": http_status, "response": shown},
            )
            sentry_sdk.add_breadcrumb(
                category="api",
                level="info",
                data={
                    "route": route,
                    "params": _loggable(params),
                    "http_status": http_status,
                    "response": shown,
                    "error_name": type(error).__name__,
                    "error_message": str(error),
                },
            )
            if isinstance(error, MalformedResponseError):
                dumped = json.dumps(data, ensure_ascii=False) if data is not None else "undefined"
                logger.warning("Bad response from server: %s", dumped)
            raise
        finally:
            self._activity.stop(is_silent)
