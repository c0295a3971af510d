from __future__ import annotations

import base64

from .config_types import Auth


def get_auth_headers(auth: Auth) -> dict[str, str]:
    if not auth.api_key:
        return {}
    raw = f"{auth.email}:{auth.api_key}".encode("utf-8")
    return {"Authorization": "Basic " + base64.b64encode(raw).decode("ascii")}
