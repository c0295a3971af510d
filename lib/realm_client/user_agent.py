from __future__ import annotations

import platform
from importlib import metadata

DIST_NAME = "realm-client"


def client_version() -> str:
    try:
        return metadata.version(DIST_NAME)
    except Exception:
        return "0.0.0"


def user_agent(version: str | None = None) -> str:
    return f"{DIST_NAME}/{version or client_version()} ({platform.system()} {platform.release()})"
