from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Auth:
    realm: str
    email: str = ""
    api_key: str = ""


@dataclass(frozen=True)
class ClientConfig:
    timeout_s: float = 15.0
    user_agent: str | None = None
