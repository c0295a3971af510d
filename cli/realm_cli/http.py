from __future__ import annotations

from realm_client import RealmClient
from realm_client.config_types import Auth, ClientConfig

from .config import AppConfig, apply_env, normalize_realm


def make_client(cfg: AppConfig, *, realm_override: str | None = None) -> RealmClient:
    effective_cfg = apply_env(cfg)
    realm = normalize_realm(realm_override or effective_cfg.realm, warn=True)
    return RealmClient(
        Auth(realm=realm, email=effective_cfg.auth.email, api_key=effective_cfg.auth.api_key),
        ClientConfig(timeout_s=effective_cfg.timeout_s),
    )
