from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlsplit

import tomli_w
from platformdirs import user_config_dir

from . import console

APP_NAME = "realm-client"
CONFIG_FILENAME = "config.toml"
DEFAULT_TIMEOUT_S = 15.0
ENV_REALM = "REALM_CLIENT_REALM"
ENV_EMAIL = "REALM_CLIENT_EMAIL"
ENV_API_KEY = "REALM_CLIENT_API_KEY"

LOCAL_HOSTS = {"localhost", "127.0.0.1", "0.0.0.0"}

_WARNED: set[str] = set()


@dataclass
class AuthConfig:
    email: str = ""
    api_key: str = ""


@dataclass
class AppConfig:
    realm: str
    auth: AuthConfig
    timeout_s: float = DEFAULT_TIMEOUT_S


def config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def default_config() -> AppConfig:
    return AppConfig(realm="", auth=AuthConfig(), timeout_s=DEFAULT_TIMEOUT_S)


def normalize_realm(raw: str | None, *, warn: bool = False) -> str:
    """Reduce a pasted realm URL to its origin.

    The API always lives at /api/v1 on the realm's origin, so any path
    (including a copied ".../api/v1/...") is dropped. A missing scheme
    becomes http for local hosts and https otherwise.
    """
    value = (raw or "").strip()
    if not value:
        return ""
    if "://" not in value:
        host = value.split("/", 1)[0].split(":", 1)[0].lower()
        scheme = "http" if host in LOCAL_HOSTS else "https"
        value = f"{scheme}://{value}"
        if warn:
            _warn_guessed(f"realm missing scheme, assuming {scheme}://")
    parts = urlsplit(value)
    if not parts.netloc:
        return ""
    if warn and parts.path.strip("/"):
        _warn_guessed(f"ignoring path {parts.path!r} in realm URL")
    return f"{parts.scheme.lower()}://{parts.netloc}"


def _warn_guessed(msg: str) -> None:
    if msg in _WARNED:
        return
    if not _is_interactive():
        return
    console.warn(msg)
    _WARNED.add(msg)


def _is_interactive() -> bool:
    import sys
    return bool(sys.stderr.isatty() or sys.stdout.isatty())


def ensure_parent_dir(path: str) -> None:
    os.makedirs(os.path.dirname(path), exist_ok=True)


def to_toml(cfg: AppConfig) -> dict[str, Any]:
    return {
        "realm": cfg.realm,
        "timeout_s": float(cfg.timeout_s),
        "auth": {
            "email": cfg.auth.email,
            "api_key": cfg.auth.api_key,
        },
    }


def from_toml(data: dict[str, Any]) -> AppConfig:
    realm = normalize_realm(str(data.get("realm") or ""), warn=True)
    timeout_s = DEFAULT_TIMEOUT_S
    raw_timeout = data.get("timeout_s")
    if raw_timeout is not None:
        try:
            timeout_s = float(raw_timeout)
        except (TypeError, ValueError):
            timeout_s = DEFAULT_TIMEOUT_S
    auth_raw = data.get("auth") or {}
    email = ""
    api_key = ""
    if isinstance(auth_raw, dict):
        email = str(auth_raw.get("email") or "")
        api_key = str(auth_raw.get("api_key") or "")
    return AppConfig(realm=realm, auth=AuthConfig(email=email, api_key=api_key), timeout_s=timeout_s)


def apply_env(cfg: AppConfig) -> AppConfig:
    realm = os.getenv(ENV_REALM, "").strip()
    email = os.getenv(ENV_EMAIL, "").strip()
    api_key = os.getenv(ENV_API_KEY, "").strip()
    return AppConfig(
        realm=normalize_realm(realm) if realm else cfg.realm,
        auth=AuthConfig(email=email or cfg.auth.email, api_key=api_key or cfg.auth.api_key),
        timeout_s=cfg.timeout_s,
    )


def load_config() -> AppConfig:
    path = config_path()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
        return from_toml(data)
    except FileNotFoundError:
        return default_config()


def save_config(cfg: AppConfig) -> str:
    path = config_path()
    ensure_parent_dir(path)
    with open(path, "wb") as f:
        f.write(tomli_w.dumps(to_toml(cfg)).encode("utf-8"))
    os.chmod(path, 0o600)
    return path
