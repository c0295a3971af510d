from __future__ import annotations

import os

import typer

from .. import console
from ..config import config_path, default_config, load_config, normalize_realm, save_config

app = typer.Typer(help="Manage local CLI settings (~/.config/realm-client/config.toml).")


@app.command("init")
def init_settings(
        force: bool = typer.Option(False, "--force", help="Overwrite existing config."),
        realm: str = typer.Option(..., "--realm", prompt="Realm URL", help="Realm URL like https://chat.example.com"),
        email: str = typer.Option("", "--email", prompt="Account email", help="Account email."),
        api_key: str = typer.Option(
            "",
            "--api-key",
            prompt="API key",
            hide_input=True,
            help="API key for the account.",
        ),
):
    path = config_path()
    if os.path.exists(path) and not force:
        console.info(f"Config already exists: {path}")
        console.info("Use --force to overwrite.")
        return

    cfg = default_config()
    cfg.realm = normalize_realm(realm, warn=True)
    if not cfg.realm:
        console.err("Realm cannot be empty.")
        raise typer.Exit(code=2)
    cfg.auth.email = email.strip()
    cfg.auth.api_key = api_key.strip()
    saved = save_config(cfg)
    console.ok(f"Config written: {saved}")


@app.command("show")
def show_settings():
    cfg = load_config()
    key_state = "(set)" if (cfg.auth.api_key or "").strip() else "(empty)"
    console.console.print(
        f"realm={cfg.realm} email={cfg.auth.email} api_key={key_state} timeout_s={cfg.timeout_s}"
    )


@app.command("get")
def get_setting(
        key: str = typer.Argument(..., help="Setting key (realm, email, timeout_s)."),
):
    cfg = load_config()
    k = key.strip().lower()
    if k == "realm":
        console.console.print(cfg.realm)
        return
    if k == "email":
        console.console.print(cfg.auth.email)
        return
    if k == "timeout_s":
        console.console.print(str(cfg.timeout_s))
        return
    console.err(f"Unknown setting: {key}")
    raise typer.Exit(code=2)


@app.command("set")
def set_setting(
        realm: str | None = typer.Option(None, "--realm", help="Set realm URL."),
        email: str | None = typer.Option(None, "--email", help="Set account email."),
        api_key: str | None = typer.Option(None, "--api-key", help="Set API key."),
        timeout_s: float | None = typer.Option(None, "--timeout", help="Set request timeout in seconds."),
):
    cfg = load_config()
    if realm is not None:
        cfg.realm = normalize_realm(realm, warn=True)
    if email is not None:
        cfg.auth.email = email.strip()
    if api_key is not None:
        cfg.auth.api_key = api_key.strip()
    if timeout_s is not None:
        if timeout_s <= 0:
            console.err("Timeout must be positive.")
            raise typer.Exit(code=2)
        cfg.timeout_s = timeout_s
    saved = save_config(cfg)
    console.ok(f"Settings updated: {saved}")
