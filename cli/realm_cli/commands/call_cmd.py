from __future__ import annotations

import os
from typing import Any, Callable

import typer

from realm_client import RealmClient, RealmClientError
from realm_client.errors_utils import describe_error

from .. import console
from ..config import load_config
from ..http import make_client

app = typer.Typer(help="Make raw API calls against the configured realm.")

_VERBS = ("get", "post", "put", "patch", "delete", "head")


def parse_params(raw: list[str] | None) -> dict[str, str]:
    params: dict[str, str] = {}
    for item in raw or []:
        key, sep, value = item.partition("=")
        key = key.strip()
        if not sep or not key:
            raise typer.BadParameter(f"expected key=value, got {item!r}", param_hint="--param")
        params[key] = value
    return params


def _run(realm: str | None, json_out: bool, call: Callable[[RealmClient], Any]) -> None:
    cfg = load_config()
    client = make_client(cfg, realm_override=realm)
    if not client.auth.realm:
        client.close()
        console.err("Realm is not configured. Run `realm settings init` first.")
        raise typer.Exit(code=2)
    try:
        result = call(client)
    except RealmClientError as e:
        console.err(describe_error(e))
        raise typer.Exit(code=2)
    finally:
        client.close()

    console.print_result(result, json_mode=json_out)


def _register(verb: str) -> None:
    def command(
            route: str = typer.Argument(..., help="Route under /api/v1/, e.g. users/me."),
            param: list[str] | None = typer.Option(None, "-p", "--param", help="Request parameter key=value."),
            silent: bool = typer.Option(False, "--silent", help="Do not count towards network activity (GET only)."),
            realm: str | None = typer.Option(None, "--realm", help="Override realm URL."),
            json_out: bool = typer.Option(True, "--json/--raw", help="Pretty-print result as JSON."),
    ) -> None:
        params = parse_params(param)

        def _call(client: RealmClient) -> Any:
            if verb == "get":
                return client.get(route, params, is_silent=silent)
            return getattr(client, verb)(route, params)

        _run(realm, json_out, _call)

    command.__name__ = f"{verb}_cmd"
    app.command(verb, help=f"Send a {verb.upper()} request.")(command)


for _verb in _VERBS:
    _register(_verb)


@app.command("upload", help="Upload a file as a multipart POST.")
def upload(
        route: str = typer.Argument(..., help="Route under /api/v1/, e.g. user_uploads."),
        path: str = typer.Argument(..., help="File to upload."),
        field: str = typer.Option("file", "--field", help="Multipart field name."),
        param: list[str] | None = typer.Option(None, "-p", "--param", help="Extra form field key=value."),
        realm: str | None = typer.Option(None, "--realm", help="Override realm URL."),
        json_out: bool = typer.Option(True, "--json/--raw", help="Pretty-print result as JSON."),
) -> None:
    if not os.path.isfile(path):
        console.err(f"File not found: {path}")
        raise typer.Exit(code=2)
    params = parse_params(param)

    def _call(client: RealmClient) -> Any:
        with open(path, "rb") as f:
            return client.file(route, {field: (os.path.basename(path), f)}, params)

    _run(realm, json_out, _call)
