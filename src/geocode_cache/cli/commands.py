from typing import Annotated

import typer
from config import ConfigurationSet

from geocode_cache.cli._logging import configure_logging
from geocode_cache.cli._output import print_error, print_json, print_lookup_success, print_plain
from geocode_cache.config import create_config, load_server_settings
from geocode_cache.domain import Err, LookupSuccess, Ok
from geocode_cache.exceptions import ConfigurationError
from geocode_cache.factory import build_service
from geocode_cache.service import GeocodeService

app = typer.Typer(name="geocache", help="Cache-aside geocoding proxy")

_ConfigOpt = Annotated[str, typer.Option("--config", help="Path to a YAML config file")]


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable DEBUG logging")] = False,
) -> None:
    """Cache-aside geocoding proxy."""
    configure_logging(verbose=verbose)
    if ctx.invoked_subcommand is None:
        raise typer.Exit()


def _build_service(cfg: ConfigurationSet) -> GeocodeService:
    try:
        return build_service(cfg)
    except ConfigurationError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


@app.command()
def lookup(
    query: Annotated[str, typer.Argument(help="Place name or address to geocode")],
    refresh: Annotated[bool, typer.Option("--refresh", help="Ignore the cache and re-fetch")] = False,
    plain: Annotated[bool, typer.Option("--plain", help="Print only '<lat>, <lng>'")] = False,
    as_json: Annotated[bool, typer.Option("--json", help="Print the JSON response body")] = False,
    config: _ConfigOpt = "config.yaml",
) -> None:
    """Look up coordinates for a place name."""
    with _build_service(create_config(yaml_path=config)) as service:
        outcome = service.refresh(query) if refresh else service.lookup(query)
    match outcome:
        case Ok(LookupSuccess() as success):
            if plain:
                print_plain(success.result.formatted)
            elif as_json:
                print_json(success)
            else:
                print_lookup_success(success)
        case Err(error):
            print_error(error.message)
            raise typer.Exit(code=1)


@app.command()
def serve(
    host: Annotated[str | None, typer.Option("--host", help="Bind address")] = None,
    port: Annotated[int | None, typer.Option("--port", help="Bind port")] = None,
    config: _ConfigOpt = "config.yaml",
) -> None:
    """Serve the geocoding HTTP API."""
    from geocode_cache.web import create_app

    cfg = create_config(yaml_path=config)
    try:
        settings = load_server_settings(cfg)
    except ConfigurationError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    with _build_service(cfg) as service:
        create_app(service).run(host=host or settings.host, port=port or settings.port)
