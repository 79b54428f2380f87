import json

from rich.console import Console
from rich.markup import escape

from geocode_cache.domain import LookupSuccess, Ok
from geocode_cache.formatting import to_json

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def print_error(message: str) -> None:
    err_console.print(f"[red bold]Error:[/red bold] {escape(message)}")


def print_lookup_success(success: LookupSuccess) -> None:
    result = success.result
    console.print(f"[bold]Address:[/bold]   {escape(result.address)}")
    console.print(f"[bold]Latitude:[/bold]  {result.latitude!r}")
    console.print(f"[bold]Longitude:[/bold] {result.longitude!r}")
    console.print(f"[bold]Formatted:[/bold] {result.formatted}")
    if success.from_cache:
        console.print("[yellow](served from cache)[/yellow]")


def print_plain(text: str) -> None:
    console.print(text, markup=False, soft_wrap=True)


def print_json(success: LookupSuccess) -> None:
    console.print(json.dumps(to_json(Ok(success)), ensure_ascii=False), markup=False, soft_wrap=True)
