"""Doctor command for environment diagnostics."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from adapters.dns_client import query_txt_record
from adapters.frame_renderer import render_frame
from core.config import AppSettings, get_settings
from core.domain.errors import BrighellaError, TxtQueryError
from core.domain.models import Frame

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_resolver(settings: AppSettings, probe_host: str) -> tuple[bool, str]:
    """A lookup miss still proves the resolver answered; only transport errors fail."""

    try:
        value = query_txt_record(f"{settings.dns_prefix}.{probe_host}", settings)
        return True, f"TXT {value}"
    except TxtQueryError as exc:
        return False, str(exc)
    except BrighellaError as exc:
        return True, str(exc)


def _check_template() -> tuple[bool, str]:
    try:
        render_frame(Frame(src="about:blank", title="doctor", favicon="about:blank"))
        return True, "OK"
    except BrighellaError as exc:
        return False, str(exc)


@app.command()
def run(
    probe_host: str = typer.Option("example.com", "--probe-host", help="Host usado para sondear el resolver."),
) -> None:
    """Run baseline diagnostics and show the effective configuration."""

    settings = get_settings()

    table = Table(title="Brighella Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Port", "OK", str(settings.port))
    table.add_row("Default title", "OK", settings.default_title)
    table.add_row("Resolver", "OK", f"{settings.resolver_address}:{settings.resolver_port}")

    ok_dns, detail_dns = _check_resolver(settings, probe_host)
    table.add_row("DNS connectivity", "OK" if ok_dns else "FAIL", detail_dns)

    ok_tpl, detail_tpl = _check_template()
    table.add_row("Frame template", "OK" if ok_tpl else "FAIL", detail_tpl)

    _console.print(table)

    if not (ok_dns and ok_tpl):
        raise typer.Exit(code=1)
