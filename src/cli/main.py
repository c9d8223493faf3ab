"""CLI de Brighella (Typer).

Comandos:
- `serve`: arranca el front door HTTP con uvicorn.
- `resolve`: ejecuta la resolución completa para un host y la muestra en una tabla.
- `doctor`: diagnósticos de entorno.
"""

from __future__ import annotations

import logging

import typer
import uvicorn
from rich.console import Console

from cli import doctor
from cli.ui_components import build_frame_table, print_banner
from core.config import get_settings
from core.domain.errors import RedirectTargetNotFound
from core.services.metadata_chain import build_frame
from core.services.target_resolver import query_redirect_target

app = typer.Typer(no_args_is_help=True, help="DNS-driven masking redirects.")
app.add_typer(doctor.app, name="doctor")

_console = Console()

logger = logging.getLogger(__name__)


@app.command()
def serve(
    host: str = typer.Option(None, "--host", help="Interfaz de escucha (default: settings.listen_host)."),
    port: int = typer.Option(None, "--port", "-p", help="Puerto (default: $PORT o 5000)."),
) -> None:
    """Arranca el servidor HTTP."""

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    listen_host = host or settings.listen_host
    listen_port = port or settings.port

    logger.info("Starting brighella...")
    logger.info("brighella listening on %s:%s...", listen_host, listen_port)
    uvicorn.run("api.app:app", host=listen_host, port=listen_port, log_level=settings.log_level.lower())


@app.command()
def resolve(host: str = typer.Argument(..., help="Host entrante a resolver (p.ej. example.com).")) -> None:
    """Resuelve destino y metadata para HOST, como lo haría una request a `/`."""

    settings = get_settings()
    print_banner(_console)

    try:
        target_url = query_redirect_target(host, settings)
    except RedirectTargetNotFound as exc:
        cause = exc.__cause__ or exc
        _console.print(f"[red]Unable to find redirect target:[/red] {cause}")
        raise typer.Exit(code=1)

    frame = build_frame(host, target_url, settings)
    _console.print(build_frame_table(host, frame))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
