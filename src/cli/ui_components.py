"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import Frame


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("Brighella", style="bold cyan")
    subtitle = Text("DNS TXT • Masked redirects", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_frame_table(host: str, frame: Frame) -> Table:
    """Tabla con el resultado de la resolución para un host."""

    table = Table(title=f"Frame for {host}")
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_row("Target", frame.src)
    table.add_row("Title", frame.title)
    table.add_row("Favicon", frame.favicon)
    return table
