"""Render de la página de enmascarado.

Por qué está en adapters:
- HTML es un detalle de infraestructura (Jinja2).
- El Core solo conoce el modelo `Frame`.
"""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, TemplateError, select_autoescape

from core.domain.errors import FrameRenderError
from core.domain.models import Frame


_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
FRAME_TEMPLATE = "redirect.html"


def _get_env(templates_dir: Path | None = None) -> Environment:
    return Environment(
        loader=FileSystemLoader(str(templates_dir or _TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "xml"]),
    )


def render_frame(frame: Frame, *, templates_dir: Path | None = None) -> str:
    """Renderiza el HTML que embebe `frame.src` en un iframe.

    La plantilla se carga en cada llamada (sin caché entre requests); si no
    existe o falla, se lanza `FrameRenderError`.
    """

    try:
        template = _get_env(templates_dir).get_template(FRAME_TEMPLATE)
        return template.render(frame=frame)
    except TemplateError as exc:
        raise FrameRenderError(f"template error: {exc}") from exc
