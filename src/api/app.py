"""Front door HTTP (FastAPI).

Rutas:
- `/` resuelve destino + metadata y responde la página de enmascarado.
- Cualquier otra ruta redirige temporalmente a `/` sin tocar DNS ni HTTP.

Los endpoints son síncronos: FastAPI los ejecuta en su threadpool, un hilo
por request, y cada llamada de red bloquea solo ese hilo.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse

from adapters.dns_client import query_txt_record
from adapters.frame_renderer import render_frame
from adapters.page_metadata import fetch_page_metadata
from core.config import AppSettings, get_settings
from core.domain.errors import FrameRenderError, RedirectTargetNotFound
from core.interfaces.resolution import PageMetadataFetcher, TxtLookup
from core.services.metadata_chain import build_frame
from core.services.target_resolver import query_redirect_target

logger = logging.getLogger(__name__)

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def create_app(
    settings: AppSettings | None = None,
    *,
    lookup: TxtLookup = query_txt_record,
    fetch: PageMetadataFetcher = fetch_page_metadata,
) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(title="brighella", docs_url=None, redoc_url=None, openapi_url=None)

    @app.api_route("/", methods=ALL_METHODS, response_class=HTMLResponse)
    def masked_redirect(request: Request):
        host = request.headers.get("host", "")
        try:
            target_url = query_redirect_target(host, settings, lookup=lookup)
        except RedirectTargetNotFound:
            return PlainTextResponse("Unable to find redirect target", status_code=400)

        frame = build_frame(host, target_url, settings, lookup=lookup, fetch=fetch)
        try:
            body = render_frame(frame)
        except FrameRenderError as exc:
            logger.error("[%s] %s", host, exc)
            return PlainTextResponse("Template parsing error", status_code=500)
        return HTMLResponse(body)

    @app.api_route("/{path:path}", methods=ALL_METHODS, include_in_schema=False)
    def temporary_redirect(path: str):
        return RedirectResponse("/", status_code=307)

    return app


app = create_app()
