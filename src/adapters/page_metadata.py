"""Extracción de metadata de la página destino (HTML).

Se usa como nivel intermedio de la cadena de fallback cuando el DNS no
aporta título ni favicon.

Extrae (si existe):
- el primer <title> con texto
- el último <link rel="icon"> / <link rel="shortcut icon">
"""

from __future__ import annotations

import logging

import httpx
from bs4 import BeautifulSoup, Comment, NavigableString

from adapters.http_client import build_client
from core.config import AppSettings
from core.domain.errors import PageFetchError
from core.domain.models import PageMetadata

logger = logging.getLogger(__name__)

FAVICON_RELS = ("icon", "shortcut icon")


def absolutize_favicon(href: str, page_url: str) -> str:
    """Convierte un href de favicon en URL absoluta.

    Heurística:
    - Si empieza por "http" se usa tal cual (también "httpfoo").
    - Si empieza por "/" se concatena al URL truncado en la primera "/"
      a partir del índice 8 (pensado para `scheme://host[:port]`).
    - Si no, `page_url + "/" + href`.
    """

    if href.startswith("http"):
        return href
    if href.startswith("/"):
        base_url = page_url
        idx = page_url.find("/", 8)
        if idx != -1:
            base_url = page_url[:idx]
        return base_url + href
    return page_url + "/" + href


def _title_text(tag) -> str | None:
    if not tag.contents:
        return None
    first = tag.contents[0]
    if isinstance(first, NavigableString) and not isinstance(first, Comment):
        return str(first)
    return None


def extract_page_metadata(*, html: str, page_url: str, default_favicon: str) -> PageMetadata:
    """Recorre el documento en orden y extrae título y favicon.

    Notas:
    - `rel` se compara como string exacto (case-sensitive), por eso el parser
      no separa atributos multivaluados.
    - No hay salida temprana: el último link que coincide gana.
    """

    soup = BeautifulSoup(html or "", "html.parser", multi_valued_attributes=None)

    title = None
    favicon = ""
    for tag in soup.find_all(["title", "link"]):
        if tag.name == "title":
            if title is None:
                title = _title_text(tag)
            continue
        rel = tag.get("rel")
        if rel in FAVICON_RELS:
            favicon = absolutize_favicon(tag.get("href") or "", page_url)

    if not favicon:
        favicon = default_favicon

    return PageMetadata(title=title or None, favicon=favicon)


def fetch_page_metadata(
    url: str,
    settings: AppSettings,
    *,
    transport: httpx.BaseTransport | None = None,
) -> PageMetadata:
    """GET de `url` y extracción de metadata.

    El status code no se comprueba: una página de error también tiene <title>.
    """

    try:
        with build_client(settings, transport=transport) as client:
            response = client.get(url)
            html = response.text
    except (httpx.HTTPError, httpx.InvalidURL, UnicodeError) as exc:
        raise PageFetchError(f"failed to fetch page: {exc}") from exc

    logger.debug("Fetched %s (HTTP %s, %d chars)", url, response.status_code, len(html))
    return extract_page_metadata(
        html=html,
        page_url=url,
        default_favicon=settings.scraped_default_favicon,
    )
