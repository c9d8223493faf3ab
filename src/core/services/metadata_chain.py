"""Cadena de fallback para título y favicon.

Orden de niveles:
1. Overrides en DNS (`_frame_title.<host>`, `_frame_favicon.<host>`).
2. Scraping de la página destino.
3. Defaults de configuración.

Comportamiento conservado a propósito: si el override de título existe, ni
el override de favicon ni el scraping se consultan, y el favicon cae directo
al default del nivel 3.
"""

from __future__ import annotations

import logging

from adapters.dns_client import query_txt_record
from adapters.page_metadata import fetch_page_metadata
from core.config import AppSettings
from core.domain.errors import TxtLookupError
from core.domain.models import Frame, PageMetadata
from core.interfaces.resolution import PageMetadataFetcher, TxtLookup
from core.services.target_resolver import record_name_for

logger = logging.getLogger(__name__)


def _dns_override(host: str, prefix: str, settings: AppSettings, lookup: TxtLookup) -> str | None:
    record_name = record_name_for(prefix, host)
    try:
        value = lookup(record_name, settings)
    except TxtLookupError as exc:
        logger.debug("[%s] No override at %s: %s", host, record_name, exc)
        return None
    return value or None


def resolve_metadata(
    host: str,
    target_url: str,
    settings: AppSettings,
    lookup: TxtLookup = query_txt_record,
    fetch: PageMetadataFetcher = fetch_page_metadata,
) -> PageMetadata:
    """Devuelve título y favicon, ambos no vacíos. Nunca lanza errores propios."""

    metadata = PageMetadata()

    custom_title = _dns_override(host, settings.dns_title_prefix, settings, lookup)
    if custom_title:
        metadata.title = custom_title
    else:
        metadata.favicon = _dns_override(host, settings.dns_favicon_prefix, settings, lookup)

        if not metadata.is_complete():
            try:
                page = fetch(target_url, settings)
            except Exception as exc:
                logger.info("[%s] Could not scrape %s: %s", host, target_url, exc)
            else:
                if not metadata.title:
                    metadata.title = page.title
                if not metadata.favicon:
                    metadata.favicon = page.favicon

    if not metadata.title:
        metadata.title = settings.default_title
    if not metadata.favicon:
        metadata.favicon = settings.default_favicon

    return metadata


def build_frame(
    host: str,
    target_url: str,
    settings: AppSettings,
    lookup: TxtLookup = query_txt_record,
    fetch: PageMetadataFetcher = fetch_page_metadata,
) -> Frame:
    metadata = resolve_metadata(host, target_url, settings, lookup=lookup, fetch=fetch)
    return Frame(src=target_url, title=metadata.title, favicon=metadata.favicon)
