"""Contratos de los colaboradores de resolución.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite que el lookup DNS real y el fetch HTTP real sean sustituibles por
  stubs en tests sin acoplar el Core a dnspython ni a httpx.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.config import AppSettings
from core.domain.models import PageMetadata


@runtime_checkable
class TxtLookup(Protocol):
    """Una consulta TXT síncrona.

    Reglas de diseño:
    - Devuelve el primer string TXT o lanza `TxtLookupError`.
    - Sin reintentos ni caché: cada llamada es un round trip nuevo.
    """

    def __call__(self, record_name: str, settings: AppSettings) -> str: ...


@runtime_checkable
class PageMetadataFetcher(Protocol):
    """Fetch + parseo de la página destino; lanza `PageFetchError` si no se pudo leer."""

    def __call__(self, url: str, settings: AppSettings) -> PageMetadata: ...
