"""Errores del dominio.

Dos severidades:
- duras: el destino no se puede resolver (`RedirectTargetNotFound`) o la
  plantilla no se puede renderizar (`FrameRenderError`);
- blandas: todo lo que ocurre dentro de la cadena de metadata, que se absorbe.
"""

from __future__ import annotations


class BrighellaError(Exception):
    """Base de todos los errores propios."""


class TxtLookupError(BrighellaError):
    """Una consulta TXT no produjo valor."""

    def __init__(self, fqdn: str, message: str) -> None:
        super().__init__(message)
        self.fqdn = fqdn


class TxtQueryError(TxtLookupError):
    """Fallo de transporte: resolver inalcanzable, timeout o nombre inválido."""


class TxtResponseError(TxtLookupError):
    """El resolver respondió con un rcode distinto de NOERROR."""

    def __init__(self, fqdn: str, rcode: str) -> None:
        super().__init__(fqdn, f"answer from {fqdn} not successful: {rcode}")
        self.rcode = rcode


class TxtRecordNotFound(TxtLookupError):
    def __init__(self, fqdn: str) -> None:
        super().__init__(fqdn, f"record not found: {fqdn}")


class RedirectTargetNotFound(BrighellaError):
    def __init__(self, host: str, fqdn: str) -> None:
        super().__init__(f"redirect target not found at {fqdn}")
        self.host = host
        self.fqdn = fqdn


class PageFetchError(BrighellaError):
    """No se pudo recuperar la página destino."""


class FrameRenderError(BrighellaError):
    """La plantilla de enmascarado no está disponible o falló al renderizar."""
