"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- El invariante de `Frame` (título y favicon nunca vacíos) queda declarado en
  el propio modelo.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
- Ninguno vive más allá de un request.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class TxtRecordQuery(BaseModel):
    """Consulta TXT efímera, construida por cada lookup."""

    model_config = ConfigDict(frozen=True)

    record_name: str = Field(
        ...,
        description="Nombre del registro, calificado o no (p.ej. '_frame.example.com').",
    )
    resolver_address: str = Field(..., min_length=1)
    resolver_port: int = Field(..., ge=1, le=65535)

    @property
    def fqdn(self) -> str:
        if self.record_name.endswith("."):
            return self.record_name
        return self.record_name + "."


class PageMetadata(BaseModel):
    """Metadata parcial mientras se recorre la cadena de fallback.

    Un campo en None (o vacío) significa que ningún nivel lo ha aportado todavía.
    """

    title: str | None = Field(default=None, description="Título de la página.")
    favicon: str | None = Field(default=None, description="URL absoluta del favicon.")

    def is_complete(self) -> bool:
        return bool(self.title) and bool(self.favicon)


class Frame(BaseModel):
    """Lo único que cruza la frontera hacia el renderer."""

    model_config = ConfigDict(frozen=True)

    src: str = Field(
        ...,
        description="URL destino embebida en el iframe (sin validar, tal cual viene del DNS).",
    )
    title: str = Field(..., min_length=1)
    favicon: str = Field(..., min_length=1)
