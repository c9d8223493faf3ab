"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers y redirects del fetch de la página destino.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings


def build_client(
    settings: AppSettings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` síncrono.

    Por qué síncrono:
    - Cada request entrante se atiende en su propio hilo y bloquea en cada
      llamada de red; no hay trabajo compartido entre requests.
    - Sin headers propios salvo que se configure `user_agent`.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {}
    if settings.user_agent:
        headers["User-Agent"] = settings.user_agent
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )
