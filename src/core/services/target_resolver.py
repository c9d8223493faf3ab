"""Resolución del destino de redirección vía DNS TXT."""

from __future__ import annotations

import logging

from adapters.dns_client import query_txt_record
from core.config import AppSettings
from core.domain.errors import RedirectTargetNotFound, TxtLookupError
from core.interfaces.resolution import TxtLookup

logger = logging.getLogger(__name__)


def record_name_for(prefix: str, host: str) -> str:
    return f"{prefix}.{host}"


def query_redirect_target(
    host: str,
    settings: AppSettings,
    lookup: TxtLookup = query_txt_record,
) -> str:
    """Devuelve el valor TXT de `_frame.<host>` tal cual (sin validar como URL).

    Cualquier fallo del lookup se registra con su causa y se relanza como
    `RedirectTargetNotFound`; el caller no distingue entre tipos.
    """

    target_fqdn = record_name_for(settings.dns_prefix, host)
    try:
        target = lookup(target_fqdn, settings)
    except TxtLookupError as exc:
        logger.warning("[%s] Error resolving %s: %s", host, target_fqdn, exc)
        raise RedirectTargetNotFound(host, target_fqdn) from exc

    logger.info("[%s] Found redirect target at %s: %s", host, target_fqdn, target)
    return target
