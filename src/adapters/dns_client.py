"""Cliente DNS TXT (dnspython).

Por qué un módulo propio:
- Es I/O puro: una consulta UDP al resolver configurado, sin caché ni reintentos.
- Traduce las excepciones de dnspython/socket a los errores tipados del dominio.
"""

from __future__ import annotations

import dns.exception
import dns.message
import dns.name
import dns.query
import dns.rcode
import dns.rdatatype

from core.config import AppSettings
from core.domain.errors import TxtQueryError, TxtRecordNotFound, TxtResponseError
from core.domain.models import TxtRecordQuery


def build_query(record_name: str, settings: AppSettings) -> TxtRecordQuery:
    return TxtRecordQuery(
        record_name=record_name,
        resolver_address=settings.resolver_address,
        resolver_port=settings.resolver_port,
    )


def first_txt_string(response: dns.message.Message) -> str | None:
    """Primer string del primer registro TXT con contenido, en orden de respuesta."""

    for rrset in response.answer:
        if rrset.rdtype != dns.rdatatype.TXT:
            continue
        for rdata in rrset:
            if rdata.strings:
                return rdata.strings[0].decode("utf-8", errors="replace")
    return None


def query_txt_record(record_name: str, settings: AppSettings) -> str:
    """Consulta TXT única contra `settings.resolver_address:resolver_port`.

    Lanza:
    - `TxtQueryError` si el transporte falla (timeout, red, nombre inválido).
    - `TxtResponseError` si el rcode no es NOERROR (p.ej. NXDOMAIN).
    - `TxtRecordNotFound` si la respuesta es correcta pero no trae TXT.
    """

    query = build_query(record_name, settings)
    fqdn = query.fqdn

    try:
        message = dns.message.make_query(dns.name.from_text(fqdn), dns.rdatatype.TXT)
        response = dns.query.udp(
            message,
            query.resolver_address,
            port=query.resolver_port,
            timeout=settings.dns_timeout_seconds,
        )
    except (dns.exception.DNSException, OSError, ValueError) as exc:
        raise TxtQueryError(fqdn, f"error querying {fqdn}: {exc}") from exc

    if response.rcode() != dns.rcode.NOERROR:
        raise TxtResponseError(fqdn, dns.rcode.to_text(response.rcode()))

    value = first_txt_string(response)
    if value is None:
        raise TxtRecordNotFound(fqdn)
    return value
