from __future__ import annotations

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from newsai.core.config import settings
from newsai.db.session import get_db
from newsai.routing.gateway import RestTenantLookupGateway, SqlTenantLookupGateway, TenantLookupGateway
from newsai.routing.host_classifier import strip_port
from newsai.routing.public_url import CurrentOrigin
from newsai.schemas.routing import CurrentOriginIn


def _first_value(value: str | None) -> str | None:
    if not value:
        return None
    return value.split(',')[0].strip() or None


def _get_host(request: Request) -> str:
    host = _first_value(request.headers.get('x-forwarded-host')) if settings.TRUST_PROXY_HEADERS else None
    if host:
        return host
    return request.headers.get('host') or request.url.netloc


def _get_protocol(request: Request) -> str:
    proto = _first_value(request.headers.get('x-forwarded-proto')) if settings.TRUST_PROXY_HEADERS else None
    return f'{proto or request.url.scheme}:'


def get_current_origin(request: Request) -> CurrentOrigin:
    host = _get_host(request)
    return CurrentOrigin(
        protocol=_get_protocol(request),
        hostname=strip_port(host).lower(),
        host=host.lower(),
        search=request.url.query,
    )


def get_tenant_lookup_gateway(db: Session = Depends(get_db)) -> TenantLookupGateway:
    if settings.TENANT_LOOKUP_BACKEND == 'rest':
        return RestTenantLookupGateway(
            settings.RECORD_STORE_URL,
            settings.RECORD_STORE_API_KEY,
            timeout=settings.RECORD_STORE_TIMEOUT_SECONDS,
        )
    return SqlTenantLookupGateway(db)


def origin_from_location(location: CurrentOriginIn) -> CurrentOrigin:
    host = location.host or location.hostname
    return CurrentOrigin(
        protocol=location.protocol,
        hostname=strip_port(location.hostname),
        host=host,
        search=location.search,
    )
