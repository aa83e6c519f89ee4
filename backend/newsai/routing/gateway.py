from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import Literal, Protocol

import httpx
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from newsai.models.tenant import Tenant


logger = logging.getLogger(__name__)


class TenantLookupTransportError(Exception):
    """The record store could not be reached; the tenant may well exist."""


@dataclass(frozen=True)
class TenantRecord:
    id: uuid.UUID | str
    label: str
    display_name: str


@dataclass(frozen=True)
class LookupOutcome:
    status: Literal['found', 'not_found', 'unavailable']
    label: str
    tenant: TenantRecord | None = None
    detail: str | None = None


class TenantLookupGateway(Protocol):
    def lookup(self, label: str) -> TenantRecord | None:
        ...


class SqlTenantLookupGateway:
    def __init__(self, db: Session):
        self.db = db

    def lookup(self, label: str) -> TenantRecord | None:
        try:
            tenant = self.db.scalar(select(Tenant).where(Tenant.label == label, Tenant.is_active.is_(True)))
        except SQLAlchemyError as exc:
            raise TenantLookupTransportError(f'Tenant store query failed: {exc.__class__.__name__}') from exc
        if not tenant:
            return None
        return TenantRecord(id=tenant.id, label=tenant.label, display_name=tenant.display_name)


class RestTenantLookupGateway:
    """Looks tenants up in a hosted PostgREST-style record store."""

    def __init__(
        self,
        base_url: str,
        api_key: str | None = None,
        *,
        timeout: float = 5.0,
        transport: httpx.BaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip('/')
        self.api_key = api_key
        self.timeout = timeout
        self.transport = transport

    def _headers(self) -> dict[str, str]:
        headers = {'Accept': 'application/json', 'User-Agent': 'newsai-tenant-routing'}
        if self.api_key:
            headers['apikey'] = self.api_key
            headers['Authorization'] = f'Bearer {self.api_key}'
        return headers

    def lookup(self, label: str) -> TenantRecord | None:
        url = f'{self.base_url}/rest/v1/tenants'
        params = {
            'label': f'eq.{label}',
            'is_active': 'is.true',
            'select': 'id,label,display_name',
            'limit': '1',
        }
        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                resp = client.get(url, headers=self._headers(), params=params)
        except httpx.HTTPError as exc:
            raise TenantLookupTransportError(f'Record store unreachable: {exc.__class__.__name__}') from exc

        if resp.status_code == 404:
            return None
        if resp.status_code == 429 or resp.status_code >= 500:
            raise TenantLookupTransportError(f'Record store returned {resp.status_code}')
        if not resp.is_success:
            raise TenantLookupTransportError(f'Record store rejected lookup ({resp.status_code})')

        try:
            rows = resp.json()
        except ValueError as exc:
            raise TenantLookupTransportError('Record store returned invalid JSON') from exc
        if not isinstance(rows, list):
            raise TenantLookupTransportError('Record store returned an unexpected payload')
        if not rows:
            return None
        row = rows[0]
        if not isinstance(row, dict) or not row.get('id'):
            raise TenantLookupTransportError('Record store returned a tenant row without an id')
        return TenantRecord(
            id=row['id'],
            label=row.get('label') or label,
            display_name=row.get('display_name') or row.get('label') or label,
        )


def perform_lookup(gateway: TenantLookupGateway, label: str) -> LookupOutcome:
    try:
        tenant = gateway.lookup(label)
    except TenantLookupTransportError as exc:
        logger.warning('Tenant lookup for %r failed: %s', label, exc)
        return LookupOutcome(status='unavailable', label=label, detail=str(exc))
    if tenant is None:
        return LookupOutcome(status='not_found', label=label)
    return LookupOutcome(status='found', label=label, tenant=tenant)
