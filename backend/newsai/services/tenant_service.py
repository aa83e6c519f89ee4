import logging
import re

from fastapi import HTTPException, status
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from newsai.core.config import settings
from newsai.models.tenant import Tenant
from newsai.routing.host_classifier import LOOPBACK_LABEL, WWW_LABEL
from newsai.schemas.tenant import TenantCreate, TenantUpdate


logger = logging.getLogger(__name__)

_LABEL_PATTERN = re.compile(r'[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?')


def validate_label(label: str, reserved: frozenset[str] | None = None) -> str:
    normalized = (label or '').strip().lower()
    if not _LABEL_PATTERN.fullmatch(normalized):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail='Invalid tenant label')
    if normalized.isdigit():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail='Tenant label cannot be numeric only')
    reserved = settings.reserved_subdomains if reserved is None else reserved
    # A reserved label would never be routed to, so refuse it up front.
    if normalized in reserved or normalized in {WWW_LABEL, LOOPBACK_LABEL}:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail='Tenant label is reserved')
    return normalized


def get_tenant_by_label(db: Session, label: str) -> Tenant:
    tenant = db.scalar(select(Tenant).where(Tenant.label == label))
    if not tenant:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail='Tenant not found')
    return tenant


def list_tenants(db: Session, *, page: int = 1, page_size: int = 50) -> tuple[list[Tenant], int]:
    page = max(page, 1)
    page_size = min(max(page_size, 1), 200)
    total = db.scalar(select(func.count()).select_from(Tenant))
    rows = db.scalars(
        select(Tenant).order_by(Tenant.created_at.desc(), Tenant.label.asc()).offset((page - 1) * page_size).limit(page_size)
    ).all()
    return list(rows), int(total or 0)


def create_tenant(db: Session, payload: TenantCreate) -> Tenant:
    label = validate_label(payload.label)
    display_name = payload.display_name.strip()
    if not display_name:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail='Display name is required')

    existing = db.scalar(select(Tenant).where(Tenant.label == label))
    if existing:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail='Tenant label already exists')

    tenant = Tenant(
        label=label,
        display_name=display_name,
        is_active=payload.is_active,
        settings_json={'name': display_name, 'use_subdomains': payload.use_subdomains},
    )
    db.add(tenant)
    db.flush()
    logger.info('Created tenant %s (%s)', label, tenant.id)
    return tenant


def update_tenant(db: Session, tenant: Tenant, payload: TenantUpdate) -> Tenant:
    if payload.display_name is not None:
        display_name = payload.display_name.strip()
        if not display_name:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail='Display name is required')
        tenant.display_name = display_name
    if payload.is_active is not None:
        tenant.is_active = payload.is_active
    db.add(tenant)
    db.flush()
    return tenant
