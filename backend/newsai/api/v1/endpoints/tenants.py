from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from newsai.db.session import get_db
from newsai.routing.deps import get_current_origin, origin_from_location
from newsai.routing.public_url import CurrentOrigin
from newsai.schemas.common import PaginationMeta
from newsai.schemas.tenant import (
    PublicUrlOut,
    PublicUrlRequest,
    TenantCreate,
    TenantListResponse,
    TenantOut,
    TenantUpdate,
)
from newsai.services import routing_service, tenant_service


router = APIRouter(prefix='/tenants', tags=['tenants'])


@router.get('', response_model=TenantListResponse)
def list_tenants(page: int = 1, page_size: int = 50, db: Session = Depends(get_db)) -> TenantListResponse:
    rows, total = tenant_service.list_tenants(db, page=page, page_size=page_size)
    return TenantListResponse(
        items=[TenantOut.model_validate(row) for row in rows],
        meta=PaginationMeta(page=page, page_size=page_size, total=total),
    )


@router.post('', response_model=TenantOut, status_code=status.HTTP_201_CREATED)
def create_tenant(payload: TenantCreate, db: Session = Depends(get_db)) -> TenantOut:
    tenant = tenant_service.create_tenant(db, payload)
    db.commit()
    db.refresh(tenant)
    return TenantOut.model_validate(tenant)


@router.get('/{label}', response_model=TenantOut)
def get_tenant(label: str, db: Session = Depends(get_db)) -> TenantOut:
    return TenantOut.model_validate(tenant_service.get_tenant_by_label(db, label))


@router.patch('/{label}', response_model=TenantOut)
def update_tenant(label: str, payload: TenantUpdate, db: Session = Depends(get_db)) -> TenantOut:
    tenant = tenant_service.get_tenant_by_label(db, label)
    tenant = tenant_service.update_tenant(db, tenant, payload)
    db.commit()
    db.refresh(tenant)
    return TenantOut.model_validate(tenant)


@router.get('/{label}/public-url', response_model=PublicUrlOut)
def get_public_url(
    label: str,
    db: Session = Depends(get_db),
    origin: CurrentOrigin = Depends(get_current_origin),
) -> PublicUrlOut:
    tenant = tenant_service.get_tenant_by_label(db, label)
    return routing_service.public_url_for_tenant(tenant, origin)


@router.post('/{label}/public-url', response_model=PublicUrlOut)
def build_public_url_for_location(
    label: str,
    payload: PublicUrlRequest,
    db: Session = Depends(get_db),
) -> PublicUrlOut:
    # The admin SPA may be served from another origin than this API; use the page it runs on.
    tenant = tenant_service.get_tenant_by_label(db, label)
    return routing_service.public_url_for_tenant(tenant, origin_from_location(payload.location))
