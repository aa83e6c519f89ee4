from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel

from newsai.schemas.common import BaseSchema, PaginationMeta
from newsai.schemas.routing import CurrentOriginIn


class TenantOut(BaseSchema):
    id: UUID
    label: str
    display_name: str
    is_active: bool
    created_at: datetime
    updated_at: datetime


class TenantCreate(BaseModel):
    label: str
    display_name: str
    is_active: bool = True
    use_subdomains: bool = False


class TenantUpdate(BaseModel):
    display_name: str | None = None
    is_active: bool | None = None


class TenantListResponse(BaseModel):
    items: list[TenantOut]
    meta: PaginationMeta


class PublicUrlOut(BaseModel):
    label: str
    url: str
    display_text: str
    mode: Literal['subdomain', 'query']
    use_subdomains: bool
    supports_wildcard: bool


class PublicUrlRequest(BaseModel):
    location: CurrentOriginIn
