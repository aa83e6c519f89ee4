from newsai.schemas.common import BaseSchema, PaginationMeta
from newsai.schemas.routing import CurrentOriginIn, ResolveRequest, RoutingDecisionOut, TenantRefOut
from newsai.schemas.settings import BlogSettingsOut, BlogSettingsUpdate
from newsai.schemas.tenant import (
    PublicUrlOut,
    PublicUrlRequest,
    TenantCreate,
    TenantListResponse,
    TenantOut,
    TenantUpdate,
)

__all__ = [
    'BaseSchema',
    'BlogSettingsOut',
    'BlogSettingsUpdate',
    'CurrentOriginIn',
    'PaginationMeta',
    'PublicUrlOut',
    'PublicUrlRequest',
    'ResolveRequest',
    'RoutingDecisionOut',
    'TenantCreate',
    'TenantListResponse',
    'TenantOut',
    'TenantRefOut',
    'TenantUpdate',
]
