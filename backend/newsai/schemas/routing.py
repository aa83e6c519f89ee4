from typing import Literal
from uuid import UUID

from pydantic import BaseModel, Field


RoutingView = Literal['admin', 'public', 'preview', 'not_found', 'unavailable']


class CurrentOriginIn(BaseModel):
    protocol: str = 'https:'
    hostname: str
    host: str | None = None
    search: str = ''


class ResolveRequest(BaseModel):
    location: CurrentOriginIn
    preview: bool = False


class TenantRefOut(BaseModel):
    id: UUID | str
    label: str
    display_name: str


class RoutingDecisionOut(BaseModel):
    view: RoutingView
    hostname: str
    host_kind: str
    label: str | None = None
    label_source: Literal['host', 'query'] | None = None
    tenant: TenantRefOut | None = None
    retryable: bool = False
    detail: str | None = None
    root_url: str | None = Field(default=None, description='Where a visitor can go when the label is unknown.')
