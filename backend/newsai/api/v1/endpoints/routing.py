from fastapi import APIRouter, Depends, Response, status

from newsai.routing.deps import get_current_origin, get_tenant_lookup_gateway, origin_from_location
from newsai.routing.gateway import TenantLookupGateway
from newsai.routing.public_url import CurrentOrigin
from newsai.routing.resolver import TenantLookupUnavailable
from newsai.schemas.routing import ResolveRequest, RoutingDecisionOut
from newsai.services import routing_service


router = APIRouter(prefix='/routing', tags=['routing'])

RETRY_AFTER_SECONDS = '5'


def _respond(
    response: Response,
    origin: CurrentOrigin,
    gateway: TenantLookupGateway,
    preview: bool,
) -> RoutingDecisionOut:
    classification, decision, pending = routing_service.resolve_navigation(origin, gateway, preview=preview)
    if isinstance(decision, TenantLookupUnavailable):
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        response.headers['Retry-After'] = RETRY_AFTER_SECONDS
    return routing_service.decision_response(origin, classification, decision, pending)


@router.get('/resolve', response_model=RoutingDecisionOut)
def resolve_request_host(
    response: Response,
    preview: bool = False,
    origin: CurrentOrigin = Depends(get_current_origin),
    gateway: TenantLookupGateway = Depends(get_tenant_lookup_gateway),
) -> RoutingDecisionOut:
    return _respond(response, origin, gateway, preview)


@router.post('/resolve', response_model=RoutingDecisionOut)
def resolve_location(
    payload: ResolveRequest,
    response: Response,
    gateway: TenantLookupGateway = Depends(get_tenant_lookup_gateway),
) -> RoutingDecisionOut:
    return _respond(response, origin_from_location(payload.location), gateway, payload.preview)
