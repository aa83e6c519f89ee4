from __future__ import annotations

import logging
from urllib.parse import parse_qs

from fastapi import HTTPException, status

from newsai.core.config import Settings, settings as default_settings
from newsai.models.tenant import Tenant
from newsai.routing.gateway import TenantLookupGateway, perform_lookup
from newsai.routing.host_classifier import HostClassification, supports_wildcard
from newsai.routing.public_url import (
    CurrentOrigin,
    InvalidTenantLabel,
    PublicUrl,
    RoutingModeConfig,
    build_public_url,
)
from newsai.routing.resolver import (
    AdminApp,
    NeedsLookup,
    PreviewTenant,
    PublicTenant,
    RoutingDecision,
    TenantLookupUnavailable,
    TenantNotFound,
    complete_lookup,
    resolve_route,
)
from newsai.schemas.routing import RoutingDecisionOut, TenantRefOut
from newsai.schemas.tenant import PublicUrlOut


logger = logging.getLogger(__name__)


def query_label_from_search(search: str | None, param: str) -> str | None:
    values = parse_qs((search or '').lstrip('?'), keep_blank_values=True).get(param)
    return values[0] if values else None


def resolve_navigation(
    origin: CurrentOrigin,
    gateway: TenantLookupGateway,
    *,
    preview: bool = False,
    cfg: Settings | None = None,
) -> tuple[HostClassification, RoutingDecision, NeedsLookup | None]:
    cfg = cfg or default_settings
    resolution = resolve_route(
        origin.hostname,
        query_label_from_search(origin.search, cfg.BLOG_QUERY_PARAM),
        cfg.reserved_subdomains,
        provider_suffixes=cfg.provider_sandbox_suffixes,
        preview=preview,
    )
    if isinstance(resolution.outcome, AdminApp):
        return resolution.classification, resolution.outcome, None

    pending = resolution.outcome
    decision = complete_lookup(pending, perform_lookup(gateway, pending.label))
    if isinstance(decision, TenantNotFound):
        logger.info('No tenant for label %r on host %r (%s)', pending.label, pending.hostname, pending.source)
    return resolution.classification, decision, pending


def _root_url(origin: CurrentOrigin, classification: HostClassification) -> str:
    root = classification.root_domain or origin.hostname
    return f'{origin.scheme}://{root}{origin.port_suffix}/'


def decision_response(
    origin: CurrentOrigin,
    classification: HostClassification,
    decision: RoutingDecision,
    pending: NeedsLookup | None,
) -> RoutingDecisionOut:
    out = RoutingDecisionOut(
        view=decision.view,
        hostname=decision.hostname,
        host_kind=classification.kind.value,
        label=pending.label if pending else None,
        label_source=pending.source if pending else None,
    )
    if isinstance(decision, (PublicTenant, PreviewTenant)):
        out.tenant = TenantRefOut(
            id=decision.tenant.id,
            label=decision.tenant.label,
            display_name=decision.tenant.display_name,
        )
    elif isinstance(decision, TenantNotFound):
        out.detail = f"No blog named '{decision.label}' exists on {decision.hostname}."
        out.root_url = _root_url(origin, classification)
    elif isinstance(decision, TenantLookupUnavailable):
        out.retryable = True
        out.detail = 'The blog directory is temporarily unreachable. Please retry.'
    return out


def public_url_for_tenant(
    tenant: Tenant,
    origin: CurrentOrigin,
    *,
    cfg: Settings | None = None,
) -> PublicUrlOut:
    cfg = cfg or default_settings
    mode = RoutingModeConfig.from_settings(tenant.settings_json)
    wildcard = supports_wildcard(origin.hostname, cfg.provider_sandbox_suffixes)
    try:
        link: PublicUrl = build_public_url(
            tenant.label,
            origin,
            mode,
            wildcard,
            reserved_labels=cfg.reserved_subdomains,
            provider_suffixes=cfg.provider_sandbox_suffixes,
            query_param=cfg.BLOG_QUERY_PARAM,
        )
    except InvalidTenantLabel as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return PublicUrlOut(
        label=tenant.label,
        url=link.url,
        display_text=link.display_text,
        mode=link.mode,
        use_subdomains=mode.use_subdomains,
        supports_wildcard=wildcard,
    )
