from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar, Literal, Union

from newsai.routing.gateway import LookupOutcome, TenantRecord
from newsai.routing.host_classifier import DEFAULT_PROVIDER_SUFFIXES, HostClassification, classify_host


@dataclass(frozen=True)
class AdminApp:
    hostname: str
    view: ClassVar[str] = 'admin'


@dataclass(frozen=True)
class PublicTenant:
    label: str
    hostname: str
    tenant: TenantRecord
    view: ClassVar[str] = 'public'


@dataclass(frozen=True)
class PreviewTenant:
    label: str
    hostname: str
    tenant: TenantRecord
    view: ClassVar[str] = 'preview'


@dataclass(frozen=True)
class TenantNotFound:
    label: str
    hostname: str
    view: ClassVar[str] = 'not_found'


@dataclass(frozen=True)
class TenantLookupUnavailable:
    label: str
    hostname: str
    detail: str | None = None
    view: ClassVar[str] = 'unavailable'


RoutingDecision = Union[AdminApp, PublicTenant, PreviewTenant, TenantNotFound, TenantLookupUnavailable]


@dataclass(frozen=True)
class NeedsLookup:
    label: str
    hostname: str
    source: Literal['host', 'query']
    preview: bool = False


@dataclass(frozen=True)
class Resolution:
    classification: HostClassification
    outcome: AdminApp | NeedsLookup


def _query_label(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value


def resolve_route(
    hostname: str | None,
    query_label: str | None = None,
    reserved_labels: Iterable[str] | None = None,
    *,
    provider_suffixes: Iterable[str] = DEFAULT_PROVIDER_SUFFIXES,
    preview: bool = False,
) -> Resolution:
    """Decide between the admin app and a tenant lookup for one navigation.

    A label found in the hostname always wins. The ``?blog=`` fallback is read
    only when the host yields no candidate, so query links keep working on
    custom domains without wildcard DNS.
    """
    classification = classify_host(
        hostname,
        reserved_labels=reserved_labels,
        provider_suffixes=provider_suffixes,
    )
    raw_host = hostname or ''

    if classification.candidate_label is not None:
        return Resolution(
            classification=classification,
            outcome=NeedsLookup(label=classification.candidate_label, hostname=raw_host, source='host', preview=preview),
        )

    label = _query_label(query_label)
    if label is not None:
        return Resolution(
            classification=classification,
            outcome=NeedsLookup(label=label, hostname=raw_host, source='query', preview=preview),
        )

    return Resolution(classification=classification, outcome=AdminApp(hostname=raw_host))


def complete_lookup(pending: NeedsLookup, outcome: LookupOutcome) -> RoutingDecision:
    if outcome.status == 'found' and outcome.tenant is not None:
        if pending.preview:
            return PreviewTenant(label=pending.label, hostname=pending.hostname, tenant=outcome.tenant)
        return PublicTenant(label=pending.label, hostname=pending.hostname, tenant=outcome.tenant)
    if outcome.status == 'unavailable':
        return TenantLookupUnavailable(label=pending.label, hostname=pending.hostname, detail=outcome.detail)
    return TenantNotFound(label=pending.label, hostname=pending.hostname)
