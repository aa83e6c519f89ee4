from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Literal
from urllib.parse import quote, urlsplit

from newsai.routing.host_classifier import (
    DEFAULT_PROVIDER_SUFFIXES,
    WWW_LABEL,
    classify_host,
    normalize_labels,
)


DEFAULT_QUERY_PARAM = 'blog'

_ROUTABLE_LABEL = re.compile(r'^[A-Za-z0-9_-]{1,63}$')


class InvalidTenantLabel(ValueError):
    pass


@dataclass(frozen=True)
class CurrentOrigin:
    protocol: str
    hostname: str
    host: str
    search: str = ''

    @property
    def scheme(self) -> str:
        return self.protocol.rstrip(':') or 'https'

    @property
    def origin(self) -> str:
        return f'{self.scheme}://{self.host}'

    @property
    def port_suffix(self) -> str:
        if self.host.startswith('['):
            tail = self.host[self.host.find(']') + 1 :]
            return tail if tail.startswith(':') else ''
        _, sep, port = self.host.partition(':')
        return f':{port}' if sep else ''

    @classmethod
    def from_url(cls, url: str) -> CurrentOrigin:
        parts = urlsplit(url)
        protocol = f'{parts.scheme or "https"}:'
        host = parts.netloc.rsplit('@', 1)[-1]
        hostname = parts.hostname or ''
        if host.startswith('['):
            hostname = f'[{hostname}]'
        return cls(protocol=protocol, hostname=hostname, host=host, search=parts.query)


@dataclass(frozen=True)
class RoutingModeConfig:
    use_subdomains: bool = False

    @classmethod
    def from_settings(cls, raw: Mapping[str, Any] | None) -> RoutingModeConfig:
        return cls(use_subdomains=bool((raw or {}).get('use_subdomains', False)))


@dataclass(frozen=True)
class PublicUrl:
    url: str
    display_text: str
    mode: Literal['subdomain', 'query']


def is_routable_label(label: str | None) -> bool:
    return bool(label) and bool(_ROUTABLE_LABEL.match(label))


def _strip_www(host: str) -> str:
    prefix = f'{WWW_LABEL}.'
    return host[len(prefix) :] if host.lower().startswith(prefix) else host


def _subdomain_round_trips(
    label: str,
    hostname: str,
    reserved: frozenset[str],
    provider_suffixes: Iterable[str],
) -> bool:
    # Browsers lower-case hostnames, so mixed-case labels only survive in the query form.
    if label != label.lower():
        return False
    classification = classify_host(hostname, reserved_labels=reserved, provider_suffixes=provider_suffixes)
    return classification.candidate_label == label


def _label_free_hostname(hostname: str, reserved: frozenset[str], provider_suffixes: Iterable[str]) -> str:
    # A query link on a host that already carries a tenant label would be
    # shadowed by that label, so walk up until the host yields no candidate.
    host = hostname
    while True:
        classification = classify_host(host, reserved_labels=reserved, provider_suffixes=provider_suffixes)
        if classification.candidate_label is None:
            return host
        host = classification.root_domain


def build_public_url(
    tenant_label: str,
    origin: CurrentOrigin,
    routing_mode: RoutingModeConfig,
    supports_wildcard: bool,
    *,
    reserved_labels: Iterable[str] | None = None,
    provider_suffixes: Iterable[str] = DEFAULT_PROVIDER_SUFFIXES,
    query_param: str = DEFAULT_QUERY_PARAM,
) -> PublicUrl:
    """Build the shareable link to a tenant's public blog.

    Subdomain links are emitted only when the tenant asked for them and the
    current host can serve wildcard subdomains. Every link produced here
    resolves back to ``tenant_label`` through ``resolve_route``; when a
    subdomain link could not, the query form is used instead.
    """
    if not is_routable_label(tenant_label):
        raise InvalidTenantLabel(f'Tenant label {tenant_label!r} cannot be used in a public URL')

    reserved = normalize_labels(reserved_labels)

    if routing_mode.use_subdomains and supports_wildcard:
        root_host = _strip_www(origin.host)
        candidate_host = f'{tenant_label}.{root_host}'
        display_host = f'{tenant_label}.{_strip_www(origin.hostname)}'
        if _subdomain_round_trips(tenant_label, display_host, reserved, provider_suffixes):
            return PublicUrl(
                url=f'{origin.scheme}://{candidate_host}',
                display_text=display_host,
                mode='subdomain',
            )

    hostname = _label_free_hostname(origin.hostname, reserved, provider_suffixes)
    quoted = quote(tenant_label, safe='')
    return PublicUrl(
        url=f'{origin.scheme}://{hostname}{origin.port_suffix}/?{query_param}={quoted}',
        display_text=f'{hostname}/?{query_param}={quoted}',
        mode='query',
    )
