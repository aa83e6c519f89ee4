from __future__ import annotations

import enum
import re
from collections.abc import Iterable
from dataclasses import dataclass


DEFAULT_PROVIDER_SUFFIXES: tuple[str, ...] = ('netlify.app', 'vercel.app')
DEFAULT_RESERVED_LABELS: frozenset[str] = frozenset({'app', 'admin', 'dashboard', 'api'})

LOOPBACK_LABEL = 'localhost'
WWW_LABEL = 'www'

_IPV4_LITERAL = re.compile(r'^[0-9]+\.[0-9]+\.[0-9]+\.[0-9]+$')


class HostKind(str, enum.Enum):
    PROVIDER_SANDBOX = 'provider_sandbox'
    IP_LITERAL = 'ip_literal'
    LOOPBACK_WITH_LABEL = 'loopback_with_label'
    MULTI_LABEL_DOMAIN = 'multi_label_domain'
    BARE_ROOT_DOMAIN = 'bare_root_domain'


CANDIDATE_KINDS = frozenset({HostKind.LOOPBACK_WITH_LABEL, HostKind.MULTI_LABEL_DOMAIN})


@dataclass(frozen=True)
class HostClassification:
    kind: HostKind
    hostname: str
    root_domain: str
    candidate_label: str | None = None
    reason: str | None = None


def strip_port(host: str) -> str:
    """Drop a ``:port`` suffix, leaving bracketed IPv6 literals intact."""
    if host.startswith('['):
        end = host.find(']')
        return host[: end + 1] if end != -1 else host
    return host.split(':', 1)[0]


def normalize_hostname(hostname: str | None) -> str:
    if not hostname:
        return ''
    host = strip_port(hostname.strip())
    return host.rstrip('.')


def normalize_labels(labels: Iterable[str] | None) -> frozenset[str]:
    if not labels:
        return frozenset()
    return frozenset(item.strip().lower() for item in labels if item and item.strip())


def is_provider_sandbox(hostname: str, provider_suffixes: Iterable[str] = DEFAULT_PROVIDER_SUFFIXES) -> bool:
    host = normalize_hostname(hostname).lower()
    return any(suffix and suffix.lower() in host for suffix in provider_suffixes)


def is_ip_literal(hostname: str) -> bool:
    host = normalize_hostname(hostname)
    if host.startswith('['):
        return True
    return bool(_IPV4_LITERAL.match(host))


def supports_wildcard(hostname: str, provider_suffixes: Iterable[str] = DEFAULT_PROVIDER_SUFFIXES) -> bool:
    # Wildcard subdomains cannot be served from a provider sandbox or a bare IP.
    return not is_provider_sandbox(hostname, provider_suffixes) and not is_ip_literal(hostname)


def _eligible(label: str, reserved: frozenset[str]) -> bool:
    lowered = label.lower()
    return bool(label) and lowered != WWW_LABEL and lowered not in reserved


def classify_host(
    hostname: str | None,
    *,
    reserved_labels: Iterable[str] | None = None,
    provider_suffixes: Iterable[str] = DEFAULT_PROVIDER_SUFFIXES,
) -> HostClassification:
    """Classify a hostname and extract the tenant label its shape allows.

    Rules are applied in a fixed order and the first match wins: provider
    sandbox, IPv4 literal, loopback, then the label-count rules for real
    domains. The function is total; anything unrecognised falls through to
    ``BARE_ROOT_DOMAIN`` without a candidate.
    """
    raw = hostname or ''
    host = normalize_hostname(raw)
    reserved = normalize_labels(reserved_labels)

    if not host:
        return HostClassification(kind=HostKind.BARE_ROOT_DOMAIN, hostname=raw, root_domain='', reason='empty_host')

    if is_provider_sandbox(host, provider_suffixes):
        return HostClassification(
            kind=HostKind.PROVIDER_SANDBOX, hostname=raw, root_domain=host, reason='provider_sandbox'
        )

    if is_ip_literal(host):
        return HostClassification(kind=HostKind.IP_LITERAL, hostname=raw, root_domain=host, reason='ip_literal')

    labels = host.split('.')
    if any(not label for label in labels):
        return HostClassification(
            kind=HostKind.BARE_ROOT_DOMAIN, hostname=raw, root_domain=host, reason='malformed_host'
        )

    lowered = [label.lower() for label in labels]
    # localhost.example.com is a real domain whose first label happens to be "localhost".
    leading_loopback = lowered[0] == LOOPBACK_LABEL
    if LOOPBACK_LABEL in lowered and not (leading_loopback and len(labels) >= 3):
        first = labels[0]
        if len(labels) >= 2 and not leading_loopback and _eligible(first, reserved):
            return HostClassification(
                kind=HostKind.LOOPBACK_WITH_LABEL,
                hostname=raw,
                root_domain='.'.join(labels[1:]),
                candidate_label=first,
            )
        if leading_loopback:
            reason = 'loopback_without_label'
        else:
            reason = 'www' if first.lower() == WWW_LABEL else 'reserved_label'
        return HostClassification(kind=HostKind.BARE_ROOT_DOMAIN, hostname=raw, root_domain=host, reason=reason)

    if len(labels) >= 3:
        first = labels[0]
        root = '.'.join(labels[1:])
        if _eligible(first, reserved):
            return HostClassification(
                kind=HostKind.MULTI_LABEL_DOMAIN,
                hostname=raw,
                root_domain=root,
                candidate_label=first,
            )
        if first.lower() == WWW_LABEL:
            return HostClassification(kind=HostKind.BARE_ROOT_DOMAIN, hostname=raw, root_domain=root, reason='www')
        return HostClassification(
            kind=HostKind.BARE_ROOT_DOMAIN, hostname=raw, root_domain=root, reason='reserved_label'
        )

    reason = 'root_domain' if len(labels) == 2 else 'single_label'
    return HostClassification(kind=HostKind.BARE_ROOT_DOMAIN, hostname=raw, root_domain=host, reason=reason)
