import pytest

from newsai.routing.host_classifier import (
    CANDIDATE_KINDS,
    HostKind,
    classify_host,
    strip_port,
    supports_wildcard,
)


RESERVED = {'app', 'admin', 'dashboard', 'api'}


def test_multi_label_domain_yields_first_label() -> None:
    result = classify_host('jean.newsai.fun')

    assert result.kind == HostKind.MULTI_LABEL_DOMAIN
    assert result.candidate_label == 'jean'
    assert result.root_domain == 'newsai.fun'


def test_provider_sandbox_never_yields_candidate() -> None:
    result = classify_host('my-app.netlify.app')

    assert result.kind == HostKind.PROVIDER_SANDBOX
    assert result.candidate_label is None


@pytest.mark.parametrize(
    'hostname',
    ['netlify.app', 'my-app.netlify.app', 'preview.my-app.vercel.app', 'a.b.c.d.vercel.app', 'site--branch.netlify.app'],
)
def test_provider_sandbox_regardless_of_label_count(hostname: str) -> None:
    result = classify_host(hostname, reserved_labels=RESERVED)

    assert result.kind == HostKind.PROVIDER_SANDBOX
    assert result.candidate_label is None


def test_custom_provider_suffixes() -> None:
    result = classify_host('blog.pages.dev', provider_suffixes=('pages.dev',))

    assert result.kind == HostKind.PROVIDER_SANDBOX
    assert result.candidate_label is None


@pytest.mark.parametrize('hostname', ['127.0.0.1', '1.2.3.4', '192.168.0.12', '10.0.0.1:8080'])
def test_ip_literals_never_yield_candidate(hostname: str) -> None:
    result = classify_host(hostname)

    assert result.kind == HostKind.IP_LITERAL
    assert result.candidate_label is None


def test_loopback_with_label() -> None:
    result = classify_host('jean.localhost')

    assert result.kind == HostKind.LOOPBACK_WITH_LABEL
    assert result.candidate_label == 'jean'
    assert result.root_domain == 'localhost'


def test_loopback_with_port() -> None:
    result = classify_host('jean.localhost:3000')

    assert result.kind == HostKind.LOOPBACK_WITH_LABEL
    assert result.candidate_label == 'jean'


@pytest.mark.parametrize('hostname', ['localhost', 'localhost:5173', 'www.localhost', 'admin.localhost'])
def test_loopback_without_usable_label(hostname: str) -> None:
    result = classify_host(hostname, reserved_labels=RESERVED)

    assert result.candidate_label is None
    assert result.kind == HostKind.BARE_ROOT_DOMAIN


@pytest.mark.parametrize('hostname', ['www.example.com', 'www.blog.example.com', 'WWW.example.co.uk'])
def test_www_never_yields_candidate(hostname: str) -> None:
    result = classify_host(hostname, reserved_labels=RESERVED)

    assert result.candidate_label is None
    assert result.reason == 'www'


@pytest.mark.parametrize('hostname', ['example.com', 'newsai.fun', 'jean.fun', 'admin.io'])
def test_two_labels_never_yield_candidate(hostname: str) -> None:
    result = classify_host(hostname, reserved_labels=RESERVED)

    assert result.kind == HostKind.BARE_ROOT_DOMAIN
    assert result.candidate_label is None
    assert result.root_domain == hostname


@pytest.mark.parametrize('label', sorted(RESERVED))
def test_reserved_labels_never_yield_candidate(label: str) -> None:
    result = classify_host(f'{label}.example.com', reserved_labels=RESERVED)

    assert result.candidate_label is None
    assert result.reason == 'reserved_label'


def test_reserved_label_is_a_candidate_when_not_configured() -> None:
    result = classify_host('admin.example.com', reserved_labels=set())

    assert result.candidate_label == 'admin'


@pytest.mark.parametrize(
    ('hostname', 'label', 'root'),
    [
        ('jean.example.com', 'jean', 'example.com'),
        ('my-blog.example.co.uk', 'my-blog', 'example.co.uk'),
        ('Jean.Example.com', 'Jean', 'Example.com'),
        ('x1.app.example.com', 'x1', 'app.example.com'),
        ('localhost.example.com', 'localhost', 'example.com'),
    ],
)
def test_label_plus_root_with_dot_yields_label(hostname: str, label: str, root: str) -> None:
    result = classify_host(hostname, reserved_labels=RESERVED)

    assert result.candidate_label == label
    assert result.root_domain == root


@pytest.mark.parametrize('hostname', ['', None, '   ', '.', 'a..b.com', '.example.com', 'single'])
def test_malformed_hosts_fall_through_without_candidate(hostname) -> None:
    result = classify_host(hostname, reserved_labels=RESERVED)

    assert result.kind == HostKind.BARE_ROOT_DOMAIN
    assert result.candidate_label is None


@pytest.mark.parametrize(
    'hostname',
    ['jean.newsai.fun', 'my-app.netlify.app', '127.0.0.1', 'jean.localhost', 'localhost', 'www.example.com', 'example.com', ''],
)
def test_candidate_present_only_for_candidate_kinds(hostname: str) -> None:
    result = classify_host(hostname, reserved_labels=RESERVED)

    assert (result.candidate_label is not None) == (result.kind in CANDIDATE_KINDS)


@pytest.mark.parametrize('hostname', ['localhost', 'localhost.dev', 'localhost:8080'])
def test_leading_loopback_without_tenant_label(hostname: str) -> None:
    result = classify_host(hostname, reserved_labels=RESERVED)

    assert result.candidate_label is None
    assert result.reason == 'loopback_without_label'


def test_trailing_dot_and_port_are_ignored() -> None:
    assert classify_host('jean.newsai.fun.').candidate_label == 'jean'
    assert classify_host('jean.newsai.fun:8443').candidate_label == 'jean'


def test_strip_port_keeps_ipv6_brackets() -> None:
    assert strip_port('[::1]:8000') == '[::1]'
    assert strip_port('newsai.fun:443') == 'newsai.fun'
    assert classify_host('[::1]:8000').kind == HostKind.IP_LITERAL


@pytest.mark.parametrize(
    ('hostname', 'expected'),
    [
        ('newsai.fun', True),
        ('localhost:3000', True),
        ('www.newsai.fun', True),
        ('my-app.netlify.app', False),
        ('my-app.vercel.app', False),
        ('127.0.0.1', False),
    ],
)
def test_supports_wildcard(hostname: str, expected: bool) -> None:
    assert supports_wildcard(hostname) is expected
