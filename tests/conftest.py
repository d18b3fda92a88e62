"""Shared test fixtures."""

from dataclasses import replace

import pytest
from django.core.cache import cache

from apps.hide_login.configuration import Configuration, RoutingStyle
from apps.hide_login.context import RequestContext


@pytest.fixture(autouse=True)
def clear_option_cache():
    """Stored options are cached; every test starts from an empty cache."""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def config() -> Configuration:
    """Clean routing with trailing slashes, alias `signin`, redirect `404`."""
    return Configuration()


@pytest.fixture
def query_config(config: Configuration) -> Configuration:
    return replace(config, routing=RoutingStyle.QUERY_BASED)


@pytest.fixture
def make_request():
    """Build a RequestContext; admin context follows the path unless given."""

    def _make(path: str, query: str = '', **flags) -> RequestContext:
        flags.setdefault('is_admin_context', path.rstrip('/') == '/wp-admin' or path.startswith('/wp-admin/'))
        return RequestContext(
            decoded_path=path,
            query_string=query,
            **flags,
        )

    return _make


@pytest.fixture
def authenticated_client(client):
    """Test client carrying the session flag the login view sets."""
    session = client.session
    session['authenticated'] = True
    session['username'] = 'admin'
    session.save()
    return client
