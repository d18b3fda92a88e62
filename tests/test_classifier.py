"""Tests for request classification."""

from dataclasses import replace

import pytest
from django.test import RequestFactory

from apps.hide_login.classifier import Disposition, classify
from apps.hide_login.configuration import Configuration
from apps.hide_login.context import RequestContext
from apps.hide_login.urlmodel import build_login_url


class TestClassifyCleanRouting:
    """classify() with clean routing, alias `signin`."""

    @pytest.mark.parametrize('path', ['/signin/', '/signin'])
    def test__alias_path__is_alias_login(self, config, make_request, path) -> None:
        """Trailing slash differences do not affect matching."""
        assert classify(make_request(path), config) is Disposition.ALIAS_LOGIN

    @pytest.mark.parametrize('path', ['/wp-login.php', '/wp-login.php/', '/wp-login'])
    def test__real_login_path__is_disguised(self, config, make_request, path) -> None:
        assert classify(make_request(path), config) is Disposition.REAL_LOGIN_DISGUISED

    def test__real_login_in_admin_context__is_not_disguised(self, config, make_request) -> None:
        """Admin-internal requests are never treated as the disguised login flow."""
        request = make_request('/wp-login.php', is_admin_context=True)

        assert classify(request, config) is Disposition.PROTECTED_ADMIN

    @pytest.mark.parametrize('path', ['/wp-admin/', '/wp-admin', '/wp-admin/options-general.php'])
    def test__admin_paths__are_protected(self, config, make_request, path) -> None:
        assert classify(make_request(path), config) is Disposition.PROTECTED_ADMIN

    @pytest.mark.parametrize('path', ['/', '/about/', '/signin-help/', '/blog/wp-login.php.bak', '/404/'])
    def test__other_paths__pass_through(self, config, make_request, path) -> None:
        assert classify(make_request(path), config) is Disposition.PASSTHROUGH

    def test__bare_query_parameter__ignored_under_clean_routing(self, config, make_request) -> None:
        assert classify(make_request('/', 'signin'), config) is Disposition.PASSTHROUGH

    def test__built_login_url__round_trips_to_alias(self, config, make_request) -> None:
        assert classify(make_request(build_login_url(config)), config) is Disposition.ALIAS_LOGIN


class TestClassifyQueryRouting:
    """classify() with query-based routing."""

    def test__empty_alias_parameter__is_alias_login(self, query_config, make_request) -> None:
        assert classify(make_request('/', 'signin'), query_config) is Disposition.ALIAS_LOGIN

    def test__empty_alias_parameter_with_others__is_alias_login(self, query_config, make_request) -> None:
        request = make_request('/', 'signin=&action=lostpassword')

        assert classify(request, query_config) is Disposition.ALIAS_LOGIN

    def test__alias_parameter_with_value__passes_through(self, query_config, make_request) -> None:
        assert classify(make_request('/', 'signin=abc'), query_config) is Disposition.PASSTHROUGH

    def test__built_login_url__round_trips_to_alias(self, query_config, make_request) -> None:
        path, _, query = build_login_url(query_config).partition('?')

        assert classify(make_request(path, query), query_config) is Disposition.ALIAS_LOGIN


class TestClassifyCollision:
    """An alias equal to the real login path degrades to passthrough."""

    @pytest.fixture
    def collided(self, config: Configuration) -> Configuration:
        return replace(config, login_slug='wp-login')

    def test__collision__detected(self, collided) -> None:
        assert collided.has_collision

    @pytest.mark.parametrize('path', ['/wp-login', '/wp-login/', '/wp-login.php'])
    def test__login_paths__pass_through(self, collided, make_request, path) -> None:
        assert classify(make_request(path), collided) is Disposition.PASSTHROUGH

    def test__admin__still_protected(self, collided, make_request) -> None:
        assert classify(make_request('/wp-admin/'), collided) is Disposition.PROTECTED_ADMIN


class TestClassifySubdirectoryHome:
    """A site installed under `/blog/` matches every path relative to it."""

    @pytest.fixture
    def blog(self, config: Configuration) -> Configuration:
        return replace(config, home_url='/blog/')

    @pytest.mark.parametrize('path', ['/blog/wp-login.php', '/blog/wp-login.php/', '/blog/wp-login'])
    def test__real_login_under_home__is_disguised(self, blog, make_request, path) -> None:
        assert classify(make_request(path), blog) is Disposition.REAL_LOGIN_DISGUISED

    def test__alias_under_home__is_alias_login(self, blog, make_request) -> None:
        assert classify(make_request('/blog/signin/'), blog) is Disposition.ALIAS_LOGIN

    def test__real_login_outside_home__passes_through(self, blog, make_request) -> None:
        assert classify(make_request('/wp-login.php'), blog) is Disposition.PASSTHROUGH

    def test__admin_under_home__is_admin_context(self, blog) -> None:
        context = RequestContext.from_request(RequestFactory().get('/blog/wp-admin/'), blog)

        assert context.is_admin_context is True
        assert classify(context, blog) is Disposition.PROTECTED_ADMIN

    def test__exempt_path_under_home__is_api_call(self, blog) -> None:
        context = RequestContext.from_request(RequestFactory().post('/blog/wp-admin/admin-ajax.php'), blog)

        assert context.is_api_call is True


class TestRequestContextFromRequest:
    """RequestContext.from_request() on Django requests."""

    def test__percent_encoded_login_path__is_disguised(self, config) -> None:
        """Encoding tricks do not bypass the real login match."""
        request = RequestFactory().get('/wp-login%2Ephp')

        context = RequestContext.from_request(request, config)

        assert context.decoded_path == '/wp-login.php'
        assert classify(context, config) is Disposition.REAL_LOGIN_DISGUISED

    def test__double_encoded_login_path__is_disguised(self, config) -> None:
        request = RequestFactory().get('/wp-login%252Ephp')

        context = RequestContext.from_request(request, config)

        assert classify(context, config) is Disposition.REAL_LOGIN_DISGUISED

    def test__no_session__is_unauthenticated(self, config) -> None:
        """A missing authentication signal fails closed."""
        context = RequestContext.from_request(RequestFactory().get('/wp-admin/'), config)

        assert context.is_authenticated is False
        assert context.is_admin_context is True

    def test__exempt_path__is_api_call(self, config) -> None:
        context = RequestContext.from_request(RequestFactory().post('/wp-admin/admin-ajax.php'), config)

        assert context.is_api_call is True
        assert context.has_exemption is True

    def test__client_header__does_not_grant_exemption(self, config) -> None:
        """Exemptions come from the WSGI environ, never from HTTP headers."""
        request = RequestFactory().get('/wp-admin/', HTTP_HIDE_LOGIN_CLI='1')

        context = RequestContext.from_request(request, config)

        assert context.has_exemption is False

    def test__environ_markers__set_exemptions(self, config) -> None:
        request = RequestFactory().get('/wp-admin/', **{
            'hide_login.cli': '1',
            'hide_login.background_job': '1',
        })

        context = RequestContext.from_request(request, config)

        assert context.is_cli is True
        assert context.is_background_job is True

    def test__referer_and_query__are_captured(self, config) -> None:
        request = RequestFactory().get('/signin/', {'action': 'register'}, HTTP_REFERER='http://testserver/')

        context = RequestContext.from_request(request, config)

        assert context.query_string == 'action=register'
        assert context.referer == 'http://testserver/'
        assert context.query == {'action': ['register']}
