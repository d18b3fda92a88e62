"""
Template tags that keep the real login path out of rendered pages

    {% load hide_login_tags %}
    <a href="{% login_url request.path %}">Log in</a>
    <form action="{% site_url 'wp-login.php' %}" method="post">
"""
from urllib.parse import urlencode
from django import template
from ..login_link import filter_login_link
from ..middleware import get_request_state
from ..rewriter import rewrite
from ..urlmodel import home_url, real_login_url

register = template.Library()


def _is_not_found(request, state) -> bool:
    return state.disguised_login or getattr(request, 'resolver_match', None) is None


@register.simple_tag(takes_context=True)
def site_url(context, path=''):
    """URL of a site path, with login links swapped for the alias"""
    request = context['request']
    state = get_request_state(request)
    url = home_url(state.config) + path.lstrip('/')
    return rewrite(url, state.context.referer, state.context.is_secure, state.config)


@register.simple_tag(takes_context=True)
def login_url(context, redirect='', force_reauth=False):
    """Login link for navigation, optionally bringing the visitor back to `redirect`"""
    request = context['request']
    state = get_request_state(request)

    params = []
    if redirect:
        params.append(('redirect_to', redirect))
    if force_reauth:
        params.append(('reauth', '1'))

    url = real_login_url(state.config)
    if params:
        url += '?' + urlencode(params)

    url = rewrite(url, state.context.referer, state.context.is_secure, state.config)
    return filter_login_link(url, _is_not_found(request, state), bool(force_reauth), redirect, state.config)
