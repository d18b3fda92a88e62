"""
Access Guard
Keeps unauthenticated clients out of the admin area and canonicalizes the alias URL
"""
from dataclasses import dataclass
from typing import Optional, Union
from .configuration import Configuration, RoutingStyle
from .context import RequestContext
from .urlmodel import build_login_url, build_redirect_url, site_path, untrailingslashit, user_trailingslashit


@dataclass(frozen=True)
class Allow:
    pass


@dataclass(frozen=True)
class RedirectTo:
    url: str


ALLOW = Allow()

Decision = Union[Allow, RedirectTo]


def targets_settings_save(request: RequestContext, config: Configuration) -> bool:
    return untrailingslashit(request.decoded_path) == site_path(config, config.settings_save_path)


def decide(request: RequestContext, config: Configuration) -> Decision:
    """
    Access decision for a protected admin request.

    A RedirectTo must end the request: the caller sends the redirect and runs
    nothing else.
    """
    if request.is_authenticated:
        return ALLOW

    if request.has_exemption or targets_settings_save(request, config):
        return ALLOW

    return RedirectTo(build_redirect_url(config))


def canonical_login_redirect(request: RequestContext, config: Configuration) -> Optional[RedirectTo]:
    """Redirect `/signin` to `/signin/` (or the reverse), keeping the query string verbatim"""
    if config.routing is not RoutingStyle.CLEAN:
        return None

    path = request.decoded_path
    if path == user_trailingslashit(path, config):
        return None

    url = build_login_url(config)
    if request.query_string:
        url += '?' + request.query_string
    return RedirectTo(url)
