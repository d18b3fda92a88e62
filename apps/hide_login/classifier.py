"""
Request Classifier
Decides how an inbound request relates to the real login path, the alias and the admin area
"""
from enum import Enum
from typing import Dict, List
from .configuration import Configuration, RoutingStyle
from .context import RequestContext
from .urlmodel import home_path, site_path, untrailingslashit


class Disposition(Enum):
    REAL_LOGIN_DISGUISED = 'real_login_disguised'
    ALIAS_LOGIN = 'alias_login'
    PROTECTED_ADMIN = 'protected_admin'
    PASSTHROUGH = 'passthrough'


def is_real_login_path(path: str, config: Configuration) -> bool:
    """Match the real login path, with or without its extension and trailing slash"""
    candidate = untrailingslashit(path)
    real = site_path(config, config.real_login_path)
    if candidate == real:
        return True
    stem, dot, _ = real.rpartition('.')
    return bool(dot) and candidate == stem


def is_alias_path(path: str, config: Configuration) -> bool:
    return untrailingslashit(path) == home_path(config, config.login_slug)


def has_alias_query(query: Dict[str, List[str]], config: Configuration) -> bool:
    """`?signin` with an empty value selects the login page under query-based routing"""
    if config.routing is not RoutingStyle.QUERY_BASED:
        return False
    values = query.get(config.login_slug)
    return values is not None and not any(values)


def classify(request: RequestContext, config: Configuration) -> Disposition:
    """
    Classify a request, first match wins:

    1. the real login path outside the admin area is disguised
    2. the alias path (or the bare alias query parameter) is the login page
    3. anything under the admin prefix is protected
    4. everything else passes through

    A configuration whose alias collides with the real login path skips the
    first two steps, so the alias can never loop onto itself.
    """
    if not config.has_collision:
        if is_real_login_path(request.decoded_path, config) and not request.is_admin_context:
            return Disposition.REAL_LOGIN_DISGUISED

        if is_alias_path(request.decoded_path, config) or has_alias_query(request.query, config):
            return Disposition.ALIAS_LOGIN

    if request.is_admin_context:
        return Disposition.PROTECTED_ADMIN

    return Disposition.PASSTHROUGH
