"""
URL Model
Pure helpers for building and normalizing the alias, redirect and admin URLs
"""
from typing import Optional
from urllib.parse import urlsplit, urlunsplit
from .configuration import Configuration, RoutingStyle


def trailingslashit(value: str) -> str:
    return value.rstrip('/') + '/'


def untrailingslashit(value: str) -> str:
    return value.rstrip('/')


def user_trailingslashit(value: str, config: Configuration) -> str:
    """Apply the site's trailing-slash convention to a path or URL"""
    if config.trailing_slashes:
        return trailingslashit(value)
    return untrailingslashit(value)


def normalize_path(path: str, config: Configuration) -> str:
    """
    Bring a path into the form the site routes it in.

    Under query-based routing slugs travel as query parameters, so the path
    itself is left alone.
    """
    if config.routing is RoutingStyle.QUERY_BASED:
        return path
    return user_trailingslashit(path, config)


def home_url(config: Configuration, scheme: Optional[str] = None) -> str:
    """Site root with a trailing slash; scheme only applies to absolute home URLs"""
    url = trailingslashit(config.home_url)
    parts = urlsplit(url)
    if scheme and parts.netloc:
        url = urlunsplit((scheme, parts.netloc, parts.path, parts.query, parts.fragment))
    return url


def home_path(config: Configuration, slug: str = '') -> str:
    """Site-relative path of a slug, without trailing slash"""
    return untrailingslashit(urlsplit(home_url(config)).path + slug)


def site_path(config: Configuration, path: str) -> str:
    """A root-relative setting such as `/wp-login.php` placed under the home path"""
    return home_path(config, path.lstrip('/'))


def build_slug_url(slug: str, config: Configuration, scheme: Optional[str] = None) -> str:
    url = home_url(config, scheme)
    if config.routing is RoutingStyle.CLEAN:
        return user_trailingslashit(url + slug, config)
    return f"{url}?{slug}"


def build_login_url(config: Configuration, scheme: Optional[str] = None) -> str:
    return build_slug_url(config.login_slug, config, scheme)


def build_redirect_url(config: Configuration, scheme: Optional[str] = None) -> str:
    return build_slug_url(config.redirect_slug, config, scheme)


def admin_url(config: Configuration, path: str = '') -> str:
    """URL inside the administrative area, e.g. admin_url(config, 'options.php')"""
    return home_url(config) + config.admin_prefix.strip('/') + '/' + path.lstrip('/')


def real_login_url(config: Configuration) -> str:
    """Unfiltered URL of the built-in login endpoint"""
    return home_url(config) + config.real_login_path.lstrip('/')
