"""
Outbound URL Rewriter
Replaces links to the real login path with the alias before they reach the client
"""
from dataclasses import dataclass
from typing import List, Tuple
from urllib.parse import parse_qsl, quote, unquote, urlsplit
from .classifier import is_real_login_path
from .configuration import Configuration
from .urlmodel import build_login_url
import logging

logger = logging.getLogger(__name__)

POSTPASS_ACTION = 'postpass'
LOGIN_PARAM = 'login'


@dataclass(frozen=True)
class RewriteDecision:
    rewrite: bool
    result_url: str


def targets_real_login(url: str, config: Configuration) -> bool:
    try:
        path = urlsplit(url).path
    except ValueError:
        return False
    return is_real_login_path(unquote(path), config)


def add_query_args(url: str, pairs: List[Tuple[str, str]]) -> str:
    """Append query pairs to a URL that may already carry a query, like `/?signin`"""
    if not pairs:
        return url

    encoded = []
    for key, value in pairs:
        # login carries user input (emails, spaces) so every reserved char is escaped
        safe = '' if key == LOGIN_PARAM else '/:@,'
        encoded.append(f"{quote(key, safe='')}={quote(value, safe=safe)}")

    separator = '&' if '?' in url else '?'
    return url + separator + '&'.join(encoded)


def decide_rewrite(url: str, referer: str, secure: bool, config: Configuration) -> RewriteDecision:
    """
    Decide whether an outbound URL leaks the real login path.

    Never raises: a URL that cannot be parsed is returned as is.
    """
    unchanged = RewriteDecision(False, url)

    if config.has_collision:
        return unchanged

    try:
        parts = urlsplit(url)
        pairs = parse_qsl(parts.query, keep_blank_values=True)
    except ValueError:
        logger.debug(f"Leaving unparsable URL untouched: {url!r}")
        return unchanged

    if not is_real_login_path(unquote(parts.path), config):
        return unchanged

    if ('action', POSTPASS_ACTION) in pairs:
        return unchanged

    # The real login page rendering its own links must not bounce back and forth
    if referer and targets_real_login(referer, config):
        return unchanged

    scheme = 'https' if secure else None
    result = add_query_args(build_login_url(config, scheme), pairs)
    if parts.fragment:
        result += '#' + parts.fragment

    logger.debug(f"Rewrote login URL {url!r} -> {result!r}")
    return RewriteDecision(True, result)


def rewrite(url: str, referer: str, secure: bool, config: Configuration) -> str:
    return decide_rewrite(url, referer, secure, config).result_url


def rewrite_location(location: str, referer: str, secure: bool, config: Configuration) -> str:
    """Filter a redirect Location header; third-party login URLs pass through"""
    if any(location.startswith(exempt) for exempt in config.rewrite_exempt_urls):
        return location
    return rewrite(location, referer, secure, config)
