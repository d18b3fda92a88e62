"""
Hide Login Configuration
Typed configuration snapshot and the provider that fills it from settings and stored options
"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple
from django.conf import settings
from django.core.cache import cache
from django.db import DatabaseError
from django.utils.text import slugify
from .models import LoginOption
import logging

logger = logging.getLogger(__name__)

DEFAULT_LOGIN_SLUG = 'signin'
DEFAULT_REDIRECT_SLUG = '404'

LOGIN_SLUG_OPTION = 'hide_login_page'
REDIRECT_SLUG_OPTION = 'hide_login_redirect_admin'
OPTION_NAMES = (LOGIN_SLUG_OPTION, REDIRECT_SLUG_OPTION)

OPTIONS_CACHE_KEY = 'hide_login:options'


class RoutingStyle(str, Enum):
    """How slugs appear in URLs: as a path segment or as a bare query parameter"""
    CLEAN = 'clean'
    QUERY_BASED = 'query'


@dataclass(frozen=True)
class Configuration:
    """Read-only settings snapshot used for the whole lifetime of one request"""
    login_slug: str = DEFAULT_LOGIN_SLUG
    redirect_slug: str = DEFAULT_REDIRECT_SLUG
    routing: RoutingStyle = RoutingStyle.CLEAN
    trailing_slashes: bool = True
    home_url: str = '/'
    real_login_path: str = '/wp-login.php'
    admin_prefix: str = '/wp-admin/'
    settings_save_path: str = '/wp-admin/options.php'
    exempt_paths: Tuple[str, ...] = (
        '/wp-admin/admin-post.php',
        '/wp-admin/admin-ajax.php',
    )
    rewrite_exempt_urls: Tuple[str, ...] = ('https://wordpress.com/wp-login.php',)

    @property
    def has_collision(self) -> bool:
        """True when the alias would resolve to the real login endpoint itself"""
        return slug_collides(self.login_slug, self.real_login_path)


def sanitize_slug(value: Optional[str]) -> str:
    """Reduce a raw setting to a lowercase dash-separated URL token"""
    return slugify(value or '')


def slug_collides(slug: str, real_login_path: str) -> bool:
    alias = '/' + slug.strip('/')
    real = '/' + real_login_path.strip('/')
    stem, dot, _ = real.rpartition('.')
    return alias == real or bool(dot and alias == stem)


class ConfigurationProvider:
    """
    Builds Configuration snapshots.

    Defaults come from the HIDE_LOGIN settings dict; values saved through the
    settings page live in LoginOption rows and win over the defaults. Stored
    options are cached in the default cache until the next save or uninstall.
    """

    def stored_options(self) -> Dict[str, str]:
        options = cache.get(OPTIONS_CACHE_KEY)
        if options is not None:
            return options

        try:
            options = dict(
                LoginOption.objects.filter(name__in=OPTION_NAMES).values_list('name', 'value')
            )
        except DatabaseError as e:
            logger.error(f"Failed to read hide login options: {str(e)}")
            return {}

        cache.set(OPTIONS_CACHE_KEY, options, self._settings().get('CACHE_TIMEOUT', 300))
        return options

    def load(self) -> Configuration:
        """Take a configuration snapshot with defaults filled in explicitly"""
        conf = self._settings()
        options = self.stored_options()

        login_slug = (
            sanitize_slug(options.get(LOGIN_SLUG_OPTION))
            or sanitize_slug(conf.get('LOGIN_SLUG'))
            or DEFAULT_LOGIN_SLUG
        )
        redirect_slug = (
            sanitize_slug(options.get(REDIRECT_SLUG_OPTION))
            or sanitize_slug(conf.get('REDIRECT_SLUG'))
            or DEFAULT_REDIRECT_SLUG
        )

        defaults = Configuration()
        config = Configuration(
            login_slug=login_slug,
            redirect_slug=redirect_slug,
            routing=RoutingStyle(conf.get('ROUTING', RoutingStyle.CLEAN.value)),
            trailing_slashes=bool(getattr(settings, 'APPEND_SLASH', True)),
            home_url=conf.get('HOME_URL', defaults.home_url),
            real_login_path=conf.get('REAL_LOGIN_PATH', defaults.real_login_path),
            admin_prefix=conf.get('ADMIN_PREFIX', defaults.admin_prefix),
            settings_save_path=conf.get('SETTINGS_SAVE_PATH', defaults.settings_save_path),
            exempt_paths=tuple(conf.get('EXEMPT_PATHS', defaults.exempt_paths)),
            rewrite_exempt_urls=tuple(conf.get('REWRITE_EXEMPT_URLS', defaults.rewrite_exempt_urls)),
        )

        if config.has_collision:
            logger.warning(
                f"Login alias '{config.login_slug}' collides with {config.real_login_path}; "
                "login disguising is disabled until the alias is changed"
            )

        return config

    def save(self, login_slug: str, redirect_slug: str) -> None:
        """Persist both slugs and drop the cached copy"""
        values = {
            LOGIN_SLUG_OPTION: sanitize_slug(login_slug),
            REDIRECT_SLUG_OPTION: sanitize_slug(redirect_slug),
        }
        for name, value in values.items():
            LoginOption.objects.update_or_create(name=name, defaults={'value': value})

        self.invalidate()
        logger.info(f"Hide login options saved: {values}")

    def delete_options(self) -> int:
        deleted, _ = LoginOption.objects.filter(name__in=OPTION_NAMES).delete()
        self.invalidate()
        return deleted

    def invalidate(self) -> None:
        cache.delete(OPTIONS_CACHE_KEY)

    @staticmethod
    def _settings() -> dict:
        return getattr(settings, 'HIDE_LOGIN', {})


# Singleton instance
_configuration_provider = None

def get_configuration_provider() -> ConfigurationProvider:
    """Get or create ConfigurationProvider singleton"""
    global _configuration_provider
    if _configuration_provider is None:
        _configuration_provider = ConfigurationProvider()
    return _configuration_provider
