"""
Login link filter for navigation links
"""
from urllib.parse import urlsplit
from .configuration import Configuration
from .urlmodel import admin_url, untrailingslashit

NOT_FOUND_PLACEHOLDER = '#'


def filter_login_link(
    candidate: str,
    is_not_found: bool,
    force_reauth: bool,
    redirect: str,
    config: Configuration,
) -> str:
    """
    Final say on a login link rendered into a page.

    Not-found pages never advertise the login URL. A forced re-auth that
    would land on the settings-save endpoint goes to the admin root instead.
    """
    if is_not_found:
        return NOT_FOUND_PLACEHOLDER

    if not force_reauth or not redirect:
        return candidate

    target = redirect.split('?', 1)[0]
    try:
        target_path = urlsplit(target).path
    except ValueError:
        return candidate

    if untrailingslashit(target_path) == untrailingslashit(config.settings_save_path):
        return admin_url(config)

    return candidate
