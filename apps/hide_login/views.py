"""
Hide Login Views
Settings page and the settings-save endpoint
"""
from django.http import HttpResponseNotAllowed
from django.shortcuts import render, redirect
from django.contrib import messages
from django.urls import reverse
from django.views.decorators.http import require_http_methods
from .configuration import RoutingStyle, get_configuration_provider
from .forms import HideLoginSettingsForm
from .middleware import get_request_state
from .urlmodel import build_login_url, build_redirect_url, home_url
import logging

logger = logging.getLogger(__name__)


def _settings_context(config, form):
    query_based = config.routing is RoutingStyle.QUERY_BASED
    return {
        'form': form,
        'url_prefix': home_url(config) + ('?' if query_based else ''),
        'url_suffix': '/' if config.trailing_slashes and not query_based else '',
        'login_url': build_login_url(config),
    }


@require_http_methods(["GET"])
def settings_page(request):
    """General settings page with the hide login section"""
    config = get_request_state(request).config
    form = HideLoginSettingsForm(config=config)
    return render(request, 'hide_login/settings.html', _settings_context(config, form))


def settings_save(request):
    """
    Save both slugs.

    The admin guard lets this endpoint through so the form can always post,
    which is why the session is checked here, before the method: anonymous
    callers get the redirect whatever they send.
    """
    state = get_request_state(request)
    if not state.context.is_authenticated:
        logger.warning('Unauthenticated settings save attempt')
        return redirect(build_redirect_url(state.config))

    if request.method != 'POST':
        return HttpResponseNotAllowed(['POST'])

    form = HideLoginSettingsForm(request.POST, config=state.config)
    if not form.is_valid():
        return render(request, 'hide_login/settings.html', _settings_context(state.config, form), status=400)

    provider = get_configuration_provider()
    provider.save(form.cleaned_data['login_slug'], form.cleaned_data['redirect_slug'])

    login_url = build_login_url(provider.load())
    messages.success(request, f'Your login page is now here: {login_url}. Bookmark this page!')

    return redirect(reverse('hide_login:settings') + '?settings-updated=true')
