"""
Simple Authentication Views
The site's real login endpoint; clients only ever reach it through the login alias
"""
from django.shortcuts import render, redirect
from django.urls import reverse
from django.contrib import messages
from django.conf import settings
from django.utils.crypto import constant_time_compare
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.http import require_http_methods
from django.views.decorators.csrf import csrf_protect
import logging

logger = logging.getLogger(__name__)


def _safe_redirect_target(request):
    """redirect_to from the request if it stays on this host, else the admin root"""
    target = request.POST.get('redirect_to') or request.GET.get('redirect_to')
    if target and url_has_allowed_host_and_scheme(
        target,
        allowed_hosts={request.get_host()},
        require_https=request.is_secure(),
    ):
        return target
    return reverse('dashboard:index')


@csrf_protect
@require_http_methods(["GET", "POST"])
def login_page(request):
    """Single entry point, dispatched on method and `action` like the classic login script"""
    if request.GET.get('action') == 'logout':
        return logout(request)

    if request.method == 'POST':
        return login(request)

    return show_login(request)


def show_login(request):
    """Display login page"""
    # Already authenticated: go where the login was meant to lead
    if request.session.get('authenticated'):
        return redirect(_safe_redirect_target(request))

    return render(request, 'auth/simple-login.html', {
        'redirect_to': request.GET.get('redirect_to', ''),
    })


def login(request):
    """Handle login - username/password authentication"""
    username = request.POST.get('username', '').strip()
    password = request.POST.get('password', '')

    if not username or not password:
        messages.error(request, 'Username and password are required')
        return redirect('login')

    valid_username = settings.DASHBOARD_USERNAME
    valid_password = settings.DASHBOARD_PASSWORD

    if constant_time_compare(username, valid_username) and constant_time_compare(password, valid_password):
        request.session.cycle_key()
        request.session['authenticated'] = True
        request.session['username'] = username
        request.session.set_expiry(settings.SESSION_COOKIE_AGE)

        logger.info(f'User logged in: {username}')
        messages.success(request, 'Welcome back!')

        return redirect(_safe_redirect_target(request))
    else:
        logger.warning(f'Failed login attempt: {username}')
        messages.error(request, 'Invalid credentials.')
        return redirect('login')


@require_http_methods(["POST"])
def logout(request):
    """Handle logout"""
    username = request.session.get('username', 'Unknown')
    request.session.flush()

    logger.info(f'User logged out: {username}')
    messages.success(request, 'You have been logged out.')

    return redirect('login')
