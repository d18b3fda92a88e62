"""
Dashboard Views
The administrative area guarded by the hide login middleware
"""
from django.shortcuts import render, redirect
from django.http import JsonResponse
from django.views.decorators.http import require_http_methods
from django.views.decorators.csrf import csrf_exempt
from apps.hide_login.middleware import get_request_state
from apps.hide_login.urlmodel import build_login_url
import logging

logger = logging.getLogger(__name__)


def index(request):
    """Admin home"""
    state = get_request_state(request)
    context = {
        'username': request.session.get('username', ''),
        'login_url': build_login_url(state.config),
    }
    return render(request, 'dashboard/index.html', context)


@csrf_exempt
@require_http_methods(["GET", "POST"])
def admin_ajax(request):
    """
    Background AJAX endpoint
    Reachable without a session so front-end polling keeps working
    """
    action = request.POST.get('action') or request.GET.get('action', '')
    authenticated = bool(request.session.get('authenticated'))

    if action == 'heartbeat':
        return JsonResponse({
            'success': True,
            'authenticated': authenticated,
        })

    logger.debug(f"Unknown admin-ajax action: {action!r}")
    return JsonResponse({
        'success': False,
        'error': f'Unknown action: {action}'
    }, status=400)


@require_http_methods(["POST"])
def admin_post(request):
    """Form submission endpoint for public forms; answers with a redirect home"""
    action = request.POST.get('action', '')
    logger.info(f"admin-post action received: {action!r}")
    return redirect('home')
