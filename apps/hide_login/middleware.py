"""
Hide Login Middleware
Classifies every request, guards the admin area and rewrites leaked login URLs
"""
from dataclasses import dataclass
from typing import Optional
from django.http import HttpResponseRedirect
from .classifier import Disposition, classify
from .configuration import Configuration, get_configuration_provider
from .context import PLACEHOLDER_PATH, RequestContext
from .guard import RedirectTo, canonical_login_redirect, decide
from .rewriter import rewrite_location
from .urlmodel import user_trailingslashit
import logging

logger = logging.getLogger(__name__)


@dataclass
class RequestState:
    """What the middleware learned about a request, exposed as request.hide_login"""
    context: RequestContext
    config: Configuration
    disposition: Disposition
    disguised_login: bool = False
    original_path: Optional[str] = None


def get_request_state(request) -> RequestState:
    """
    State for a request, built on demand when the middleware did not run
    (template rendering from a bare RequestFactory request, for example).
    """
    state = getattr(request, 'hide_login', None)
    if state is None:
        config = get_configuration_provider().load()
        context = RequestContext.from_request(request, config)
        state = RequestState(context=context, config=config, disposition=classify(context, config))
        request.hide_login = state
    return state


class HideLoginMiddleware:
    """
    Must sit after SessionMiddleware: the session is the authentication signal.
    """

    def __init__(self, get_response):
        self.get_response = get_response
        self.provider = get_configuration_provider()

    def __call__(self, request):
        config = self.provider.load()
        context = RequestContext.from_request(request, config)
        disposition = classify(context, config)

        state = RequestState(context=context, config=config, disposition=disposition)
        request.hide_login = state

        if disposition is Disposition.REAL_LOGIN_DISGUISED:
            logger.info(f"Disguised direct hit on the login endpoint: {context.decoded_path}")
            state.disguised_login = True
            self._substitute_path(request, state, user_trailingslashit(PLACEHOLDER_PATH, config))

        elif disposition is Disposition.ALIAS_LOGIN:
            canonical = canonical_login_redirect(context, config)
            if canonical is not None:
                return HttpResponseRedirect(canonical.url)
            self._substitute_path(request, state, config.real_login_path)

        elif disposition is Disposition.PROTECTED_ADMIN:
            decision = decide(context, config)
            if isinstance(decision, RedirectTo):
                logger.warning(f'Unauthenticated access attempt to: {context.decoded_path}')
                return HttpResponseRedirect(decision.url)

        response = self.get_response(request)
        return self._rewrite_response(response, context, config)

    @staticmethod
    def _substitute_path(request, state: RequestState, path: str) -> None:
        """Point URL resolution at another view without touching the client-visible URL"""
        state.original_path = request.path_info
        script_name = request.META.get('SCRIPT_NAME', '').rstrip('/')
        request.path_info = path
        request.path = script_name + path

    @staticmethod
    def _rewrite_response(response, context: RequestContext, config: Configuration):
        if not response.has_header('Location'):
            return response

        location = response['Location']
        rewritten = rewrite_location(location, context.referer, context.is_secure, config)
        if rewritten != location:
            response['Location'] = rewritten
        return response
