"""
Request Context
Immutable per-request view of the inbound request, built once from the Django request
"""
from dataclasses import dataclass
from typing import Dict, List
from urllib.parse import parse_qs, unquote
from .configuration import Configuration
from .urlmodel import site_path

# WSGI environ keys set by in-process callers (task runners, management
# commands). Clients cannot inject these: HTTP headers arrive as HTTP_*.
BACKGROUND_JOB_ENVIRON_KEY = 'hide_login.background_job'
CLI_ENVIRON_KEY = 'hide_login.cli'

PLACEHOLDER_PATH = '/' + '-/' * 10


@dataclass(frozen=True)
class RequestContext:
    decoded_path: str
    query_string: str = ''
    referer: str = ''
    is_secure: bool = False
    is_authenticated: bool = False
    is_admin_context: bool = False
    is_background_job: bool = False
    is_cli: bool = False
    is_api_call: bool = False

    @property
    def query(self) -> Dict[str, List[str]]:
        return parse_qs(self.query_string, keep_blank_values=True)

    @property
    def has_exemption(self) -> bool:
        return self.is_background_job or self.is_cli or self.is_api_call

    @classmethod
    def from_request(cls, request, config: Configuration) -> 'RequestContext':
        """
        Snapshot the parts of a Django request the classifier and guard need.

        The path is decoded once more on top of Django's own decoding so that
        double-encoded login paths still match. A request without a session
        counts as unauthenticated.
        """
        decoded_path = unquote(request.path)
        untrailed = decoded_path.rstrip('/')
        admin_root = site_path(config, config.admin_prefix)

        session = getattr(request, 'session', None)
        is_authenticated = bool(session is not None and session.get('authenticated'))

        return cls(
            decoded_path=decoded_path,
            query_string=request.META.get('QUERY_STRING', ''),
            referer=request.META.get('HTTP_REFERER', ''),
            is_secure=request.is_secure(),
            is_authenticated=is_authenticated,
            is_admin_context=untrailed == admin_root or decoded_path.startswith(admin_root + '/'),
            is_background_job=bool(request.META.get(BACKGROUND_JOB_ENVIRON_KEY)),
            is_cli=bool(request.META.get(CLI_ENVIRON_KEY)),
            is_api_call=untrailed in {site_path(config, p) for p in config.exempt_paths},
        )

