# bestseatosky/app/core/middleware.py
import logging

from django.conf import settings
from django.http import HttpResponsePermanentRedirect

logger = logging.getLogger(__name__)

# Crawlers fetch these from whatever host they were given
UNREDIRECTED_PATHS = ('/robots.txt', '/sitemap.xml', '/favicon.ico')


class CanonicalHostMiddleware:
    """
    Permanently redirects every request that does not arrive on
    CANONICAL_HOST (or a CANONICAL_HOST_EXEMPT development host) to the
    canonical host, keeping path and query string.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        canonical_host = settings.CANONICAL_HOST
        exempt_hosts = getattr(settings, 'CANONICAL_HOST_EXEMPT', [])
        # Raw header on purpose: get_host() would reject unknown hosts before we can redirect them.
        # Without a Host header, fall back to SERVER_NAME as get_host() does.
        host = request.META.get('HTTP_HOST') or request.META.get('SERVER_NAME', '')

        if host != canonical_host and host not in exempt_hosts and not self._is_unredirected(request.path):
            scheme = getattr(settings, 'CANONICAL_SCHEME', 'https')
            target = f"{scheme}://{canonical_host}{request.get_full_path()}"
            logger.debug(f"[CanonicalHostMiddleware] Redirecting {host}{request.path} to {target}")
            return HttpResponsePermanentRedirect(target)

        return self.get_response(request)

    @staticmethod
    def _is_unredirected(path):
        static_url = '/' + settings.STATIC_URL.lstrip('/')
        return path in UNREDIRECTED_PATHS or path.startswith(static_url)
