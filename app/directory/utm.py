# bestseatosky/app/directory/utm.py
"""
Outbound link decoration.

Every link that leaves the directory (business websites, map directions)
carries UTM parameters so the receiving business can attribute the visit.
"""
import re
from urllib.parse import parse_qsl, quote, urlencode, urlsplit, urlunsplit

DEFAULT_UTM_SOURCE = 'bestseatosky'
DEFAULT_UTM_MEDIUM = 'directory'

_SCHEME_RE = re.compile(r'^https?://', re.IGNORECASE)
_HOST_RE = re.compile(r'^[A-Za-z0-9_](?:[A-Za-z0-9_.-]*[A-Za-z0-9_])?$')


def _normalized_netloc(parts):
    """
    The netloc with its host lowercased and IDNA-encoded, or None when the
    host or port is not usable.
    """
    try:
        # .port raises ValueError for a non-numeric or out-of-range port
        port = parts.port
    except ValueError:
        return None

    hostname = parts.hostname
    if not hostname:
        return None

    userinfo, _, hostport = parts.netloc.rpartition('@')
    if hostport.startswith('['):
        # IPv6 literal, already validated by urlsplit
        host = f'[{hostname}]'
    else:
        try:
            host = hostname.encode('idna').decode('ascii')
        except UnicodeError:
            return None
        if not _HOST_RE.match(host):
            return None

    netloc = f'{userinfo}@{host}' if userinfo else host
    if port is not None:
        netloc = f'{netloc}:{port}'
    return netloc


def build_utm_url(base_url, source=None, medium=None, campaign=None, content=None, term=None):
    """
    Returns base_url with utm_* parameters merged into its query string.

    source and medium fall back to the directory defaults; the other
    parameters are only written when given. A parameter that already exists
    in the URL is overwritten in place. If the URL cannot be parsed even
    after prefixing https://, base_url is returned untouched.
    """
    url_string = base_url or ''
    if not _SCHEME_RE.match(url_string):
        url_string = f'https://{url_string}'

    try:
        parts = urlsplit(url_string)
    except ValueError:
        return base_url

    netloc = _normalized_netloc(parts)
    if netloc is None:
        return base_url

    utm_params = [
        ('utm_source', source if source is not None else DEFAULT_UTM_SOURCE),
        ('utm_medium', medium if medium is not None else DEFAULT_UTM_MEDIUM),
        ('utm_campaign', campaign),
        ('utm_content', content),
        ('utm_term', term),
    ]

    query = parse_qsl(parts.query, keep_blank_values=True)
    for key, value in utm_params:
        if not value:
            continue
        merged = []
        replaced = False
        for existing_key, existing_value in query:
            if existing_key == key:
                if not replaced:
                    merged.append((key, str(value)))
                    replaced = True
                continue
            merged.append((existing_key, existing_value))
        if not replaced:
            merged.append((key, str(value)))
        query = merged

    path = parts.path or '/'
    return urlunsplit((parts.scheme.lower(), netloc, path, urlencode(query), parts.fragment))


def google_maps_directions_url(address):
    """Google Maps search link for a street address."""
    return f"https://www.google.com/maps/search/?api=1&query={quote(address, safe='')}"
