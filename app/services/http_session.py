# app/services/http_session.py
import requests

_cached_session = None

def get_http_session() -> requests.Session:
    """
    Lazy-load the requests.Session shared by the token cache and the
    catalog client, so both reuse the same connection pool.
    """

    global _cached_session

    # Already initialized → return cached session
    if _cached_session is not None:
        return _cached_session

    _cached_session = requests.Session()
    _cached_session.headers.update({"Accept": "application/json"})
    return _cached_session
