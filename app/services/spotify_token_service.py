import base64
import logging
import threading
import time
from functools import lru_cache
from typing import Callable, Optional

import requests
from pydantic import ValidationError as PydanticValidationError

from app.config import settings
from app.models.token_model import SpotifyToken, TokenResponse
from app.services.errors import AuthError, ConfigError
from app.services.http_session import get_http_session

logger = logging.getLogger(__name__)


class SpotifyTokenCache:
    """
    Process-wide client-credentials token.

    ensure_token() returns the cached token while it is still valid and
    otherwise trades the client id/secret for a new one. Refreshes are
    single-flight: the check and the exchange happen under one lock, so
    concurrent callers on an expired token share a single request.

    A failed refresh leaves the previous token (if any) in place.
    """

    def __init__(
        self,
        client_id: Optional[str],
        client_secret: Optional[str],
        session: Optional[requests.Session] = None,
        token_url: str = settings.SPOTIFY_TOKEN_URL,
        clock: Callable[[], float] = time.time,
        margin: int = settings.TOKEN_EXPIRY_MARGIN,
        timeout: Optional[float] = None,
    ):
        self.client_id = client_id
        self.client_secret = client_secret
        self.session = session or requests.Session()
        self.token_url = token_url
        self.clock = clock
        self.margin = margin
        self.timeout = timeout
        self._token: Optional[SpotifyToken] = None
        self._lock = threading.Lock()

    @property
    def credential(self) -> Optional[SpotifyToken]:
        return self._token

    def invalidate(self) -> None:
        with self._lock:
            self._token = None

    def ensure_token(self) -> SpotifyToken:
        token = self._token
        if token and token.is_valid(self.clock()):
            return token

        with self._lock:
            # another thread may have refreshed while we waited
            token = self._token
            if token and token.is_valid(self.clock()):
                return token

            self._token = self._request_token()
            return self._token

    # --------------------------
    # Client-credentials exchange
    # --------------------------
    def _request_token(self) -> SpotifyToken:
        if not self.client_id or not self.client_secret:
            logger.error("Missing Spotify credentials (SPOTIFY_CLIENT_ID / SPOTIFY_CLIENT_SECRET)")
            raise ConfigError()

        auth = base64.b64encode(f"{self.client_id}:{self.client_secret}".encode()).decode()
        headers = {
            "Authorization": f"Basic {auth}",
            "Content-Type": "application/x-www-form-urlencoded",
        }

        try:
            r = self.session.post(
                self.token_url,
                headers=headers,
                data={"grant_type": "client_credentials"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Token request failed: {e}")
            raise AuthError() from e

        if r.status_code != 200:
            logger.error(f"Failed to get token, status: {r.status_code}")
            raise AuthError()

        try:
            token_data = TokenResponse.model_validate(r.json())
        except (ValueError, PydanticValidationError) as e:
            logger.error(f"Invalid token response: {e}")
            raise AuthError() from e

        now = self.clock()
        logger.info(f"Obtained Spotify access token, expires in {token_data.expires_in}s")
        return SpotifyToken(
            access_token=token_data.access_token,
            token_type=token_data.token_type,
            expires_at=now + token_data.expires_in - self.margin,
        )


@lru_cache
def get_token_cache() -> SpotifyTokenCache:
    return SpotifyTokenCache(
        client_id=settings.CLIENT_ID,
        client_secret=settings.CLIENT_SECRET,
        session=get_http_session(),
        token_url=settings.SPOTIFY_TOKEN_URL,
        margin=settings.TOKEN_EXPIRY_MARGIN,
        timeout=settings.SPOTIFY_HTTP_TIMEOUT,
    )
