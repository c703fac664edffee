# app/services/spotify_catalog_service.py
import logging
from functools import lru_cache
from typing import Any, Dict, Optional
from urllib.parse import quote

import requests
from pydantic import ValidationError as PydanticValidationError

from app.config import settings
from app.models.catalog_models import SearchResult
from app.models.token_model import SpotifyToken
from app.services.errors import ParseError, UpstreamError, UpstreamRequestError
from app.services.http_session import get_http_session

logger = logging.getLogger(__name__)


class SpotifyCatalogClient:
    def __init__(
        self,
        session: Optional[requests.Session] = None,
        api_base: str = settings.SPOTIFY_API_BASE,
        search_limit: int = settings.SEARCH_LIMIT,
        timeout: Optional[float] = None,
    ):
        self.session = session or requests.Session()
        self.api_base = api_base.rstrip("/")
        self.search_limit = search_limit
        self.timeout = timeout

    # --------- Spotify API Wrapper ---------
    def _spotify_get(
        self,
        token: SpotifyToken,
        path: str,
        params: Optional[Dict] = None,
        failure_message: Optional[str] = None,
    ) -> Any:
        url = f"{self.api_base}/{path}"
        headers = {"Authorization": token.authorization_header}

        try:
            r = self.session.get(url, headers=headers, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"Spotify request to {path} failed: {e}")
            raise UpstreamRequestError(failure_message) from e

        if r.status_code != 200:
            logger.warning(f"Spotify returned {r.status_code} for {path}")
            raise UpstreamError(status_code=r.status_code)

        try:
            return r.json()
        except ValueError as e:
            logger.error(f"Spotify returned malformed JSON for {path}: {e}")
            raise ParseError() from e

    # --------- Search ---------
    def search_tracks(self, token: SpotifyToken, query: str) -> SearchResult:
        data = self._spotify_get(
            token,
            "search",
            params={"q": query, "type": "track", "limit": self.search_limit},
            failure_message="Failed to search tracks",
        )

        try:
            return SearchResult.model_validate(data)
        except PydanticValidationError as e:
            logger.error(f"Unexpected search response shape: {e}")
            raise ParseError() from e

    # --------- Track Details ---------
    def get_track(self, token: SpotifyToken, track_id: str) -> Dict[str, Any]:
        data = self._spotify_get(
            token,
            f"tracks/{quote(track_id, safe='')}",
            failure_message="Failed to get track details",
        )

        # passthrough, but it has to be a JSON object
        if not isinstance(data, dict):
            logger.error(f"Track {track_id} response is not a JSON object")
            raise ParseError()

        return data


@lru_cache
def get_catalog_client() -> SpotifyCatalogClient:
    return SpotifyCatalogClient(
        session=get_http_session(),
        api_base=settings.SPOTIFY_API_BASE,
        search_limit=settings.SEARCH_LIMIT,
        timeout=settings.SPOTIFY_HTTP_TIMEOUT,
    )
