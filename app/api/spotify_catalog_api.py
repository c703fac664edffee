# app/api/spotify_catalog_api.py
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query

from app.models.catalog_models import ErrorResponse, SearchResult
from app.services.errors import ValidationError
from app.services.spotify_catalog_service import SpotifyCatalogClient, get_catalog_client
from app.services.spotify_token_service import SpotifyTokenCache, get_token_cache

router = APIRouter()

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.get(
    "/search",
    summary="Search tracks",
    description="Forwards the query to Spotify's track search (10 results) using the server credential.",
    response_model=SearchResult,
    responses=ERROR_RESPONSES,
)
def search_tracks(
    q: Optional[str] = Query(None, description="Search text"),
    token_cache: SpotifyTokenCache = Depends(get_token_cache),
    catalog: SpotifyCatalogClient = Depends(get_catalog_client),
):
    if not q or not q.strip():
        raise ValidationError("query parameter 'q' is required")

    token = token_cache.ensure_token()
    return catalog.search_tracks(token, q)


@router.get("/track", include_in_schema=False)
@router.get("/track/", include_in_schema=False)
def missing_track_id():
    raise ValidationError("track ID is required")


@router.get(
    "/track/{track_id}",
    summary="Track details",
    description="Returns Spotify's track object unchanged.",
    response_model=Dict[str, Any],
    responses=ERROR_RESPONSES,
)
def get_track_details(
    track_id: str,
    token_cache: SpotifyTokenCache = Depends(get_token_cache),
    catalog: SpotifyCatalogClient = Depends(get_catalog_client),
):
    if not track_id.strip():
        raise ValidationError("track ID is required")

    token = token_cache.ensure_token()
    return catalog.get_track(token, track_id)
