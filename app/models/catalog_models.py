# app/models/catalog_models.py
from pydantic import BaseModel, Field
from typing import List, Optional

# ======================================================
# Search projection (only the fields the frontend uses)
# ======================================================

class AlbumImage(BaseModel):
    url: str = ""


class TrackAlbum(BaseModel):
    name: str = ""
    images: List[AlbumImage] = Field(default_factory=list)


class TrackArtist(BaseModel):
    name: str = ""
    id: str = ""


class SearchTrack(BaseModel):
    name: str = ""
    id: str = ""
    duration_ms: int = 0
    album: TrackAlbum = Field(default_factory=TrackAlbum)
    artists: List[TrackArtist] = Field(default_factory=list)
    preview_url: Optional[str] = None


class SearchTracks(BaseModel):
    items: List[SearchTrack] = Field(default_factory=list)


class SearchResult(BaseModel):
    tracks: SearchTracks = Field(default_factory=SearchTracks)


# ======================================================
# Error body
# ======================================================

class ErrorResponse(BaseModel):
    error: str
