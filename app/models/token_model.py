# app/models/token_model.py
from pydantic import BaseModel


class SpotifyToken(BaseModel):
    """Cached client-credentials token. expires_at already has the safety margin applied."""
    access_token: str
    token_type: str = "Bearer"
    expires_at: float   # Unix timestamp

    @property
    def authorization_header(self) -> str:
        return f"{self.token_type} {self.access_token}"

    def is_valid(self, now: float) -> bool:
        return now < self.expires_at


# Body returned by the accounts service token endpoint
class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "Bearer"
    expires_in: int
