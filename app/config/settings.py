import os
import logging
from dotenv import load_dotenv

logger = logging.getLogger(__name__)


def load_env():
    if os.getenv("ENVIRONMENT") == "production":
        return

    base_dir = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
    env_path = os.path.join(base_dir, ".env")

    if os.path.exists(env_path):
        load_dotenv(env_path)
    else:
        logger.info("No .env file found, using environment variables")


def _optional_float(name):
    value = os.getenv(name)
    return float(value) if value else None


# Load env now
load_env()

# Spotify credentials (client-credentials flow)
CLIENT_ID = os.getenv("SPOTIFY_CLIENT_ID")
CLIENT_SECRET = os.getenv("SPOTIFY_CLIENT_SECRET")

# Spotify endpoints
SPOTIFY_TOKEN_URL = os.getenv("SPOTIFY_TOKEN_URL", "https://accounts.spotify.com/api/token")
SPOTIFY_API_BASE = os.getenv("SPOTIFY_API_BASE", "https://api.spotify.com/v1")
SPOTIFY_HTTP_TIMEOUT = _optional_float("SPOTIFY_HTTP_TIMEOUT")

# Seconds subtracted from expires_in when caching a token
TOKEN_EXPIRY_MARGIN = int(os.getenv("TOKEN_EXPIRY_MARGIN", "60"))
SEARCH_LIMIT = 10

# Server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT") or "8080")
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
