# app/main.py
import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings

# === Import Routers ===
from app.api.spotify_catalog_api import router as catalog_router
from app.services.errors import SpotifyProxyError

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Spotify Catalog Proxy",
    description=(
        "Search tracks and fetch track details from Spotify "
        "without exposing the client credentials to the browser."
    ),
    version="1.0.0"
)

# === CORS Middleware ===
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["*"],
)


# === Error bodies: {"error": "..."} ===
@app.exception_handler(SpotifyProxyError)
async def handle_proxy_error(request: Request, exc: SpotifyProxyError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def handle_request_validation_error(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    return JSONResponse(status_code=400, content={"error": message})


# === Spotify catalog API ===
app.include_router(catalog_router, prefix="/api", tags=["Spotify Catalog"])


@app.get("/")
def root():
    return {
        "status": "ok",
        "message": "Spotify catalog proxy running"
    }


def run():
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
