# app/services/errors.py
"""
Errors raised by the token cache and catalog client.

Each carries the HTTP status and message the API layer returns as
{"error": message}.
"""


class SpotifyProxyError(Exception):
    status_code = 500
    message = "Internal Server Error"

    def __init__(self, message=None, status_code=None):
        self.message = message or self.message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class ValidationError(SpotifyProxyError):
    status_code = 400
    message = "Invalid request"


class AuthError(SpotifyProxyError):
    message = "Failed to authenticate with Spotify"


class ConfigError(AuthError):
    """Client id or secret not configured."""


class UpstreamError(SpotifyProxyError):
    """Spotify answered with a non-200 status; status_code is that status."""
    message = "Spotify API error"


class UpstreamRequestError(SpotifyProxyError):
    """The request never got an answer (connection refused, DNS, timeout...)."""
    message = "Failed to reach Spotify"


class ParseError(SpotifyProxyError):
    message = "Failed to parse response"
