__all__ = [
    "ConfigError",
    "DecodingError",
    "UnsplashError",
]


class UnsplashError(Exception):
    """Base exception for all unsplash-client errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigError(UnsplashError):
    """Raised when the client configuration is invalid."""


class DecodingError(UnsplashError):
    """Raised when a response body cannot be decoded."""
