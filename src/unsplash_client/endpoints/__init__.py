"""Request/response handler pairs for each supported Unsplash API operation."""

from . import collections, photos, search, users

__all__ = ["collections", "photos", "search", "users"]
