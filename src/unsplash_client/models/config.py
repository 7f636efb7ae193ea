from collections.abc import Mapping
from typing import Any

from pydantic import SecretStr, ValidationError, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from unsplash_client.constants import DEFAULT_API_URL, DEFAULT_API_VERSION
from unsplash_client.exceptions import ConfigError
from unsplash_client.models.params import FetchDefaults

__all__ = ["InitParams", "UnsplashSettings"]


class InitParams(FetchDefaults):
    """
    Client-wide configuration applied to every request.

    Exactly one of ``access_key`` or ``api_url`` must be given: an access key
    talks to the public API directly, a custom URL targets a proxy that adds
    credentials on its own.
    """

    access_key: SecretStr | None = None
    api_url: str | None = None
    api_version: str = DEFAULT_API_VERSION

    @model_validator(mode="after")
    def _check_exclusive_credentials(self) -> "InitParams":
        if self.access_key is not None and self.api_url is not None:
            raise ValueError("`access_key` and `api_url` are mutually exclusive, pass only one")
        if self.access_key is not None and not self.access_key.get_secret_value():
            raise ValueError("`access_key` must not be empty")
        if self.api_url is not None and not self.api_url:
            raise ValueError("`api_url` must not be empty")
        if self.access_key is None and self.api_url is None:
            raise ValueError("One of `access_key` or `api_url` is required")
        return self

    @property
    def effective_api_url(self) -> str:
        return self.api_url or DEFAULT_API_URL

    @classmethod
    def coerce(cls, value: "InitParams | Mapping[str, Any]") -> "InitParams":
        """Validate `value` into InitParams, raising ConfigError when invalid."""
        if isinstance(value, cls):
            return value
        try:
            return cls.model_validate(dict(value))
        except ValidationError as e:
            raise ConfigError(f"Invalid client configuration: {e}") from e


class UnsplashSettings(BaseSettings):
    """Optional environment-backed configuration (``UNSPLASH_*`` variables)."""

    model_config = SettingsConfigDict(env_prefix="UNSPLASH_", env_file=".env", extra="ignore")

    access_key: SecretStr | None = None
    api_url: str | None = None
    api_version: str = DEFAULT_API_VERSION

    def to_init_params(self, **fetch_defaults: Any) -> InitParams:
        values: dict[str, Any] = {"api_version": self.api_version, **fetch_defaults}
        if self.access_key is not None:
            values["access_key"] = self.access_key
        if self.api_url is not None:
            values["api_url"] = self.api_url
        return InitParams.coerce(values)
