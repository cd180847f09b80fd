"""12-factor configuration adapter using environment variables."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from kmb_route_browser.domain.models.language import Language
from kmb_route_browser.domain.models.match_policy import RouteMatchPolicy

KMB_API_BASE_URL = "https://data.etabus.gov.hk/v1/transport/kmb/"


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Host to bind the server to")
    port: int = Field(default=8000, description="Port to bind the server to")

    # KMB API configuration
    kmb_api_base_url: str = Field(
        default=KMB_API_BASE_URL,
        description="Base URL of the KMB open-data API (must end with '/')",
    )
    kmb_api_timeout: int = Field(
        default=10, description="Timeout for KMB API requests in seconds"
    )

    # Browsing behaviour
    route_match_policy: str = Field(
        default="substring",
        description="Route search matching: 'substring' (case-insensitive) or 'exact' (case-sensitive)",
    )
    default_language: str = Field(
        default="en",
        description="Initial UI language: 'en' (English) or 'tc' (Traditional Chinese)",
    )
    title: str = Field(
        default="KMB Route Searcher",
        description="Page title displayed in browser tab",
    )

    @field_validator("kmb_api_base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Ensure the base URL ends with a slash so endpoint paths can be appended."""
        return v if v.endswith("/") else f"{v}/"

    @field_validator("route_match_policy")
    @classmethod
    def validate_route_match_policy(cls, v: str) -> str:
        """Validate the match policy is either 'substring' or 'exact'."""
        if v.lower() not in ("substring", "exact"):
            raise ValueError("route_match_policy must be either 'substring' or 'exact'")
        return v.lower()

    @field_validator("default_language")
    @classmethod
    def validate_default_language(cls, v: str) -> str:
        """Validate the language is either 'en' or 'tc'."""
        if v.lower() not in ("en", "tc"):
            raise ValueError("default_language must be either 'en' or 'tc'")
        return v.lower()

    @property
    def match_policy(self) -> RouteMatchPolicy:
        return RouteMatchPolicy(self.route_match_policy)

    @property
    def language(self) -> Language:
        return Language.from_code(self.default_language)

    @classmethod
    def for_testing(cls, **overrides: object) -> "AppConfig":
        """Build a config that ignores any local .env file."""
        return cls(_env_file=None, **overrides)  # type: ignore[call-arg]
