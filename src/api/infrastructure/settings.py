"""Application settings using pydantic-settings.

Settings are loaded from environment variables with sensible defaults
for development. Production deployments should set all values explicitly.
"""

from functools import lru_cache

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """Database connection settings.

    Environment variables:
        TRICORE_DB_HOST: Database host (default: localhost)
        TRICORE_DB_PORT: Database port (default: 5432)
        TRICORE_DB_DATABASE: Database name (default: tricore)
        TRICORE_DB_USERNAME: Database user (default: tricore)
        TRICORE_DB_PASSWORD: Database password (required in production)
        TRICORE_DB_POOL_MAX_CONNECTIONS: Maximum connections in pool (default: 10)
    """

    model_config = SettingsConfigDict(
        env_prefix="TRICORE_DB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = Field(default="localhost", description="Database host")
    port: int = Field(default=5432, description="Database port")
    database: str = Field(default="tricore", description="Database name")
    username: str = Field(default="tricore", description="Database username")
    password: SecretStr = Field(
        default=SecretStr(""),
        description="Database password",
    )
    pool_max_connections: int = Field(
        default=10,
        description="Maximum connections in pool",
        ge=1,
        le=100,
    )

    @property
    def connection_string(self) -> str:
        """Generate a connection string (without password for logging)."""
        return f"postgresql://{self.username}@{self.host}:{self.port}/{self.database}"


class OIDCSettings(BaseSettings):
    """OpenID Connect settings for the Google identity provider.

    Environment variables:
        TRICORE_OIDC_ISSUER_URL: Issuer URL (default: https://accounts.google.com)
        TRICORE_OIDC_CLIENT_ID: OAuth2 client ID registered with the provider
        TRICORE_OIDC_CLIENT_SECRET: OAuth2 client secret
        TRICORE_OIDC_REDIRECT_BASE_URL: Public base URL of this service
        TRICORE_OIDC_SCOPES: Space separated scopes (default: openid profile email)
        TRICORE_OIDC_SESSION_COOKIE_NAME: Session cookie name (default: SESSION)
        TRICORE_OIDC_SESSION_COOKIE_SECURE: Mark cookies Secure (default: true)
        TRICORE_OIDC_LOGIN_SUCCESS_REDIRECT_URL: Frontend URL after login
        TRICORE_OIDC_LOGIN_FAILURE_REDIRECT_URL: Frontend URL after failed login
    """

    model_config = SettingsConfigDict(
        env_prefix="TRICORE_OIDC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    issuer_url: str = Field(
        default="https://accounts.google.com", description="OIDC issuer URL"
    )
    client_id: str = Field(default="", description="OAuth2 client ID")
    client_secret: SecretStr = Field(
        default=SecretStr(""), description="OAuth2 client secret"
    )
    redirect_base_url: str = Field(
        default="http://localhost:8080",
        description="Public base URL used to build the callback URI",
    )
    scopes: str = Field(default="openid profile email", description="OAuth2 scopes")
    session_cookie_name: str = Field(default="SESSION", description="Session cookie")
    session_cookie_secure: bool = Field(
        default=True, description="Only send cookies over HTTPS"
    )
    login_success_redirect_url: str = Field(
        default="http://localhost:3000/",
        description="Where /login/success sends the browser",
    )
    login_failure_redirect_url: str = Field(
        default="http://localhost:3000/login",
        description="Where /login/fail sends the browser",
    )

    @property
    def discovery_url(self) -> str:
        """OpenID Connect discovery document URL."""
        return f"{self.issuer_url.rstrip('/')}/.well-known/openid-configuration"

    @property
    def callback_url(self) -> str:
        """Redirect URI registered with the provider."""
        return f"{self.redirect_base_url.rstrip('/')}/login/oauth2/code/google"


class CORSSettings(BaseSettings):
    """CORS settings.

    Environment variables:
        TRICORE_CORS_ALLOWED_ORIGIN: The single origin allowed to call the API
    """

    model_config = SettingsConfigDict(
        env_prefix="TRICORE_CORS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    allowed_origin: str = Field(
        default="http://localhost:3000", description="Allowed CORS origin"
    )
    allowed_methods: list[str] = Field(
        default=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        description="Allowed CORS methods",
    )


class Settings(BaseSettings):
    """Main application settings aggregating all configuration sections.

    Environment variables:
        TRICORE_APP_NAME: Application name shown in the OpenAPI docs
        TRICORE_DEBUG: Enable debug logging (default: false)
    """

    model_config = SettingsConfigDict(
        env_prefix="TRICORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    app_name: str = Field(default="TriCore API", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")

    @property
    def database(self) -> DatabaseSettings:
        """Get database settings."""
        return get_database_settings()

    @property
    def oidc(self) -> OIDCSettings:
        """Get OIDC settings."""
        return get_oidc_settings()

    @property
    def cors(self) -> CORSSettings:
        """Get CORS settings."""
        return get_cors_settings()


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


@lru_cache
def get_database_settings() -> DatabaseSettings:
    """Get cached database settings."""
    return DatabaseSettings()


@lru_cache
def get_oidc_settings() -> OIDCSettings:
    """Get cached OIDC settings."""
    return OIDCSettings()


@lru_cache
def get_cors_settings() -> CORSSettings:
    """Get cached CORS settings."""
    return CORSSettings()
