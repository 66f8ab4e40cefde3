"""Runtime configuration for Inkwell.

Every option maps to an environment variable of the same name in upper case
(``SECRET_KEY``, ``DATABASE_URL`` ...). A ``.env`` file in the working
directory is read as well. Only ``SECRET_KEY`` has no default.
"""

from nacl import pwhash
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Process-wide settings, read once at import time."""

    app_name: str = Field(default="Inkwell", alias="APP_NAME")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Persistence
    database_url: str = Field(default="sqlite:///./inkwell.db", alias="DATABASE_URL")
    sql_debug: bool = Field(default=False, alias="SQL_DEBUG")
    auto_create_tables: bool = Field(default=True, alias="AUTO_CREATE_TABLES")

    # Bearer tokens
    secret_key: str = Field(alias="SECRET_KEY", description="HMAC key for access tokens")
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    access_token_expire_minutes: int = Field(default=60 * 24, ge=1, alias="ACCESS_TOKEN_EXPIRE_MINUTES")

    # Argon2id cost; tests lower these to the library minimum
    password_opslimit: int = Field(default=pwhash.argon2id.OPSLIMIT_INTERACTIVE, alias="PASSWORD_OPSLIMIT")
    password_memlimit: int = Field(default=pwhash.argon2id.MEMLIMIT_INTERACTIVE, alias="PASSWORD_MEMLIMIT")

    # Browser clients
    cors_origins: list[str] = Field(default_factory=lambda: ["*"], alias="CORS_ORIGINS")
    cors_allow_credentials: bool = Field(default=False, alias="CORS_ALLOW_CREDENTIALS")
    cors_allow_methods: list[str] = Field(
        default_factory=lambda: ["GET", "POST", "PUT", "DELETE"],
        alias="CORS_ALLOW_METHODS",
    )
    cors_allow_headers: list[str] = Field(
        default_factory=lambda: ["Authorization", "Content-Type"],
        alias="CORS_ALLOW_HEADERS",
    )

    model_config = SettingsConfigDict(env_file=".env", validate_assignment=True, extra="ignore")

    @property
    def connect_args(self) -> dict[str, object]:
        """Driver-specific ``connect_args`` for ``create_engine``.

        SQLite connections are used from FastAPI's threadpool, so the
        same-thread check is disabled for that driver.
        """
        if self.database_url.startswith("sqlite"):
            return {"check_same_thread": False}
        return {}


settings = Settings()  # type: ignore[call-arg]
