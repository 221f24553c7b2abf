"""Application configuration using pydantic settings with structured sections."""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseModel):
    url: str = Field(default="sqlite+aiosqlite:///./bank.db", alias="url")
    echo: bool = False
    pool_size: Optional[int] = None
    max_overflow: Optional[int] = None


class SecuritySettings(BaseModel):
    session_cookie_name: str = "sessionId"
    session_header_name: str = "X-Session-Id"
    admin_role: str = "admin"


class WalletServiceSettings(BaseModel):
    url: str = "http://127.0.0.1:4000"
    timeout: float = Field(default=10.0, gt=0)


class LoggingSettings(BaseModel):
    level: str = "INFO"
    format: str = (
        "%(asctime)s %(levelname)s %(name)s [%(method)s] "
        "user=%(user_id)s session=%(session_id)s %(message)s"
    )


class Settings(BaseSettings):
    """Top-level application settings with nested sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
    )

    environment: Literal["development", "staging", "production", "test"] = "development"
    debug: bool = False
    project_name: str = "Bank Dashboard"
    api_prefix: str = "/api"

    database: DatabaseSettings = DatabaseSettings()
    security: SecuritySettings = SecuritySettings()
    wallet: WalletServiceSettings = WalletServiceSettings()
    logging: LoggingSettings = LoggingSettings()

    @property
    def database_url(self) -> str:
        return self.database.url

    @property
    def admin_role(self) -> str:
        return self.security.admin_role

    @property
    def wallet_url(self) -> str:
        return self.wallet.url

    @property
    def wallet_timeout(self) -> float:
        return self.wallet.timeout


@lru_cache()
def get_settings() -> Settings:
    return Settings()
