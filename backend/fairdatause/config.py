from __future__ import annotations

import os
from dataclasses import dataclass, field


def _env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value


def _env_flag(name: str, default: str = "false") -> bool:
    return (_env(name, default) or default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    app_name: str = "FairDataUse"
    environment: str = field(default_factory=lambda: _env("ENV", "production"))
    debug: bool = field(default_factory=lambda: _env_flag("DEBUG"))
    database_url: str | None = field(default_factory=lambda: _env("DATABASE_URL"))
    test_database_url: str | None = field(default_factory=lambda: _env("TEST_DATABASE_URL"))
    db_pool_size: int = field(default_factory=lambda: int(_env("DB_POOL_SIZE", "10")))
    reddit_client_id: str | None = field(default_factory=lambda: _env("REDDIT_CLIENT_ID"))
    reddit_client_secret: str | None = field(default_factory=lambda: _env("REDDIT_CLIENT_SECRET"))
    reddit_user_agent: str = field(default_factory=lambda: _env("REDDIT_USER_AGENT", "FairDataUse/1.0.0"))
    reddit_timeout_seconds: float = field(default_factory=lambda: float(_env("REDDIT_TIMEOUT_SECONDS", "5")))
    ping_message: str = field(default_factory=lambda: _env("PING_MESSAGE", "ping"))
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO").upper())
    cors_origins: list[str] = field(
        default_factory=lambda: [
            origin.strip()
            for origin in (_env("CORS_ORIGINS", "*") or "*").split(",")
            if origin.strip()
        ]
    )

    @property
    def development_mode(self) -> bool:
        return self.debug or self.environment == "development"

    @property
    def database_url_env_var(self) -> str:
        return "TEST_DATABASE_URL" if self.environment == "test" else "DATABASE_URL"

    @property
    def active_database_url(self) -> str | None:
        if self.environment == "test":
            return self.test_database_url
        return self.database_url

    def missing_reddit_credentials(self) -> list[str]:
        missing = []
        if not self.reddit_client_id:
            missing.append("REDDIT_CLIENT_ID")
        if not self.reddit_client_secret:
            missing.append("REDDIT_CLIENT_SECRET")
        return missing


settings = Settings()
