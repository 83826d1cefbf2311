from __future__ import annotations

from typing import Annotated, List, Any, Literal
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
from pydantic import Field, AnyUrl, AliasChoices, field_validator, model_validator


class Settings(BaseSettings):
    # Звідки читати .env і що робити з зайвими ключами
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="forbid",  # суворо: невідомі ключі заборонені (допомагає ловити орфографію)
    )

    # Загальні налаштування
    APP_NAME: str = "QuizApp Backend"
    API_V1_PREFIX: str = "/api/v1"
    APP_ENV: str = Field(
        "dev",
        validation_alias=AliasChoices("APP_ENV", "app_env"),
        description="Application environment: dev|staging|prod",
    )
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        "INFO",
        validation_alias=AliasChoices("LOG_LEVEL", "log_level"),
        description="Root level for the quizapp loggers",
    )

    # Порти/хости
    BACKEND_PORT: int = Field(
        8000,
        validation_alias=AliasChoices("BACKEND_PORT", "app_port"),
        description="Backend port to bind",
    )

    # Вікторина
    SPLASH_DELAY_MS: int = Field(
        2000,
        ge=0,
        validation_alias=AliasChoices("SPLASH_DELAY_MS", "splash_delay_ms"),
        description="How long a new session stays on the splash screen",
    )
    SESSION_TTL_SECONDS: int = Field(
        6 * 60 * 60,
        gt=0,
        validation_alias=AliasChoices("SESSION_TTL_SECONDS", "session_ttl_seconds"),
        description="Lifetime of a stored session (Redis and in-memory store)",
    )

    # Redis (якщо не задано — сесії зберігаються в пам'яті процесу)
    REDIS_URL: str | None = Field(
        None,
        validation_alias=AliasChoices("REDIS_URL", "redis_url"),
        description="redis:// or rediss:// URL of the session store",
    )

    # Supabase (необов'язково: банк збережених вікторин)
    SUPABASE_URL: AnyUrl | None = Field(
        None,
        validation_alias=AliasChoices("SUPABASE_URL", "supabase_url"),
        description="Your Supabase project URL",
    )
    SUPABASE_SERVICE_ROLE_KEY: str | None = Field(
        None,
        validation_alias=AliasChoices("SUPABASE_SERVICE_ROLE_KEY", "supabase_service_role_key"),
        description="Service role key (server-side)",
    )
    SUPABASE_SCHEMA: str = Field(
        "public",
        validation_alias=AliasChoices("SUPABASE_SCHEMA", "supabase_schema"),
        description="Supabase schema name",
    )

    # CORS origins (NoDecode: рядок з env потрапляє у валідатор як є, без JSON-розбору)
    FRONTEND_ORIGINS: Annotated[List[str], NoDecode] = [
        "http://localhost:5173",
        "http://localhost:3000",
        "http://127.0.0.1:5173",
    ]

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _upper_log_level(cls, v: Any) -> Any:
        return v.strip().upper() if isinstance(v, str) else v

    @field_validator("FRONTEND_ORIGINS", mode="before")
    @classmethod
    def _parse_origins(cls, v: Any) -> Any:
        """
        Дозволяє задавати FRONTEND_ORIGINS у .env як:
        - JSON-масив: ["http://localhost:5173","http://localhost:3000"]
        - або як рядок: http://localhost:5173,http://localhost:3000
        - або з ; як роздільником
        """
        if isinstance(v, str):
            s = v.strip()
            if s.startswith("[") and s.endswith("]"):
                import json
                try:
                    return json.loads(s)
                except ValueError:
                    # якщо JSON кривий — розбираємо як звичайний список
                    s = s[1:-1]
            return [item.strip().strip('"') for item in s.replace(";", ",").split(",") if item.strip()]
        return v

    @model_validator(mode="after")
    def _check_supabase(self) -> "Settings":
        if self.SUPABASE_URL is not None and not self.SUPABASE_SERVICE_ROLE_KEY:
            raise ValueError("SUPABASE_SERVICE_ROLE_KEY is required when SUPABASE_URL is set")
        return self

    @property
    def supabase_enabled(self) -> bool:
        return self.SUPABASE_URL is not None


settings = Settings()
