from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    database_url: str = Field(
        default="postgresql://localhost:5432/insurance_db", alias="DATABASE_URL"
    )

    # Runtime environment (development, production, ...)
    environment: str = Field(default="development", alias="ENVIRONMENT")

    # Comma-separated list of allowed origins, or "*"
    cors_origin: str = Field(default="*", alias="CORS_ORIGIN")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Page size used when a search request does not send one
    default_page_size: int = Field(default=20, alias="DEFAULT_PAGE_SIZE")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str | None) -> str:
        """Accept lower-case level names and fall back to INFO when empty."""
        if not v:
            return "INFO"
        return str(v).upper()

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origin.split(",") if origin.strip()]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
