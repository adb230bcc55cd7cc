"""Application settings loaded from the environment and ``.env``."""

from pathlib import Path

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent / "data" / "books.json"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="LIBRARY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "Shelfmark"
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    # Seed data
    catalog_path: Path = DEFAULT_CATALOG_PATH

    # Lending
    loan_period_days: int = Field(default=14, ge=1)

    # Recommendations
    recommendation_popular_count: int = Field(default=5, ge=0)
    recommendation_total_count: int = Field(default=10, ge=1)
    recommendation_seed: int | None = None

    @model_validator(mode="after")
    def _check_recommendation_counts(self) -> "Settings":
        if self.recommendation_popular_count > self.recommendation_total_count:
            raise ValueError(
                "recommendation_popular_count must not exceed recommendation_total_count"
            )
        return self


settings = Settings()
