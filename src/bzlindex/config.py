"""Settings for index construction and reporting."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from bzlindex.errors import ConfigError

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = Field(alias="APP_ENV", default="dev")
    log_level: str = Field(alias="LOG_LEVEL", default="INFO")
    compute_artifact_ages: int = Field(alias="BZLINDEX_COMPUTE_ARTIFACT_AGES", default=1)
    deprecated_label_prefix: str = Field(
        alias="BZLINDEX_DEPRECATED_LABEL_PREFIX", default="@deprecated"
    )
    histogram_max_year_age: int = Field(alias="BZLINDEX_HISTOGRAM_MAX_YEAR_AGE", default=40)


def validate_settings(settings: Settings) -> None:
    problems: list[str] = []
    if settings.log_level.upper() not in VALID_LOG_LEVELS:
        problems.append(f"LOG_LEVEL={settings.log_level}")
    if settings.histogram_max_year_age <= 0:
        problems.append("BZLINDEX_HISTOGRAM_MAX_YEAR_AGE(must be positive)")
    if not settings.deprecated_label_prefix.strip():
        problems.append("BZLINDEX_DEPRECATED_LABEL_PREFIX(must not be blank)")

    if problems:
        raise ConfigError(f"invalid configuration: {', '.join(problems)}")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
