from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from bign.domain.values.rounding import RoundingMode


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True, extra="ignore"
    )

    LOG_LEVEL: str = Field(
        default="INFO", description="Logging level [DEBUG, INFO, WARNING, ERROR]"
    )

    JSON_LOGS: bool = Field(
        default=False,
        description="Should logs be in JSON format?",
    )

    DEFAULT_PRECISION: int = Field(
        default=80,
        ge=0,
        le=1000,
        description="Fractional digits used for internal arithmetic of new numbers",
    )

    DEFAULT_ROUNDING_MODE: str = Field(
        default=RoundingMode.HALF_AWAY_FROM_ZERO.value,
        description="Rounding mode applied when numbers are narrowed",
        examples=["TOWARD_ZERO", "HALF_AWAY_FROM_ZERO", "HALF_EVEN"],
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        valid_levels = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
        if value.upper() not in valid_levels:
            raise ValueError(
                f"Invalid LOG_LEVEL '{value}'. Must be one of {valid_levels}"
            )
        return value.upper()

    @field_validator("DEFAULT_ROUNDING_MODE")
    @classmethod
    def validate_rounding_mode(cls, value: str) -> str:
        value = value.upper()
        valid_modes = tuple(m.value for m in RoundingMode if m is not RoundingMode.CUSTOM)
        if value not in valid_modes:
            raise ValueError(
                f"Invalid DEFAULT_ROUNDING_MODE '{value}'. Must be one of {valid_modes}"
            )
        return value


@lru_cache()
def get_settings() -> Settings:
    from bign.shared.logging import get_logger

    logger = get_logger(__name__)

    try:
        settings = Settings()
        logger.debug(
            "settings_loaded",
            default_precision=settings.DEFAULT_PRECISION,
            rounding_mode=settings.DEFAULT_ROUNDING_MODE,
        )
        return settings

    except Exception as e:
        logger.error("settings_load_failed", error=str(e), exc_info=True)
        raise
