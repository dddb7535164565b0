from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator, model_validator

from app.constants.error_constant import (
    ERROR_CONFIG_INVALID_LOG_LEVEL,
    ERROR_CONFIG_PASSWORD_LENGTH,
)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):

    # App
    APP_NAME: str = "Signup API"
    APP_VERSION: str = "1.0.0"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True

    # Password policy
    PASSWORD_MIN_LENGTH: int = Field(default=8, ge=1, le=128)
    PASSWORD_MAX_LENGTH: int = Field(default=128, ge=1, le=1024)
    PASSWORD_REQUIRE_LETTER: bool = True
    PASSWORD_REQUIRE_DIGIT: bool = False

    # Hashing
    PASSWORD_HASH_SCHEME: str = "pbkdf2_sha256"

    # Email
    EMAIL_CHECK_DELIVERABILITY: bool = False

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("LOG_LEVEL")
    def check_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(ERROR_CONFIG_INVALID_LOG_LEVEL)
        return level

    @model_validator(mode="after")
    def check_password_lengths(self) -> "Settings":
        if self.PASSWORD_MAX_LENGTH < self.PASSWORD_MIN_LENGTH:
            raise ValueError(ERROR_CONFIG_PASSWORD_LENGTH)
        return self


settings = Settings()
