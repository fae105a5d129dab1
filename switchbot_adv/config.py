from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import SettingsConfigDict, BaseSettings

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class DecoderSettings(BaseSettings):
    """
    Environment-driven settings for the decoder's diagnostics.

    ``log_level`` is re-applied to the decoder logger on every rejection;
    ``diagnostic_ring_size`` only takes effect when the logger is first created.
    """
    log_rejections: bool = Field(True, validation_alias="SWITCHBOT_LOG_REJECTIONS")
    log_level: LogLevel = Field("INFO", validation_alias="SWITCHBOT_LOG_LEVEL")
    diagnostic_ring_size: int = Field(200, gt=0, validation_alias="SWITCHBOT_DIAGNOSTIC_RING_SIZE")

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", populate_by_name=True, extra="ignore")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.strip().upper() if isinstance(value, str) else value


@lru_cache
def get_settings() -> DecoderSettings:
    return DecoderSettings()
