from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import SettingsConfigDict, BaseSettings

from scoresync.parsing.layouts import ClockFormat
from scoresync.transports.tcp import is_disabled_target


class SyncSettings(BaseSettings):
    serial_port: Optional[str] = Field(None, validation_alias="SERIAL_PORT")
    baud_rate: int = Field(9600, validation_alias="BAUD_RATE")

    target_host: str = Field("none", validation_alias="TARGET_HOST")
    target_port: int = Field(5000, ge=1, le=65535, validation_alias="TARGET_PORT")
    connect_timeout: float = Field(5.0, gt=0, validation_alias="CONNECT_TIMEOUT")

    clock_format: ClockFormat = Field(ClockFormat.MMSS, validation_alias="CLOCK_FORMAT")
    trim_fields: bool = Field(True, validation_alias="TRIM_FIELDS")

    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")
    log_ring_size: int = Field(200, ge=1, validation_alias="LOG_RING_SIZE")
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", populate_by_name=True, extra="ignore")

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()

    @property
    def publishing_enabled(self) -> bool:
        return not is_disabled_target(self.target_host)


@lru_cache
def get_settings() -> SyncSettings:
    return SyncSettings()
