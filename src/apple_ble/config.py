"""Advertising settings."""

from datetime import timedelta

from pydantic import BaseModel, ConfigDict, Field, model_validator

from apple_ble.constants import (
    APPLE_COMPANY_ID,
    DEFAULT_MAX_INTERVAL,
    DEFAULT_MIN_INTERVAL,
    DEFAULT_TIMEOUT,
)


class AdvertisingSettings(BaseModel):
    """Parameters applied to every envelope an assembler builds."""

    model_config = ConfigDict(frozen=True)

    vendor_id: int = Field(default=APPLE_COMPANY_ID, ge=0, le=0xFFFF)
    min_interval: timedelta = DEFAULT_MIN_INTERVAL
    max_interval: timedelta = DEFAULT_MAX_INTERVAL
    timeout: timedelta = DEFAULT_TIMEOUT  # zero: until explicitly stopped
    include_local_name: bool = True

    @model_validator(mode="after")
    def _check_intervals(self) -> "AdvertisingSettings":
        if self.min_interval > self.max_interval:
            raise ValueError("min_interval must not exceed max_interval")
        return self
