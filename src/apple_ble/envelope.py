"""The advertisement envelope handed to the transport."""

from __future__ import annotations

from datetime import timedelta
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


class AdvertisementType(str, Enum):
    BROADCAST = "broadcast"  # no response expected


class AdvertisementEnvelope(BaseModel):
    model_config = ConfigDict(frozen=True)

    advertisement_type: AdvertisementType = AdvertisementType.BROADCAST
    local_name: Optional[str] = None
    min_interval: timedelta
    max_interval: timedelta
    timeout: timedelta
    manufacturer_data: dict[int, bytes]

    @field_validator("manufacturer_data")
    @classmethod
    def _single_vendor(cls, value: dict[int, bytes]) -> dict[int, bytes]:
        if len(value) != 1:
            raise ValueError("manufacturer_data must hold exactly one vendor entry")
        return value

    @property
    def vendor_id(self) -> int:
        return next(iter(self.manufacturer_data))

    @property
    def payload(self) -> bytes:
        return self.manufacturer_data[self.vendor_id]
