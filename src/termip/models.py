"""Typed result models and session state for termip."""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

from pydantic import BaseModel, ConfigDict, Field


class LookupResult(BaseModel):
    """One successful answer from the ip-api.com JSON endpoint."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    # Network
    asn: str = Field(alias="as")
    isp: str
    org: str
    query: str

    # Location
    country: str
    country_code: str = Field(alias="countryCode")
    region: str
    region_name: str = Field(alias="regionName")
    city: str
    zip_code: str = Field(alias="zip")
    timezone: str

    # Coordinates (WGS84)
    lat: float = Field(ge=-90, le=90)
    lon: float = Field(ge=-180, le=180)

    status: str

    @classmethod
    def from_payload(cls, payload: dict) -> "LookupResult":
        """Validate a decoded response body. Raises pydantic.ValidationError."""
        return cls.model_validate(payload)

    def to_dict(self) -> dict:
        """Convert back to the upstream field names."""
        return self.model_dump(by_alias=True)


class FetchStatus(str, Enum):
    PENDING = "pending"
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True)
class Pending:
    """No lookup attempt has completed yet."""

    status: ClassVar[FetchStatus] = FetchStatus.PENDING


@dataclass(frozen=True)
class Success:
    """The lookup completed and produced ``result``."""

    result: LookupResult
    status: ClassVar[FetchStatus] = FetchStatus.SUCCESS


@dataclass(frozen=True)
class Failure:
    """The lookup completed without a result."""

    reason: str = ""
    status: ClassVar[FetchStatus] = FetchStatus.FAILURE


SessionState = Union[Pending, Success, Failure]
