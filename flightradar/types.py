from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

DEFAULT_LIMIT = 10
MAX_LIMIT = 100

FlightStatus = Literal["scheduled", "active", "landed", "cancelled", "incident", "diverted"]


def clamp_limit(value: Any) -> int:
    """Effective search limit: ``min(value or 10, 100)``.

    Missing, zero and non-numeric values fall back to the default and
    fractions are truncated. Only the upper bound is enforced, so negative
    numbers pass through unchanged.
    """
    if isinstance(value, bool):
        return DEFAULT_LIMIT
    try:
        number = int(float(value)) if value is not None else 0
    except (TypeError, ValueError):
        number = 0
    except OverflowError:
        return MAX_LIMIT
    return min(number or DEFAULT_LIMIT, MAX_LIMIT)


class ToolArgs(BaseModel):
    # unknown arguments are dropped, never forwarded upstream
    model_config = ConfigDict(extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def _blank_is_missing(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def to_query(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class FlightLookupArgs(ToolArgs):
    """Arguments for get_flight_data and get_flight_status."""
    flight_iata: Optional[str] = Field(None, description="IATA flight code, e.g. 'BA123'")
    flight_icao: Optional[str] = Field(None, description="ICAO flight code, e.g. 'BAW123'")

    @model_validator(mode="after")
    def _one_code_required(self):
        if not self.flight_iata and not self.flight_icao:
            raise ValueError("Either flight_iata or flight_icao must be provided")
        return self

    def to_query(self) -> Dict[str, Any]:
        # IATA wins when both codes are given
        if self.flight_iata:
            return {"flight_iata": self.flight_iata}
        return {"flight_icao": self.flight_icao}


class SearchFlightsArgs(ToolArgs):
    airline_iata: Optional[str] = None
    airline_icao: Optional[str] = None
    dep_iata: Optional[str] = None
    arr_iata: Optional[str] = None
    flight_status: Optional[FlightStatus] = None
    limit: int = DEFAULT_LIMIT

    @field_validator("limit", mode="before")
    @classmethod
    def _clamp(cls, value):
        return clamp_limit(value)
