import pytest
from pydantic import ValidationError

from flightradar.types import FlightLookupArgs, SearchFlightsArgs, clamp_limit


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, 10),
        (5, 5),
        (150, 100),
        (100, 100),
        (1, 1),
        ("20", 20),
        (7.9, 7),
        ("lots", 10),
        # zero is treated as "not given"
        (0, 10),
        # only the upper bound is enforced
        (-5, -5),
    ],
)
def test_clamp_limit(raw, expected):
    assert clamp_limit(raw) == expected


def test_search_args_default_limit():
    assert SearchFlightsArgs().limit == 10
    assert SearchFlightsArgs.model_validate({"limit": 150}).limit == 100


def test_search_query_only_forwards_known_present_fields():
    args = SearchFlightsArgs.model_validate({
        "airline_iata": "BA",
        "dep_iata": "LHR",
        "arr_iata": "",
        "flight_status": "active",
        "callback": "http://evil.example",
    })
    assert args.to_query() == {
        "airline_iata": "BA",
        "dep_iata": "LHR",
        "flight_status": "active",
        "limit": 10,
    }


def test_search_rejects_unknown_status():
    with pytest.raises(ValidationError):
        SearchFlightsArgs.model_validate({"flight_status": "boarding"})


def test_lookup_requires_a_flight_code():
    with pytest.raises(ValidationError) as excinfo:
        FlightLookupArgs.model_validate({})
    assert "Either flight_iata or flight_icao must be provided" in str(excinfo.value)

    with pytest.raises(ValidationError):
        FlightLookupArgs.model_validate({"flight_iata": "", "flight_icao": "  "})


def test_lookup_prefers_iata_when_both_given():
    args = FlightLookupArgs.model_validate({"flight_iata": "BA117", "flight_icao": "BAW117"})
    assert args.to_query() == {"flight_iata": "BA117"}


def test_lookup_by_icao():
    args = FlightLookupArgs.model_validate({"flight_icao": "BAW117", "limit": 3})
    assert args.to_query() == {"flight_icao": "BAW117"}
