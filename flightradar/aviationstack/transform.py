from typing import Any, Dict, Iterable, List

FLIGHT_FIELDS = ("number", "iata", "icao")
AIRLINE_FIELDS = ("name", "iata", "icao")
ENDPOINT_FIELDS = ("airport", "iata", "icao", "terminal", "gate",
                   "scheduled", "estimated", "actual", "delay")
SUMMARY_ENDPOINT_FIELDS = ("airport", "iata", "scheduled")


def _pick(source: Any, keys: Iterable[str]) -> Dict[str, Any]:
    # keys absent upstream are left out; explicit nulls are kept
    if not isinstance(source, dict):
        return {}
    return {k: source[k] for k in keys if k in source}


def _copy(target: Dict[str, Any], key: str, source: Any, source_key: str) -> None:
    if isinstance(source, dict) and source_key in source:
        target[key] = source[source_key]


def to_flight_detail(record: Dict[str, Any]) -> Dict[str, Any]:
    """Full projection of one record for get_flight_data."""
    detail: Dict[str, Any] = {
        "flight": _pick(record.get("flight"), FLIGHT_FIELDS),
        "airline": _pick(record.get("airline"), AIRLINE_FIELDS),
        "departure": _pick(record.get("departure"), ENDPOINT_FIELDS),
        "arrival": _pick(record.get("arrival"), ENDPOINT_FIELDS),
    }
    _copy(detail, "status", record, "flight_status")
    _copy(detail, "aircraft", record, "aircraft")
    _copy(detail, "live", record, "live")
    return detail


def to_flight_summary(record: Dict[str, Any]) -> Dict[str, Any]:
    """Compact projection of one record for search_flights."""
    summary: Dict[str, Any] = {}
    _copy(summary, "flight_number", record.get("flight"), "number")
    _copy(summary, "flight_iata", record.get("flight"), "iata")
    _copy(summary, "airline", record.get("airline"), "name")
    summary["departure"] = _pick(record.get("departure"), SUMMARY_ENDPOINT_FIELDS)
    summary["arrival"] = _pick(record.get("arrival"), SUMMARY_ENDPOINT_FIELDS)
    _copy(summary, "status", record, "flight_status")
    return summary


def to_search_result(payload: Dict[str, Any]) -> Dict[str, Any]:
    records: List[Dict[str, Any]] = payload.get("data") or []
    pagination = payload.get("pagination") or {}
    return {
        # upstream total can exceed the page we got back
        "total_results": pagination.get("total", len(records)),
        "flights": [to_flight_summary(r) for r in records],
    }
