from typing import Any, Dict, List

from flightradar.utils.dates import format_local_timestamp


def _text(value: Any) -> str:
    return "null" if value is None else str(value)


def _endpoint_lines(label: str, endpoint: Dict[str, Any], tz: str) -> List[str]:
    head = f"{label}: {_text(endpoint.get('airport'))} ({_text(endpoint.get('iata'))})"
    if endpoint.get("terminal"):
        head += f", Terminal {endpoint['terminal']}"
    if endpoint.get("gate"):
        head += f", Gate {endpoint['gate']}"

    lines = [head]
    for key, caption in (("scheduled", "Scheduled"), ("estimated", "Estimated"), ("actual", "Actual")):
        if endpoint.get(key):
            lines.append(f"{caption}: {format_local_timestamp(endpoint[key], tz)}")
    if endpoint.get("delay"):
        lines.append(f"Delay: {endpoint['delay']} minutes")
    return lines


def format_flight_status(record: Dict[str, Any], tz: str = "UTC") -> str:
    """Prose status summary for one AviationStack flight record.

    Departure and arrival blocks only list the details the record carries.
    The live-tracking block appears whenever the record carries a live object, and
    its values are printed exactly as received.
    """
    flight = record.get("flight") or {}
    airline = record.get("airline") or {}
    lines = [
        f"Flight {_text(flight.get('iata'))} ({_text(airline.get('name'))}) "
        f"is currently {_text(record.get('flight_status'))}."
    ]

    for label, key in (("Departure", "departure"), ("Arrival", "arrival")):
        endpoint = record.get(key)
        if isinstance(endpoint, dict):
            lines.append("")
            lines.extend(_endpoint_lines(label, endpoint, tz))

    live = record.get("live")
    if isinstance(live, dict):
        lines += [
            "",
            "Live Tracking:",
            f"Altitude: {_text(live.get('altitude'))} feet",
            f"Speed: {_text(live.get('speed_horizontal'))} knots",
            f"Heading: {_text(live.get('heading'))} degrees",
            f"Latitude: {_text(live.get('latitude'))}",
            f"Longitude: {_text(live.get('longitude'))}",
        ]

    return "\n".join(lines)
