import time
from typing import Any, Dict, Optional

import httpx

from flightradar.config import Settings
from flightradar.obs.logger import log_event
from flightradar.obs.metrics import inc_counter, record_timing

DEFAULT_BASE_URL = "https://api.aviationstack.com/v1"
FLIGHTS_PATH = "/flights"


def upstream_error_message(exc: httpx.HTTPError) -> str:
    """Best human-readable message for a failed upstream call.

    Prefers the structured ``{"error": {"message": ...}}`` body AviationStack
    sends with error responses, falling back to the transport message.
    """
    response = exc.response if isinstance(exc, httpx.HTTPStatusError) else None
    if response is not None:
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            error = body.get("error")
            if isinstance(error, dict) and error.get("message"):
                return str(error["message"])
    return str(exc)


class AviationStackClient:
    """Pre-configured AviationStack client.

    Base URL and access key are fixed at construction; the client is reused
    across sequential tool calls and never retries.
    """

    def __init__(self, api_key: Optional[str] = None, base_url: str = DEFAULT_BASE_URL,
                 timeout: float = 12.0, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.api_key = api_key
        self.base_url = base_url
        params = {"access_key": api_key} if api_key else {}
        # Persistent HTTP client with HTTP/2 and sensible timeouts
        self._http = httpx.AsyncClient(
            base_url=base_url,
            params=params,
            headers={"Accept": "application/json"},
            http2=True,
            timeout=httpx.Timeout(connect=3.0, read=timeout, write=timeout, pool=timeout),
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: Settings,
                      transport: Optional[httpx.AsyncBaseTransport] = None) -> "AviationStackClient":
        return cls(
            api_key=settings.AVIATIONSTACK_API_KEY,
            base_url=settings.AVIATIONSTACK_BASE_URL,
            timeout=settings.AVIATIONSTACK_TIMEOUT_SECONDS,
            transport=transport,
        )

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    async def get_flights(self, params: Dict[str, Any]) -> Dict[str, Any]:
        """GET /flights with the given query; raises httpx errors on failure."""
        start = time.monotonic()
        status = "error"
        try:
            r = await self._http.get(FLIGHTS_PATH, params=params)
            status = str(r.status_code)
            r.raise_for_status()
            return r.json()
        finally:
            elapsed_ms = (time.monotonic() - start) * 1000.0
            record_timing("upstream_latency_ms", elapsed_ms, {"endpoint": "flights"})
            inc_counter("upstream_requests_total", {"endpoint": "flights", "status": status})
            log_event(
                "upstream_request",
                level="DEBUG",
                endpoint=FLIGHTS_PATH,
                params=params,
                status=status,
                ms_total=round(elapsed_ms, 2),
            )

    async def aclose(self) -> None:
        await self._http.aclose()
