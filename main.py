import asyncio

from dotenv import load_dotenv

from flightradar import __version__
from flightradar.aviationstack.client import AviationStackClient
from flightradar.config import settings
from flightradar.obs.logger import log_event
from flightradar.router import ToolRouter
from flightradar.server import SERVER_NAME, serve

load_dotenv()


async def main() -> None:
    client = AviationStackClient.from_settings(settings)
    router = ToolRouter(client, tz=settings.DISPLAY_TZ)

    if not client.configured:
        log_event(
            "config_warning",
            level="WARNING",
            message="AVIATIONSTACK_API_KEY is not set; the server will start but every tool call will fail",
        )

    log_event(
        "startup",
        server=SERVER_NAME,
        version=__version__,
        base_url=settings.AVIATIONSTACK_BASE_URL,
        transport="stdio",
    )
    try:
        await serve(router)
    finally:
        await client.aclose()
        log_event("shutdown", server=SERVER_NAME)


def run() -> None:
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        # Ctrl-C is the normal way to stop a stdio server
        pass


if __name__ == "__main__":
    run()
