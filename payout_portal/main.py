"""
Payout Portal: account and payout console for the Mural Pay API.

Lets an operator create an account, build blockchain or fiat payout requests
for individual or business recipients, and execute them. Every endpoint
returns the rendered view state of the session.

Start the server:
    uvicorn payout_portal.main:app --reload

Configuration comes from MURALPAY_* environment variables or a .env file.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI

from payout_portal.api.accounts import router as accounts_router
from payout_portal.api.health import router as health_router
from payout_portal.api.payouts import router as payouts_router
from payout_portal.api.views import router as views_router
from payout_portal.config import Settings, settings
from payout_portal.session import create_controller

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger("payout_portal.main")


def create_app(
    config: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """
    Build the portal application.

    Args:
        config: Settings to use; defaults to the environment-loaded settings.
        transport: Optional httpx transport for the API client (tests pass a mock).
    """
    if config is None:
        config = settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Check credentials and open the API client for the session."""
        for name in config.missing_credentials():
            logger.warning("%s is not set; the API will reject calls that need it", name)

        controller, api_transport = create_controller(config, transport)
        app.state.settings = config
        app.state.controller = controller
        try:
            yield
        finally:
            await api_transport.aclose()

    app = FastAPI(
        title="Payout Portal",
        description=(
            "Create accounts and submit blockchain or fiat payout requests through "
            "the Mural Pay API, then execute them and track their status."
        ),
        version="0.1.0",
        lifespan=lifespan,
    )

    app.include_router(health_router)
    app.include_router(views_router, prefix="/api")
    app.include_router(accounts_router, prefix="/api")
    app.include_router(payouts_router, prefix="/api")
    return app


app = create_app()
