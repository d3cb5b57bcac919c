"""Portal session wiring: API client, view controller, FastAPI dependency."""

from typing import Optional

import httpx
from fastapi import Request

from payout_portal.config import Settings
from payout_portal.providers.muralpay import MuralPayClient
from payout_portal.providers.transport import MuralPayTransport
from payout_portal.views.controller import ViewController


def create_controller(
    config: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> tuple[ViewController, MuralPayTransport]:
    """Build a controller bound to a fresh transport. The caller closes the transport."""
    api_transport = MuralPayTransport(config, transport=transport)
    return ViewController(MuralPayClient(api_transport)), api_transport


def get_controller(request: Request) -> ViewController:
    return request.app.state.controller
