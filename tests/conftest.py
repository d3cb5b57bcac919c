"""Shared test fixtures."""

import json
from typing import Any, Callable

import httpx
import pytest
import pytest_asyncio

from payout_portal.config import Settings
from payout_portal.providers.muralpay import MuralPayClient
from payout_portal.providers.transport import MuralPayTransport
from payout_portal.views.controller import ViewController


class FakeMuralPayApi:
    """
    In-memory stand-in for the Mural Pay API.

    Serves the account and payout endpoints the portal uses, records every
    request, and can be told to fail the next call to a given endpoint.
    Account ids are "a1", "a2", ...; payout request ids are "pr-1", "pr-2", ...
    """

    def __init__(self):
        self.accounts: list[dict] = []
        self.payout_requests: dict[str, dict] = {}
        self.requests: list[httpx.Request] = []
        self._failures: dict[tuple[str, str], tuple[int, str]] = {}
        self.observers: list[Callable[[httpx.Request], None]] = []

    # ─── Test controls ───────────────────────────────────────────────

    def fail_next(self, method: str, path: str, status_code: int = 500, body: str = "Internal error") -> None:
        self._failures[(method, path)] = (status_code, body)

    def add_account(self, name: str, status: str = "ACTIVE") -> dict:
        account = {
            "id": f"a{len(self.accounts) + 1}",
            "name": name,
            "status": status,
            "createdAt": "2025-01-15T10:00:00.000Z",
            "updatedAt": "2025-01-15T10:00:00.000Z",
            "isApiEnabled": True,
            "accountDetails": {
                "balances": [{"tokenAmount": 1000, "tokenSymbol": "USDC"}],
                "walletDetails": {"walletAddress": "0xwallet", "blockchain": "POLYGON"},
            },
        }
        self.accounts.append(account)
        return account

    def add_payout_request(self, status: str = "AWAITING_EXECUTION", source_account_id: str = "a1") -> dict:
        payout = self._create_payout({"sourceAccountId": source_account_id, "payouts": []})
        payout["status"] = status
        return payout

    def calls(self, method: str, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == method and r.url.path == path]

    def last_body(self, method: str, path: str) -> Any:
        return json.loads(self.calls(method, path)[-1].content)

    # ─── Routing ─────────────────────────────────────────────────────

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        for observe in self.observers:
            observe(request)
        method, path = request.method, request.url.path
        body = json.loads(request.content) if request.content else None

        failure = self._failures.pop((method, path), None)
        if failure:
            return httpx.Response(failure[0], text=failure[1])

        if path == "/api/accounts":
            if method == "GET":
                return httpx.Response(200, json=self.accounts)
            account = {"id": f"a{len(self.accounts) + 1}", "name": body["name"], "status": "CREATED"}
            self.accounts.append(account)
            return httpx.Response(201, json=account)

        if path == "/api/payouts/payout" and method == "POST":
            return httpx.Response(201, json=self._create_payout(body))

        if path == "/api/payouts/search" and method == "POST":
            results = list(self.payout_requests.values())
            if body.get("status"):
                results = [p for p in results if p["status"] in body["status"]]
            return httpx.Response(200, json={"results": results, "total": len(results)})

        if path.startswith("/api/payouts/payout/"):
            parts = path.split("/")
            payout = self.payout_requests.get(parts[4])
            if payout is None:
                return httpx.Response(404, text="Payout request not found")
            if len(parts) == 5 and method == "GET":
                return httpx.Response(200, json=payout)
            if parts[-1] == "execute":
                return httpx.Response(200, json=self._execute(payout))
            if parts[-1] == "cancel":
                payout["status"] = "CANCELED"
                return httpx.Response(200)

        return httpx.Response(404, text=f"No route for {method} {path}")

    def _create_payout(self, body: dict) -> dict:
        payout_id = f"pr-{len(self.payout_requests) + 1}"
        payout = {
            "id": payout_id,
            "createdAt": "2025-01-15T10:05:00.000Z",
            "updatedAt": "2025-01-15T10:05:00.000Z",
            "sourceAccountId": body["sourceAccountId"],
            "memo": body.get("memo"),
            "status": "AWAITING_EXECUTION",
            "payouts": [
                {
                    "id": f"{payout_id}-item-{i + 1}",
                    "amount": item["amount"],
                    "recipientInfo": item["recipientInfo"],
                    "payoutDetails": item["payoutDetails"],
                }
                for i, item in enumerate(body["payouts"])
            ],
        }
        self.payout_requests[payout_id] = payout
        return payout

    def _execute(self, payout: dict) -> dict:
        payout["status"] = "EXECUTED"
        payout["updatedAt"] = "2025-01-15T10:10:00.000Z"
        for item in payout["payouts"]:
            item["details"] = {
                "type": "fiat",
                "fiatAndRailCode": "cop",
                "fiatAmount": {"fiatAmount": 410000.0, "fiatCurrencyCode": "COP"},
                "transactionFee": {"tokenSymbol": "USDC", "tokenAmount": 0.5},
                "exchangeRate": 4100.0,
                "exchangeFeePercentage": 0.5,
                "feeTotal": {"tokenSymbol": "USDC", "tokenAmount": 1.0},
                "fiatPayoutStatus": {"type": "pending"},
            }
        return payout


@pytest.fixture
def settings() -> Settings:
    return Settings(
        base_url="https://api.muralpay.test",
        api_key="test-api-key",
        transfer_api_key="test-transfer-key",
    )


@pytest.fixture
def fake_api() -> FakeMuralPayApi:
    return FakeMuralPayApi()


@pytest_asyncio.fixture
async def transport(settings: Settings, fake_api: FakeMuralPayApi):
    api_transport = MuralPayTransport(settings, transport=httpx.MockTransport(fake_api.handler))
    yield api_transport
    await api_transport.aclose()


@pytest.fixture
def client(transport: MuralPayTransport) -> MuralPayClient:
    return MuralPayClient(transport)


@pytest.fixture
def controller(client: MuralPayClient) -> ViewController:
    return ViewController(client)
