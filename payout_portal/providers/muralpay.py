"""
Typed wrappers over the Mural Pay endpoints the portal uses.

POST /api/accounts                        Create an account.
GET  /api/accounts                        List accounts.
POST /api/payouts/payout                  Create a payout request.
POST /api/payouts/search                  Search payout requests.
GET  /api/payouts/payout/{id}             Get one payout request.
POST /api/payouts/payout/{id}/execute     Execute (transfer key + on-behalf-of).
POST /api/payouts/payout/{id}/cancel      Cancel.
"""

from typing import Optional

from payout_portal.models.account import Account
from payout_portal.models.payout import PayoutRequest, PayoutRequestPayload
from payout_portal.providers.transport import MuralPayTransport


class MuralPayClient:
    def __init__(self, transport: MuralPayTransport):
        self.transport = transport

    # Accounts

    async def create_account(self, name: str) -> Account:
        data = await self.transport.send("POST", "/api/accounts", {"name": name})
        return Account.model_validate(data)

    async def get_accounts(self) -> list[Account]:
        data = await self.transport.send("GET", "/api/accounts")
        return [Account.model_validate(item) for item in data or []]

    # Payouts

    async def create_payout_request(self, payload: PayoutRequestPayload) -> PayoutRequest:
        data = await self.transport.send("POST", "/api/payouts/payout", payload.to_json())
        return PayoutRequest.model_validate(data)

    async def search_payout_requests(
        self,
        organization_id: str,
        statuses: Optional[list[str]] = None,
    ) -> list[PayoutRequest]:
        body: dict = {"organization_id": organization_id}
        if statuses:
            body["status"] = statuses
        data = await self.transport.send("POST", "/api/payouts/search", body)
        # The search endpoint may wrap results in {"results": [...]}
        if isinstance(data, dict):
            data = data.get("results", [])
        return [PayoutRequest.model_validate(item) for item in data or []]

    async def get_payout_request(self, payout_request_id: str) -> PayoutRequest:
        data = await self.transport.send("GET", f"/api/payouts/payout/{payout_request_id}")
        return PayoutRequest.model_validate(data)

    async def execute_payout_request(self, payout_request_id: str, account_id: str) -> PayoutRequest:
        """Execute a payout request that is awaiting execution."""
        data = await self.transport.send(
            "POST",
            f"/api/payouts/payout/{payout_request_id}/execute",
            use_transfer_key=True,
            on_behalf_of=account_id,
        )
        return PayoutRequest.model_validate(data)

    async def cancel_payout_request(self, payout_request_id: str) -> None:
        await self.transport.send("POST", f"/api/payouts/payout/{payout_request_id}/cancel")
