"""Tests for the payout manager and its execution state machine."""

import asyncio

import httpx
import pytest

from payout_portal.engine.payouts import EXECUTION_IN_PROGRESS, PayoutManager
from payout_portal.models.enums import ExecutionStatus, PayoutFlow, RecipientType
from payout_portal.models.forms import PayoutFormInput
from payout_portal.models.payout import PayoutRequest
from payout_portal.providers.muralpay import MuralPayClient
from payout_portal.providers.transport import MuralPayTransport

FORM = PayoutFormInput(
    wallet_address="0xabc",
    blockchain="ethereum",
    first_name="Ada",
    last_name="Lovelace",
    email="ada@example.com",
    date_of_birth="1990-12-10",
)


@pytest.fixture
def manager(client) -> PayoutManager:
    return PayoutManager(client)


async def create(manager: PayoutManager, amount: str = "100") -> PayoutRequest:
    manager.update_selections(amount=amount)
    return await manager.create_payout("a1", PayoutFlow.BLOCKCHAIN, FORM)


class TestCreate:
    @pytest.mark.asyncio
    async def test_retains_server_response(self, manager, fake_api):
        payout = await create(manager)

        assert payout.id == "pr-1"
        assert manager.payout_response.id == fake_api.payout_requests["pr-1"]["id"]
        assert manager.payout_response.status == "AWAITING_EXECUTION"
        assert manager.execution_status == ExecutionStatus.IDLE
        assert manager.can_execute

    @pytest.mark.asyncio
    async def test_status_is_taken_from_server(self, manager, fake_api):
        await create(manager)
        fake_api.payout_requests["pr-1"]["status"] = "PENDING"
        await manager.refresh_payout()

        assert manager.payout_response.status == "PENDING"
        assert not manager.can_execute

    @pytest.mark.asyncio
    @pytest.mark.parametrize("amount", ["", "0", "-1", "abc", "nan"])
    async def test_invalid_amount_never_calls_api(self, manager, fake_api, amount):
        assert await create(manager, amount) is None
        assert manager.error == "Please enter a valid positive amount"
        assert fake_api.requests == []

    @pytest.mark.asyncio
    async def test_missing_account_never_calls_api(self, manager, fake_api):
        manager.update_selections(amount="100")
        assert await manager.create_payout(None, PayoutFlow.BLOCKCHAIN, FORM) is None
        assert manager.error == "No account available to create payout"
        assert fake_api.requests == []

    @pytest.mark.asyncio
    async def test_api_failure_sets_error(self, manager, fake_api):
        fake_api.fail_next("POST", "/api/payouts/payout", 400, "invalid recipient")

        assert await create(manager) is None
        assert manager.error == "POST /api/payouts/payout failed: 400 invalid recipient"
        assert manager.payout_response is None

    @pytest.mark.asyncio
    async def test_sends_retained_selections(self, manager, fake_api):
        manager.update_selections(amount="25", currency="USDT", memo="Invoice 7", recipient_type=RecipientType.BUSINESS)
        await manager.create_payout("a1", PayoutFlow.BLOCKCHAIN, FORM.model_copy(update={"business_name": "Acme"}))

        body = fake_api.last_body("POST", "/api/payouts/payout")
        assert body["memo"] == "Invoice 7"
        assert body["payouts"][0]["amount"] == {"tokenAmount": 25, "tokenSymbol": "USDT"}
        assert body["payouts"][0]["recipientInfo"]["firstName"] == "Acme"


class TestExecute:
    @pytest.mark.asyncio
    async def test_success(self, manager, fake_api):
        await create(manager)
        observed = []
        fake_api.observers.append(lambda request: observed.append(manager.execution_status))

        executed = await manager.execute_payout()

        assert observed == [ExecutionStatus.EXECUTING]
        assert manager.execution_status == ExecutionStatus.SUCCESS
        assert executed.status == "EXECUTED"
        assert manager.payout_response.status == "EXECUTED"
        assert manager.payout_response.payouts[0].details.fiat_amount.fiat_currency_code == "COP"
        assert manager.error is None
        assert not manager.can_execute

    @pytest.mark.asyncio
    async def test_failure_keeps_previous_response(self, manager, fake_api):
        await create(manager)
        before = manager.payout_response
        fake_api.fail_next("POST", "/api/payouts/payout/pr-1/execute", 500, "Internal error")

        assert await manager.execute_payout() is None

        assert manager.execution_status == ExecutionStatus.ERROR
        assert manager.payout_response is before
        assert manager.payout_response.status == "AWAITING_EXECUTION"
        assert manager.error == "POST /api/payouts/payout/pr-1/execute failed: 500 Internal error"

    @pytest.mark.asyncio
    async def test_no_retry_after_failure(self, manager, fake_api):
        await create(manager)
        fake_api.fail_next("POST", "/api/payouts/payout/pr-1/execute")

        await manager.execute_payout()

        assert len(fake_api.calls("POST", "/api/payouts/payout/pr-1/execute")) == 1

    @pytest.mark.asyncio
    async def test_noop_without_payout(self, manager, fake_api):
        assert await manager.execute_payout() is None
        assert manager.execution_status == ExecutionStatus.IDLE
        assert fake_api.requests == []

    @pytest.mark.asyncio
    async def test_noop_unless_awaiting_execution(self, manager, fake_api):
        await create(manager)
        await manager.execute_payout()
        calls = len(fake_api.requests)

        assert await manager.execute_payout() is None
        assert len(fake_api.requests) == calls
        assert manager.execution_status == ExecutionStatus.SUCCESS

    @pytest.mark.asyncio
    async def test_noop_while_executing(self, manager, fake_api):
        await create(manager)
        manager.execution_status = ExecutionStatus.EXECUTING

        assert not manager.can_execute
        assert await manager.execute_payout() is None
        assert fake_api.calls("POST", "/api/payouts/payout/pr-1/execute") == []

    @pytest.mark.asyncio
    async def test_create_refused_while_execute_in_flight(self, settings, fake_api):
        started = asyncio.Event()
        release = asyncio.Event()

        async def held_execute(request: httpx.Request) -> httpx.Response:
            if request.url.path.endswith("/execute"):
                started.set()
                await release.wait()
            return fake_api.handler(request)

        async with MuralPayTransport(settings, transport=httpx.MockTransport(held_execute)) as api_transport:
            manager = PayoutManager(MuralPayClient(api_transport))
            await create(manager)
            execution = asyncio.create_task(manager.execute_payout())
            await started.wait()

            assert await create(manager) is None
            assert manager.error == EXECUTION_IN_PROGRESS
            assert manager.execution_status == ExecutionStatus.EXECUTING

            release.set()
            executed = await execution

        assert len(fake_api.calls("POST", "/api/payouts/payout")) == 1
        assert executed.id == "pr-1"
        assert manager.payout_response.id == "pr-1"
        assert manager.payout_response.status == "EXECUTED"
        assert manager.execution_status == ExecutionStatus.SUCCESS


class TestResetAndDefaults:
    @pytest.mark.asyncio
    async def test_reset_keeps_response_and_status(self, manager, fake_api):
        manager.update_selections(currency="USDT", memo="m", recipient_type=RecipientType.BUSINESS)
        await create(manager)
        await manager.execute_payout()

        manager.reset_form()

        assert manager.selections.amount == ""
        assert manager.selections.currency == "USDC"
        assert manager.selections.memo == ""
        assert manager.selections.recipient_type == RecipientType.INDIVIDUAL
        assert manager.payout_response.status == "EXECUTED"
        assert manager.execution_status == ExecutionStatus.SUCCESS

    @pytest.mark.asyncio
    async def test_default_values(self, manager):
        manager.set_default_values()
        assert manager.selections.amount == "100"
        assert manager.selections.memo == "December contract"


class TestCancelRefreshSearch:
    @pytest.mark.asyncio
    async def test_cancel_refetches_canceled_request(self, manager, fake_api):
        await create(manager)

        canceled = await manager.cancel_payout()

        assert canceled.status == "CANCELED"
        assert manager.payout_response.status == "CANCELED"
        assert not manager.can_execute
        assert len(fake_api.calls("GET", "/api/payouts/payout/pr-1")) == 1

    @pytest.mark.asyncio
    async def test_cancel_noop_after_execution(self, manager, fake_api):
        await create(manager)
        await manager.execute_payout()

        assert await manager.cancel_payout() is None
        assert fake_api.calls("POST", "/api/payouts/payout/pr-1/cancel") == []

    @pytest.mark.asyncio
    async def test_cancel_failure_keeps_response(self, manager, fake_api):
        await create(manager)
        fake_api.fail_next("POST", "/api/payouts/payout/pr-1/cancel", 409, "already executing")

        assert await manager.cancel_payout() is None
        assert manager.payout_response.status == "AWAITING_EXECUTION"
        assert "409" in manager.error

    @pytest.mark.asyncio
    async def test_refresh_failure_keeps_response(self, manager, fake_api):
        await create(manager)
        fake_api.fail_next("GET", "/api/payouts/payout/pr-1", 502, "bad gateway")

        assert await manager.refresh_payout() is None
        assert manager.payout_response.id == "pr-1"
        assert manager.error == "GET /api/payouts/payout/pr-1 failed: 502 bad gateway"

    @pytest.mark.asyncio
    async def test_search_stores_results(self, manager, fake_api):
        fake_api.add_payout_request()
        fake_api.add_payout_request(status="EXECUTED")

        results = await manager.search_payouts("org-1")

        assert [p.id for p in results] == ["pr-1", "pr-2"]
        assert manager.search_results == results
