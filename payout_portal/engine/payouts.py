"""
Payout state and the execution state machine.

The manager keeps the create-payout form selections (amount, currency, memo,
recipient type), the last payout request returned by the API, and the status
of the execute action:

    idle ──execute──▶ executing ──▶ success
                                └─▶ error

Execution is only allowed while the retained request is AWAITING_EXECUTION.
The transition to ``executing`` happens before the network call so a second
submission, or a new create, is refused. A failed execution keeps the previous request intact.
The retained request is only ever replaced by the server's representation;
its status is never inferred locally.
"""

import logging
from typing import Optional

from pydantic import ValidationError

from payout_portal.audit.logger import AuditTrail
from payout_portal.engine.payload_builder import PayoutValidationError, build_payout_payload
from payout_portal.models.enums import ExecutionStatus, PayoutFlow, RecipientType
from payout_portal.models.forms import PayoutFormInput, PayoutSelections
from payout_portal.models.payout import PayoutRequest
from payout_portal.providers.muralpay import MuralPayClient
from payout_portal.providers.transport import TransportError

logger = logging.getLogger("payout_portal.payouts")

DEFAULT_AMOUNT = "100"
DEFAULT_MEMO = "December contract"
EXECUTION_IN_PROGRESS = "Wait for the current payout to finish executing"


class PayoutManager:
    def __init__(self, client: MuralPayClient, audit: Optional[AuditTrail] = None):
        self._client = client
        self._audit = audit or AuditTrail()
        self.selections = PayoutSelections()
        self.payout_response: Optional[PayoutRequest] = None
        self.execution_status = ExecutionStatus.IDLE
        self.search_results: list[PayoutRequest] = []
        self.error: Optional[str] = None

    # ─── Form selections ─────────────────────────────────────────────

    def update_selections(
        self,
        amount: Optional[str] = None,
        currency: Optional[str] = None,
        memo: Optional[str] = None,
        recipient_type: Optional[RecipientType] = None,
    ) -> PayoutSelections:
        if amount is not None:
            self.selections.amount = amount
        if currency is not None:
            self.selections.currency = currency
        if memo is not None:
            self.selections.memo = memo
        if recipient_type is not None:
            self.selections.recipient_type = RecipientType(recipient_type)
        return self.selections

    def reset_form(self) -> None:
        """Clear the form selections. The last response and execution status survive."""
        self.selections = PayoutSelections()
        self.error = None

    def set_default_values(self) -> None:
        self.selections.amount = DEFAULT_AMOUNT
        self.selections.memo = DEFAULT_MEMO

    # ─── Lifecycle ───────────────────────────────────────────────────

    @property
    def can_execute(self) -> bool:
        return (
            self.payout_response is not None
            and self.payout_response.is_awaiting_execution
            and self.execution_status != ExecutionStatus.EXECUTING
        )

    async def create_payout(
        self,
        source_account_id: Optional[str],
        flow: PayoutFlow,
        form: PayoutFormInput,
    ) -> Optional[PayoutRequest]:
        """
        Build and submit a payout request.

        Rejected forms never reach the transport. On success the returned
        request replaces the retained one and execution status is reset to idle.
        Refused while an execution is in flight, so the executing request is
        not replaced before its result arrives.
        Returns None (with ``error`` set) on any failure.
        """
        if self.execution_status == ExecutionStatus.EXECUTING:
            self.error = EXECUTION_IN_PROGRESS
            logger.info("Create refused: payout %s is executing", self.payout_response.id)
            return None

        self.error = None
        try:
            payload = build_payout_payload(source_account_id or "", flow, form, self.selections)
        except PayoutValidationError as e:
            self.error = str(e)
            logger.info("Payout form rejected (%s): %s", e.reason.value if e.reason else "-", e)
            return None

        try:
            payout = await self._client.create_payout_request(payload)
        except (TransportError, ValidationError) as e:
            self.error = str(e)
            self._audit.log_event(
                "payout_creation_failed",
                account_id=source_account_id,
                details={"flow": flow.value, "error": str(e)},
            )
            return None

        self.payout_response = payout
        self.execution_status = ExecutionStatus.IDLE
        self._audit.log_event(
            "payout_created",
            account_id=source_account_id,
            payout_request_id=payout.id,
            details={
                "flow": flow.value,
                "status": payout.status,
                "amount": self.selections.amount,
                "currency": self.selections.currency,
                "recipient_type": self.selections.recipient_type.value,
            },
        )
        return payout

    async def execute_payout(self) -> Optional[PayoutRequest]:
        """
        Execute the retained payout request.

        A no-op returning None unless the request is awaiting execution.
        """
        if not self.can_execute:
            logger.info(
                "Execute ignored: status=%s execution=%s",
                self.payout_response.status if self.payout_response else None,
                self.execution_status.value,
            )
            return None

        current = self.payout_response
        self.error = None
        self.execution_status = ExecutionStatus.EXECUTING

        try:
            executed = await self._client.execute_payout_request(current.id, current.source_account_id)
        except (TransportError, ValidationError) as e:
            self.execution_status = ExecutionStatus.ERROR
            self.error = str(e)
            self._audit.log_event(
                "payout_execution_failed",
                account_id=current.source_account_id,
                payout_request_id=current.id,
                details={"error": str(e)},
            )
            return None

        self.execution_status = ExecutionStatus.SUCCESS
        self.payout_response = executed
        self._audit.log_event(
            "payout_executed",
            account_id=current.source_account_id,
            payout_request_id=executed.id,
            details={"status": executed.status},
        )
        return executed

    async def refresh_payout(self) -> Optional[PayoutRequest]:
        """Refetch the retained payout request and overwrite it."""
        if self.payout_response is None:
            return None

        self.error = None
        try:
            latest = await self._client.get_payout_request(self.payout_response.id)
        except (TransportError, ValidationError) as e:
            self.error = str(e)
            return None

        self.payout_response = latest
        return latest

    async def cancel_payout(self) -> Optional[PayoutRequest]:
        """
        Cancel the retained payout request while it awaits execution.

        The cancel endpoint returns no body, so the request is refetched to
        pick up the server's canceled representation.
        """
        if not self.can_execute:
            return None

        current = self.payout_response
        self.error = None
        try:
            await self._client.cancel_payout_request(current.id)
        except TransportError as e:
            self.error = str(e)
            self._audit.log_event(
                "payout_cancel_failed",
                account_id=current.source_account_id,
                payout_request_id=current.id,
                details={"error": str(e)},
            )
            return None

        self._audit.log_event(
            "payout_canceled",
            account_id=current.source_account_id,
            payout_request_id=current.id,
        )
        return await self.refresh_payout()

    async def search_payouts(
        self,
        organization_id: str,
        statuses: Optional[list[str]] = None,
    ) -> list[PayoutRequest]:
        self.error = None
        try:
            results = await self._client.search_payout_requests(organization_id, statuses)
        except (TransportError, ValidationError) as e:
            self.error = str(e)
            return []

        self.search_results = results
        return results
