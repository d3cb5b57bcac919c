"""
View controller for the portal.

Holds which screen is current and wires user actions to the account and
payout managers. It carries no business logic of its own: every action
delegates to a manager and the caller re-renders from ``render()``.

Screens:
  CREATE_ACCOUNT → WELCOME → CREATE_BLOCKCHAIN_PAYOUT / CREATE_FIAT_PAYOUT → VIEW_PAYOUT
"""

import logging
from typing import Optional

from payout_portal.audit.logger import AuditTrail
from payout_portal.engine.accounts import AccountManager
from payout_portal.engine.form_defaults import default_form_values
from payout_portal.engine.payouts import PayoutManager
from payout_portal.models.account import Account
from payout_portal.models.enums import AppView, PayoutFlow, RecipientType
from payout_portal.models.forms import PayoutFormInput
from payout_portal.models.payout import PayoutRequest
from payout_portal.providers.muralpay import MuralPayClient
from payout_portal.views.state import ActivityEntry, SelectionsView, ViewState

logger = logging.getLogger("payout_portal.views")

PAYOUT_FLOWS = {
    AppView.CREATE_BLOCKCHAIN_PAYOUT: PayoutFlow.BLOCKCHAIN,
    AppView.CREATE_FIAT_PAYOUT: PayoutFlow.FIAT,
}


class ViewController:
    def __init__(self, client: MuralPayClient, audit: Optional[AuditTrail] = None):
        self.audit = audit or AuditTrail()
        self.accounts = AccountManager(client, self.audit)
        self.payouts = PayoutManager(client, self.audit)
        self.current_view = AppView.CREATE_ACCOUNT
        self.form_values: dict[str, str] = {}

    def navigate(self, view: AppView) -> None:
        """
        Switch screens.

        Entering a create-payout screen resets the payout form and seeds that
        screen's example values. Other screens leave all state untouched.
        """
        view = AppView(view)
        if view in PAYOUT_FLOWS:
            self.payouts.reset_form()
            self.form_values = default_form_values(view)
            if self.form_values:
                self.payouts.set_default_values()
        logger.debug("View %s -> %s", self.current_view.value, view.value)
        self.current_view = view

    # ─── Accounts ────────────────────────────────────────────────────

    async def refresh_accounts(self) -> list[Account]:
        return await self.accounts.list_accounts()

    async def submit_create_account(self, name: str) -> Optional[Account]:
        account = await self.accounts.create_account(name)
        if account is not None:
            self.navigate(AppView.WELCOME)
        return account

    def select_account(self, account_id: str) -> None:
        self.accounts.select_account(account_id)

    # ─── Payouts ─────────────────────────────────────────────────────

    def update_selections(
        self,
        amount: Optional[str] = None,
        currency: Optional[str] = None,
        memo: Optional[str] = None,
        recipient_type: Optional[RecipientType] = None,
    ) -> None:
        self.payouts.update_selections(amount, currency, memo, recipient_type)

    def apply_default_values(self) -> None:
        self.payouts.set_default_values()

    async def submit_payout(self, form: Optional[PayoutFormInput] = None) -> Optional[PayoutRequest]:
        """
        Submit the current create-payout screen.

        Uses ``form`` when given, otherwise the values seeded for the screen.
        Moves to VIEW_PAYOUT on success.
        """
        flow = PAYOUT_FLOWS.get(self.current_view)
        if flow is None:
            self.payouts.error = "Open a create-payout screen before submitting a payout"
            return None

        if form is None:
            form = PayoutFormInput.from_values(self.form_values)
        self.form_values = form.model_dump()

        payout = await self.payouts.create_payout(self.accounts.selected_account_id, flow, form)
        if payout is not None:
            self.navigate(AppView.VIEW_PAYOUT)
        return payout

    async def execute_payout(self) -> Optional[PayoutRequest]:
        return await self.payouts.execute_payout()

    async def cancel_payout(self) -> Optional[PayoutRequest]:
        return await self.payouts.cancel_payout()

    async def refresh_payout(self) -> Optional[PayoutRequest]:
        return await self.payouts.refresh_payout()

    async def search_payouts(
        self,
        organization_id: str,
        statuses: Optional[list[str]] = None,
    ) -> list[PayoutRequest]:
        return await self.payouts.search_payouts(organization_id, statuses)

    # ─── Rendering ───────────────────────────────────────────────────

    def render(self) -> ViewState:
        selections = self.payouts.selections
        return ViewState(
            current_view=self.current_view,
            accounts=self.accounts.accounts,
            selected_account=self.accounts.selected_account,
            account_loading=self.accounts.loading,
            account_error=self.accounts.error,
            selections=SelectionsView(
                amount=selections.amount,
                currency=selections.currency,
                memo=selections.memo,
                recipient_type=selections.recipient_type,
            ),
            form_values=self.form_values,
            payout_response=self.payouts.payout_response,
            execution_status=self.payouts.execution_status,
            can_execute=self.payouts.can_execute,
            payout_error=self.payouts.error,
            search_results=self.payouts.search_results,
            activity=[
                ActivityEntry(
                    action=entry.action,
                    account_id=entry.account_id,
                    payout_request_id=entry.payout_request_id,
                    details=entry.details,
                    timestamp=entry.timestamp.isoformat(),
                )
                for entry in self.audit.recent()
            ],
        )
