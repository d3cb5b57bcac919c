"""Serializable snapshot of the session, rendered after every action."""

from typing import Any, Optional

from payout_portal.models.account import Account, ApiModel
from payout_portal.models.enums import AppView, ExecutionStatus, RecipientType
from payout_portal.models.payout import PayoutRequest


class SelectionsView(ApiModel):
    amount: str
    currency: str
    memo: str
    recipient_type: RecipientType


class ActivityEntry(ApiModel):
    action: str
    account_id: Optional[str] = None
    payout_request_id: Optional[str] = None
    details: dict[str, Any] = {}
    timestamp: str


class ViewState(ApiModel):
    current_view: AppView
    accounts: list[Account]
    selected_account: Optional[Account] = None
    account_loading: bool = False
    account_error: Optional[str] = None
    selections: SelectionsView
    form_values: dict[str, str] = {}
    payout_response: Optional[PayoutRequest] = None
    execution_status: ExecutionStatus = ExecutionStatus.IDLE
    can_execute: bool = False
    payout_error: Optional[str] = None
    search_results: list[PayoutRequest] = []
    activity: list[ActivityEntry] = []
