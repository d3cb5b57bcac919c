from payout_portal.models.account import Account, AccountDetails, DepositAccount, TokenAmount, WalletDetails
from payout_portal.models.enums import (
    AppView,
    Blockchain,
    ExecutionStatus,
    InvalidReason,
    PayoutFlow,
    PayoutRequestStatus,
    RecipientType,
)
from payout_portal.models.forms import PayoutFormInput, PayoutSelections
from payout_portal.models.payout import PayoutRequest, PayoutRequestPayload

__all__ = [
    "Account",
    "AccountDetails",
    "DepositAccount",
    "TokenAmount",
    "WalletDetails",
    "AppView",
    "Blockchain",
    "ExecutionStatus",
    "InvalidReason",
    "PayoutFlow",
    "PayoutRequestStatus",
    "RecipientType",
    "PayoutFormInput",
    "PayoutSelections",
    "PayoutRequest",
    "PayoutRequestPayload",
]
