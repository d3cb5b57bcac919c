"""Account records as returned by the Mural Pay API."""

from typing import Optional

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """
    Base for records exchanged with the API.

    Fields are snake_case in Python and camelCase on the wire. Unknown
    server fields are kept so a refetched record is never silently narrowed.
    """

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "extra": "allow",
    }


class TokenAmount(ApiModel):
    token_amount: float
    token_symbol: str


class WalletDetails(ApiModel):
    wallet_address: str = ""
    blockchain: str = ""


class DepositAccount(ApiModel):
    """Bank account linked to an account for fiat deposits."""

    id: str = ""
    account_id: str = ""
    status: str = ""
    currency: str = ""
    bank_beneficiary_name: str = ""
    bank_beneficiary_address: str = ""
    bank_name: str = ""
    bank_address: str = ""
    bank_routing_number: str = ""
    bank_account_number: str = ""
    payment_rails: list[str] = []


class AccountDetails(ApiModel):
    balances: list[TokenAmount] = []
    wallet_details: Optional[WalletDetails] = None
    deposit_account: Optional[DepositAccount] = None


class Account(ApiModel):
    """
    An account owned by the remote service.

    Only ``id`` is guaranteed; the create call may answer with a minimal
    record that is filled in by a later list refresh.
    """

    id: str
    name: str = ""
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    status: Optional[str] = None
    is_api_enabled: bool = False
    account_details: Optional[AccountDetails] = None
