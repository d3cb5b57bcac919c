"""
Payout request models.

Two families live here:

  - Payload models: what the portal sends when creating a payout request.
    Payout details and recipient info are tagged unions discriminated on
    ``type``, so a business recipient cannot carry individual-only fields
    and a blockchain payout cannot carry bank fields.
  - Response models: what the API returns. These are lenient, since the
    server adds settlement fields once a payout is processed.
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from payout_portal.models.account import ApiModel, TokenAmount
from payout_portal.models.enums import Blockchain, PayoutRequestStatus


class PayloadModel(BaseModel):
    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "extra": "forbid",
    }


# ─── Payload ─────────────────────────────────────────────────────────────


class PayoutAmount(PayloadModel):
    token_amount: float
    token_symbol: str


class BlockchainPayoutDetails(PayloadModel):
    type: Literal["blockchain"] = "blockchain"
    wallet_address: str
    blockchain: Blockchain


class FiatAndRailDetails(PayloadModel):
    type: str  # Rail code, e.g. "cop"
    symbol: str  # Rail currency, e.g. "COP"
    account_type: str = ""
    phone_number: str = ""
    bank_account_number: str = ""
    document_number: str = ""
    document_type: str = ""


class FiatPayoutDetails(PayloadModel):
    type: Literal["fiat"] = "fiat"
    bank_name: str = ""
    bank_account_owner: str = ""
    fiat_and_rail_details: FiatAndRailDetails


PayoutDetails = Annotated[
    Union[BlockchainPayoutDetails, FiatPayoutDetails],
    Field(discriminator="type"),
]


class PhysicalAddress(PayloadModel):
    address1: str = ""
    country: str = ""
    state: str = ""
    city: str = ""
    zip: str = ""


class IndividualRecipientInfo(PayloadModel):
    type: Literal["individual"] = "individual"
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    date_of_birth: str = ""
    physical_address: PhysicalAddress


class BusinessRecipientInfo(PayloadModel):
    """Business recipient. The API takes the business name in ``firstName``."""

    type: Literal["business"] = "business"
    first_name: str = ""
    last_name: Literal[""] = ""
    email: str = ""
    physical_address: PhysicalAddress


RecipientInfo = Annotated[
    Union[IndividualRecipientInfo, BusinessRecipientInfo],
    Field(discriminator="type"),
]


class PayoutLineItemPayload(PayloadModel):
    amount: PayoutAmount
    payout_details: PayoutDetails
    recipient_info: RecipientInfo


class PayoutRequestPayload(PayloadModel):
    """Body of ``POST /api/payouts/payout``."""

    source_account_id: str
    payouts: list[PayoutLineItemPayload] = Field(min_length=1)
    memo: Optional[str] = None

    def to_json(self) -> dict:
        """Wire representation: camelCase keys, unset memo omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# ─── Responses ───────────────────────────────────────────────────────────


class FiatAmount(ApiModel):
    fiat_amount: float
    fiat_currency_code: str


class FiatPayoutStatus(ApiModel):
    type: str


class SettlementDetails(ApiModel):
    """Server-populated settlement fields for a processed line item."""

    type: Optional[str] = None
    fiat_and_rail_code: Optional[str] = None
    fiat_amount: Optional[FiatAmount] = None
    transaction_fee: Optional[TokenAmount] = None
    exchange_rate: Optional[float] = None
    exchange_fee_percentage: Optional[float] = None
    fee_total: Optional[TokenAmount] = None
    fiat_payout_status: Optional[FiatPayoutStatus] = None


class PayoutLineItem(ApiModel):
    id: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    amount: Optional[TokenAmount] = None
    recipient_info: Optional[dict] = None
    payout_details: Optional[dict] = None
    details: Optional[SettlementDetails] = None


class PayoutRequest(ApiModel):
    """A payout request owned by the remote service."""

    id: str
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    source_account_id: str = ""
    memo: Optional[str] = None
    status: str = ""
    payouts: list[PayoutLineItem] = []

    @property
    def is_awaiting_execution(self) -> bool:
        return self.status == PayoutRequestStatus.AWAITING_EXECUTION.value
