"""Structured input handed from the UI layer to the payout builder."""

from dataclasses import dataclass
from typing import Any, Mapping

from pydantic import BaseModel, field_validator
from pydantic.alias_generators import to_camel

from payout_portal.models.enums import RecipientType


class PayoutFormInput(BaseModel):
    """
    Raw form field values for a create-payout screen.

    Every field is a string and a missing field is ``""``, never ``None``.
    Blockchain screens fill the wallet fields, fiat screens the bank fields;
    the recipient and address fields are shared by both.
    """

    # Blockchain payout details
    wallet_address: str = ""
    blockchain: str = "ethereum"

    # Fiat payout details
    bank_name: str = ""
    bank_account_owner: str = ""
    rail: str = ""  # Explicit rail code; selected from country when blank
    account_type: str = ""
    phone_number: str = ""
    bank_account_number: str = ""
    document_number: str = ""
    document_type: str = ""

    # Recipient
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    date_of_birth: str = ""
    business_name: str = ""

    # Address
    street: str = ""
    city: str = ""
    state: str = ""
    postal_code: str = ""
    country: str = ""

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    @field_validator("*", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @classmethod
    def from_values(cls, values: Mapping[str, Any]) -> "PayoutFormInput":
        """Build from a flat mapping of field name (snake or camel case) to value."""
        return cls.model_validate(dict(values))


@dataclass
class PayoutSelections:
    """Form selections the payout manager keeps between screens."""

    amount: str = ""
    currency: str = "USDC"
    memo: str = ""
    recipient_type: RecipientType = RecipientType.INDIVIDUAL
