"""
Create-payout payload construction.

Turns a source account, the raw form values of a create-payout screen and the
payout manager's retained selections into the single-line-item payload the
API expects:

    {
      sourceAccountId,
      payouts: [{amount: {tokenAmount, tokenSymbol}, payoutDetails, recipientInfo}],
      memo
    }

Payout details follow the screen's flow (blockchain or fiat) and recipient
info follows the retained recipient type (individual or business). The
builder is pure: it performs no I/O and raises before anything is sent.
"""

import logging

from payout_portal.engine.validation import ValidationResult, check_payout_form
from payout_portal.models.enums import Blockchain, PayoutFlow, RecipientType
from payout_portal.models.forms import PayoutFormInput, PayoutSelections
from payout_portal.models.payout import (
    BlockchainPayoutDetails,
    BusinessRecipientInfo,
    FiatAndRailDetails,
    FiatPayoutDetails,
    IndividualRecipientInfo,
    PayoutAmount,
    PayoutDetails,
    PayoutLineItemPayload,
    PayoutRequestPayload,
    PhysicalAddress,
    RecipientInfo,
)
from payout_portal.routing.fiat_rails import DEFAULT_COUNTRY
from payout_portal.routing.rail_selector import select_fiat_rail

logger = logging.getLogger("payout_portal.payload_builder")


class PayoutValidationError(ValueError):
    """The payout form was rejected before submission."""

    def __init__(self, result: ValidationResult):
        super().__init__(result.message)
        self.reason = result.reason


def build_payout_payload(
    source_account_id: str,
    flow: PayoutFlow,
    form: PayoutFormInput,
    selections: PayoutSelections,
) -> PayoutRequestPayload:
    """
    Build the create-payout payload.

    Raises:
        PayoutValidationError: If the account is missing, the amount is not a
            positive finite number, or the chain is unsupported.
    """
    result = check_payout_form(source_account_id, selections.amount, flow, form.blockchain)
    if not result.valid:
        raise PayoutValidationError(result)

    # The fiat screens default to a Colombian recipient
    country = form.country
    if flow == PayoutFlow.FIAT and not country:
        country = DEFAULT_COUNTRY

    line_item = PayoutLineItemPayload(
        amount=PayoutAmount(token_amount=result.amount, token_symbol=selections.currency),
        payout_details=_payout_details(flow, form, country),
        recipient_info=_recipient_info(selections.recipient_type, form, country),
    )

    payload = PayoutRequestPayload(
        source_account_id=source_account_id,
        payouts=[line_item],
        memo=selections.memo or None,
    )
    logger.debug(
        "Built %s payout payload: target=%s line_items=%d",
        flow.value,
        _target(line_item.payout_details),
        len(payload.payouts),
    )
    return payload


def _target(details: PayoutDetails) -> str:
    """Chain or fiat rail code, for logging without recipient data."""
    if isinstance(details, FiatPayoutDetails):
        return details.fiat_and_rail_details.type
    return details.blockchain.value


def _payout_details(flow: PayoutFlow, form: PayoutFormInput, country: str) -> PayoutDetails:
    if flow == PayoutFlow.BLOCKCHAIN:
        return BlockchainPayoutDetails(
            wallet_address=form.wallet_address,
            blockchain=Blockchain(form.blockchain.strip().lower()),
        )

    if flow == PayoutFlow.FIAT:
        rail = select_fiat_rail(country, form.rail)
        return FiatPayoutDetails(
            bank_name=form.bank_name,
            bank_account_owner=form.bank_account_owner,
            fiat_and_rail_details=FiatAndRailDetails(
                type=rail.code,
                symbol=rail.symbol,
                account_type=form.account_type,
                phone_number=form.phone_number,
                bank_account_number=form.bank_account_number,
                document_number=form.document_number,
                document_type=form.document_type,
            ),
        )

    raise ValueError(f"Unknown payout flow: {flow}")


def _recipient_info(recipient_type: RecipientType, form: PayoutFormInput, country: str) -> RecipientInfo:
    address = PhysicalAddress(
        address1=form.street,
        country=country,
        state=form.state,
        city=form.city,
        zip=form.postal_code,
    )

    if recipient_type == RecipientType.INDIVIDUAL:
        return IndividualRecipientInfo(
            first_name=form.first_name,
            last_name=form.last_name,
            email=form.email,
            date_of_birth=form.date_of_birth,
            physical_address=address,
        )

    if recipient_type == RecipientType.BUSINESS:
        return BusinessRecipientInfo(
            first_name=form.business_name,
            email=form.email,
            physical_address=address,
        )

    raise ValueError(f"Unknown recipient type: {recipient_type}")
