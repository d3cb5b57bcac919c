"""
Payout form checks with categorized rejection reasons.

Before a create-payout request is sent, we verify:
  1. A source account is selected
  2. The amount parses to a finite number strictly greater than zero
  3. Blockchain payouts name a supported chain

A rejected form never reaches the transport. Each check returns a
structured result so the caller can show an inline message.
"""

import math
import re
from dataclasses import dataclass
from typing import Optional

from payout_portal.models.enums import Blockchain, InvalidReason, PayoutFlow


SUPPORTED_BLOCKCHAINS = {chain.value for chain in Blockchain}

# Unsigned decimal with optional exponent; digit separators are rejected.
DECIMAL_AMOUNT = re.compile(r"([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


@dataclass
class ValidationResult:
    """Result of a payout form check."""

    valid: bool
    reason: Optional[InvalidReason] = None
    message: str = ""
    amount: Optional[float] = None  # Parsed amount when valid


def parse_amount(raw: Optional[str]) -> Optional[float]:
    """Parse a decimal amount string. Returns None unless finite and positive."""
    if raw is None:
        return None
    text = str(raw).strip()
    if not DECIMAL_AMOUNT.fullmatch(text):
        return None
    amount = float(text)
    if not math.isfinite(amount) or amount <= 0:
        return None
    return amount


def check_payout_form(
    source_account_id: Optional[str],
    amount: Optional[str],
    flow: PayoutFlow,
    blockchain: Optional[str] = None,
) -> ValidationResult:
    """
    Check whether a payout form may be submitted.

    Args:
        source_account_id: Account the payout is drawn from.
        amount: Raw amount field value.
        flow: Blockchain or fiat payout screen.
        blockchain: Chain name from the form (blockchain flow only).

    Returns:
        ValidationResult with the parsed amount, or the rejection reason.
    """
    if not source_account_id:
        return ValidationResult(
            valid=False,
            reason=InvalidReason.MISSING_SOURCE_ACCOUNT,
            message="No account available to create payout",
        )

    parsed = parse_amount(amount)
    if parsed is None:
        return ValidationResult(
            valid=False,
            reason=InvalidReason.INVALID_AMOUNT,
            message="Please enter a valid positive amount",
        )

    if flow == PayoutFlow.BLOCKCHAIN:
        chain = (blockchain or "").strip().lower()
        if chain not in SUPPORTED_BLOCKCHAINS:
            return ValidationResult(
                valid=False,
                reason=InvalidReason.UNSUPPORTED_BLOCKCHAIN,
                message=f"Unsupported blockchain: {blockchain or '(none)'}",
            )

    return ValidationResult(valid=True, amount=parsed)
