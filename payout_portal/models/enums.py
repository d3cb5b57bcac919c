"""Enumerations for the payout portal domain model."""

from enum import Enum


class PayoutRequestStatus(str, Enum):
    """Lifecycle states reported by the API for a payout request."""

    AWAITING_EXECUTION = "AWAITING_EXECUTION"
    PENDING = "PENDING"
    EXECUTING = "EXECUTING"
    EXECUTED = "EXECUTED"
    SUCCESS = "SUCCESS"
    ERROR = "ERROR"
    CANCELED = "CANCELED"


class ExecutionStatus(str, Enum):
    """Local state of the execute action for the retained payout request."""

    IDLE = "idle"
    EXECUTING = "executing"
    SUCCESS = "success"
    ERROR = "error"


class RecipientType(str, Enum):
    INDIVIDUAL = "individual"
    BUSINESS = "business"


class PayoutFlow(str, Enum):
    """Which payout-details variant a create-payout screen builds."""

    BLOCKCHAIN = "blockchain"
    FIAT = "fiat"


class Blockchain(str, Enum):
    """Chains accepted for blockchain payouts."""

    ETHEREUM = "ethereum"
    POLYGON = "polygon"
    BASE = "base"
    CELO = "celo"


class AppView(str, Enum):
    """Screens the view controller can show."""

    CREATE_ACCOUNT = "CREATE_ACCOUNT"
    WELCOME = "WELCOME"
    CREATE_BLOCKCHAIN_PAYOUT = "CREATE_BLOCKCHAIN_PAYOUT"
    CREATE_FIAT_PAYOUT = "CREATE_FIAT_PAYOUT"
    VIEW_PAYOUT = "VIEW_PAYOUT"


class InvalidReason(str, Enum):
    """Categorized reasons for rejecting a payout form before submission."""

    INVALID_AMOUNT = "invalid_amount"
    UNSUPPORTED_BLOCKCHAIN = "unsupported_blockchain"
    MISSING_SOURCE_ACCOUNT = "missing_source_account"
