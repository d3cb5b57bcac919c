"""
Fiat payout rail configuration.

Maps ISO 3166-1 alpha-2 recipient countries to the fiat rail the API settles
through. Each rail has a lower-case rail code (the ``fiatAndRailDetails.type``
value) and the currency it pays out in (the ``symbol`` value). Rails differ
in which identity and banking fields they require; the Colombian rail, for
example, needs a phone number and a national document.
"""

from typing import TypedDict


class FiatRailConfig(TypedDict):
    """Configuration for a fiat payout rail."""

    code: str  # fiatAndRailDetails.type, e.g. "cop"
    symbol: str  # ISO 4217 payout currency
    name: str  # Human-readable rail name


FIAT_RAILS: dict[str, FiatRailConfig] = {
    "cop": {"code": "cop", "symbol": "COP", "name": "Colombian peso bank transfer"},
    "ars": {"code": "ars", "symbol": "ARS", "name": "Argentine peso bank transfer"},
    "mxn": {"code": "mxn", "symbol": "MXN", "name": "Mexican peso SPEI"},
    "brl": {"code": "brl", "symbol": "BRL", "name": "Brazilian real PIX"},
    "usd": {"code": "usd", "symbol": "USD", "name": "US dollar ACH"},
    "eur": {"code": "eur", "symbol": "EUR", "name": "Euro SEPA"},
}


COUNTRY_RAILS: dict[str, str] = {
    # ─── Latin America ────────────────────────────────────────────────
    "CO": "cop",  # Colombia
    "AR": "ars",  # Argentina
    "MX": "mxn",  # Mexico
    "BR": "brl",  # Brazil
    # ─── United States ────────────────────────────────────────────────
    "US": "usd",
    # ─── SEPA Zone (EUR) ──────────────────────────────────────────────
    "DE": "eur",  # Germany
    "FR": "eur",  # France
    "ES": "eur",  # Spain
    "NL": "eur",  # Netherlands
    "IT": "eur",  # Italy
    "AT": "eur",  # Austria
    "BE": "eur",  # Belgium
    "IE": "eur",  # Ireland
    "PT": "eur",  # Portugal
}


# Rail used when the recipient country has no configured rail
DEFAULT_RAIL = "cop"
DEFAULT_COUNTRY = "CO"
