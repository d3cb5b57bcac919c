"""
Fiat rail selection.

Picks the rail a fiat payout settles through:
  1. An explicit rail code from the form, when it names a known rail
  2. The rail configured for the recipient country
  3. The default (Colombian peso) rail
"""

from dataclasses import dataclass
from typing import Optional

from payout_portal.routing.fiat_rails import COUNTRY_RAILS, DEFAULT_RAIL, FIAT_RAILS


@dataclass
class RailDecision:
    """Result of the rail selection process."""

    code: str  # "cop", "mxn", ...
    symbol: str  # "COP", "MXN", ...
    label: str  # Human-readable: "Colombian peso bank transfer (COP)"

    @property
    def is_default(self) -> bool:
        return self.code == DEFAULT_RAIL


def select_fiat_rail(
    country_code: Optional[str],
    rail_code: Optional[str] = None,
) -> RailDecision:
    """
    Select the fiat rail for a payout.

    Args:
        country_code: ISO 3166-1 alpha-2 country code of the recipient.
        rail_code: Rail explicitly chosen on the form. Unknown codes are ignored.

    Returns:
        RailDecision with the rail code and payout currency.
    """
    code = (rail_code or "").strip().lower()
    if code not in FIAT_RAILS:
        country = (country_code or "").strip().upper()
        code = COUNTRY_RAILS.get(country, DEFAULT_RAIL)

    cfg = FIAT_RAILS[code]
    return RailDecision(
        code=cfg["code"],
        symbol=cfg["symbol"],
        label=f"{cfg['name']} ({cfg['symbol']})",
    )
