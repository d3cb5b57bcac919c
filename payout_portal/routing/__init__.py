from payout_portal.routing.fiat_rails import COUNTRY_RAILS, DEFAULT_COUNTRY, FIAT_RAILS
from payout_portal.routing.rail_selector import RailDecision, select_fiat_rail

__all__ = ["COUNTRY_RAILS", "DEFAULT_COUNTRY", "FIAT_RAILS", "select_fiat_rail", "RailDecision"]
