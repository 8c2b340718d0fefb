"""Currency conversion rate tables and rate sources."""

from .conversions import AggregateConversions, ConstantRates, Conversions
from .rates import DATE_FORMAT, ZERO_DATE, Rates, new_rates, parse_data_as_of
from .store import RatesStore

__all__ = [
    "AggregateConversions",
    "ConstantRates",
    "Conversions",
    "DATE_FORMAT",
    "ZERO_DATE",
    "Rates",
    "RatesStore",
    "new_rates",
    "parse_data_as_of",
]
