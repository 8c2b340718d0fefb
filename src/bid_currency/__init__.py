"""Bid Currency - In-memory currency conversion rates for bid normalization."""

__version__ = "0.1.0"

# Custom exceptions
from .exceptions import (
    BidCurrencyException,
    ConfigurationException,
    LookupFailure,
    RateLookupException,
    RatesParseException,
)

# Rate tables and sources
from .rates import (
    ZERO_DATE,
    AggregateConversions,
    ConstantRates,
    Conversions,
    Rates,
    RatesStore,
    new_rates,
)

# Configuration utilities
from .utils import get_rates_file, load_environment, load_rates_file

__all__ = [
    "__version__",
    "Rates",
    "new_rates",
    "ZERO_DATE",
    "Conversions",
    "ConstantRates",
    "AggregateConversions",
    "RatesStore",
    "load_environment",
    "get_rates_file",
    "load_rates_file",
    # Exceptions
    "BidCurrencyException",
    "ConfigurationException",
    "LookupFailure",
    "RateLookupException",
    "RatesParseException",
]
