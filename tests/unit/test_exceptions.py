"""Unit tests for the exception hierarchy."""

import pytest

from bid_currency import (
    BidCurrencyException,
    ConfigurationException,
    LookupFailure,
    RateLookupException,
    RatesParseException,
)


@pytest.mark.unit
class TestExceptions:
    """Test cases for custom exceptions."""

    @pytest.mark.parametrize(
        "exception",
        [
            RatesParseException("bad document"),
            RateLookupException("no rate", kind=LookupFailure.TABLE_EMPTY),
            ConfigurationException("missing"),
        ],
    )
    def test_all_derive_from_base(self, exception: Exception) -> None:
        """Test every custom exception can be caught via the base class."""
        assert isinstance(exception, BidCurrencyException)

    def test_parse_exception_defaults(self) -> None:
        """Test optional attributes default to empty values."""
        error = RatesParseException("bad document")

        assert str(error) == "bad document"
        assert error.document is None
        assert error.validation_errors == []
