"""Shared pytest configuration and fixtures for the test suite."""

from collections.abc import Callable
from datetime import UTC, datetime

import pytest

from bid_currency.rates import Rates, new_rates

RATES_DOCUMENT_TEMPLATE = """{
    "dataAsOf": %s,
    "conversions": {
        "USD": {
            "GBP": 0.7662523901
        },
        "GBP": {
            "USD": 1.3050530256
        }
    }
}"""


@pytest.fixture
def make_document() -> Callable[[str], str]:
    """Build the sample document with a raw JSON literal for ``dataAsOf``."""

    def _make(data_as_of: str) -> str:
        return RATES_DOCUMENT_TEMPLATE % data_as_of

    return _make


@pytest.fixture
def rates_document(make_document: Callable[[str], str]) -> str:
    """Well-formed rates document dated 2018-09-12."""
    return make_document('"2018-09-12"')


@pytest.fixture
def document_conversions() -> dict[str, dict[str, float]]:
    """Conversions contained in ``rates_document``."""
    return {
        "USD": {"GBP": 0.7662523901},
        "GBP": {"USD": 1.3050530256},
    }


@pytest.fixture
def sample_rates() -> Rates:
    """Small table with USD<->GBP rates only."""
    return new_rates(
        datetime.now(UTC),
        {
            "USD": {"GBP": 0.77208},
            "GBP": {"USD": 1.2952},
        },
    )


# Pytest configuration
pytest_plugins: list[str] = []
