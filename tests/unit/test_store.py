"""Unit tests for RatesStore publication and refresh."""

import logging
import threading

import pytest

from bid_currency.exceptions import RatesParseException
from bid_currency.rates.conversions import ConstantRates
from bid_currency.rates.rates import Rates
from bid_currency.rates.store import RatesStore


@pytest.mark.unit
class TestRatesStore:
    """Test cases for the RatesStore class."""

    def test_initial_table_is_empty(self) -> None:
        """Test a new store serves the zero-value table."""
        store = RatesStore()

        assert store.current() == Rates()
        assert store.last_updated is None

    def test_initial_table_can_be_given(self) -> None:
        """Test a store can start from a non-feed rate source."""
        store = RatesStore(initial=ConstantRates())

        assert store.get_rate("EUR", "EUR") == 1.0

    def test_refresh_publishes_table(self, rates_document: str) -> None:
        """Test a valid document replaces the published table."""
        store = RatesStore()

        rates = store.refresh(rates_document)

        assert store.current() is rates
        assert store.get_rate("USD", "GBP") == 0.7662523901
        assert store.last_updated is not None

    def test_failed_refresh_keeps_previous_table(
        self, sample_rates: Rates, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test a structural error leaves the previous table published."""
        store = RatesStore(initial=sample_rates)

        with caplog.at_level(logging.WARNING, logger="bid_currency.rates.store"):
            with pytest.raises(RatesParseException):
                store.refresh('{"conversions": {"USD": {"GBP": 0.5,}}}')

        assert store.current() is sample_rates
        assert store.last_updated is None
        assert "keeping previous table" in caplog.text

    def test_publish_swaps_reference(self, sample_rates: Rates) -> None:
        """Test publishing an existing table replaces the reference."""
        store = RatesStore()

        store.publish(sample_rates)

        assert store.current() is sample_rates

    def test_concurrent_readers_see_whole_tables(
        self, sample_rates: Rates, rates_document: str
    ) -> None:
        """Test readers always observe one of the published tables."""
        store = RatesStore(initial=sample_rates)
        seen: list[float] = []
        stop = threading.Event()

        def reader() -> None:
            while not stop.is_set():
                seen.append(store.get_rate("USD", "GBP"))

        threads = [threading.Thread(target=reader) for _ in range(4)]
        for thread in threads:
            thread.start()
        for _ in range(50):
            store.refresh(rates_document)
            store.publish(sample_rates)
        stop.set()
        for thread in threads:
            thread.join()

        assert set(seen) <= {0.77208, 0.7662523901}
