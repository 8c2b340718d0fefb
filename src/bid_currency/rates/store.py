"""Publication point for swapping immutable rate tables on refresh."""

import logging
import threading
from datetime import UTC, datetime

from bid_currency.exceptions import RatesParseException
from bid_currency.rates.conversions import Conversions
from bid_currency.rates.rates import Rates

logger = logging.getLogger(__name__)


class RatesStore:
    """Holds the currently published rate table.

    Tables are never mutated. A refresh builds a new table and swaps the
    reference, so a reader sees either the old or the new table in full.

    Attributes:
        last_updated: When a table was last published via ``refresh``, or None
    """

    def __init__(self, initial: Conversions | None = None) -> None:
        """Initialize RatesStore.

        Args:
            initial: Table to serve before the first refresh (default: empty Rates)
        """
        self._lock = threading.Lock()
        self._current: Conversions = initial if initial is not None else Rates()
        self.last_updated: datetime | None = None

    def current(self) -> Conversions:
        """Return the published table."""
        return self._current

    def publish(self, rates: Conversions) -> None:
        """Replace the published table."""
        with self._lock:
            self._current = rates
        logger.info("Published rate table %s", type(rates).__name__)

    def refresh(self, document: str | bytes) -> Rates:
        """Parse a rates document and publish it.

        On a structural error the previous table stays published.

        Args:
            document: Rates document as fetched from the feed

        Returns:
            The newly published table

        Raises:
            RatesParseException: If the document is structurally invalid
        """
        try:
            rates = Rates.parse(document)
        except RatesParseException as e:
            logger.warning(
                "Rejected rates document, keeping previous table: %s",
                "; ".join(e.validation_errors),
            )
            raise

        if not rates.has_known_date:
            logger.info("Rates document has no usable dataAsOf date")

        with self._lock:
            self._current = rates
            self.last_updated = datetime.now(UTC)
        logger.info(
            "Published rate table with %d source currencies",
            len(rates.conversions or {}),
        )
        return rates

    def get_rate(self, from_currency: str, to_currency: str) -> float:
        """Look up a rate in the published table.

        Raises:
            RateLookupException: If the published table has no rate for the pair
        """
        return self._current.get_rate(from_currency, to_currency)
