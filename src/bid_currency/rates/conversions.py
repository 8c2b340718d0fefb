"""Rate source interface and the non-feed rate sources."""

from abc import ABC, abstractmethod

from bid_currency.exceptions import LookupFailure, RateLookupException


class Conversions(ABC):
    """Anything that can answer "what is the rate from A to B?"."""

    @abstractmethod
    def get_rate(self, from_currency: str, to_currency: str) -> float:
        """Return the factor converting ``from_currency`` into ``to_currency``.

        Raises:
            RateLookupException: If no rate is known for the pair
        """

    @abstractmethod
    def get_rates(self) -> dict[str, dict[str, float] | None] | None:
        """Return the underlying two-level mapping, if there is one."""


class ConstantRates(Conversions):
    """Rate source used when no feed is configured.

    Only same-currency conversion is supported and it always yields 1.0.
    """

    def get_rate(self, from_currency: str, to_currency: str) -> float:
        if from_currency != to_currency:
            raise RateLookupException(
                f"currency conversion from {from_currency!r} to {to_currency!r} "
                "is not supported",
                kind=LookupFailure.UNSUPPORTED,
                from_currency=from_currency,
                to_currency=to_currency,
            )
        return 1.0

    def get_rates(self) -> None:
        return None


class AggregateConversions(Conversions):
    """Combines request-supplied rates with feed rates.

    Custom rates win. The server rates are only consulted when the custom
    source has no rate for the pair.

    Attributes:
        custom: Rates supplied alongside the request
        server: Rates published from the feed
    """

    def __init__(self, custom: Conversions, server: Conversions) -> None:
        """Initialize with the two rate sources.

        Args:
            custom: Preferred rate source
            server: Fallback rate source
        """
        self.custom = custom
        self.server = server

    def get_rate(self, from_currency: str, to_currency: str) -> float:
        """Get a rate from the custom source, falling back to the server source.

        Raises:
            RateLookupException: The server's error when neither source has the pair
        """
        try:
            return self.custom.get_rate(from_currency, to_currency)
        except RateLookupException:
            return self.server.get_rate(from_currency, to_currency)

    def get_rates(self) -> dict[str, dict[str, float] | None] | None:
        # Merged view is not materialized.
        return None
