"""Custom exceptions for bid currency rates."""

from enum import Enum


class BidCurrencyException(Exception):
    """Base exception for bid currency rates.

    All custom exceptions in this package should inherit from this base class.
    """

    pass


class LookupFailure(Enum):
    """Reasons a rate lookup can fail."""

    TABLE_EMPTY = "table_empty"
    SOURCE_UNKNOWN = "source_unknown"
    TARGET_UNKNOWN = "target_unknown"
    UNSUPPORTED = "unsupported"


class RatesParseException(BidCurrencyException):
    """Raised when a rates document is structurally invalid.

    This exception is raised when:
    - The document is not well-formed JSON (unbalanced braces, trailing commas)
    - ``conversions`` holds values of the wrong kind
    - ``dataAsOf`` is present but is neither a string nor null

    A malformed date string never raises this exception.

    Attributes:
        document: The raw document that failed to parse
        validation_errors: List of validation error details
    """

    def __init__(
        self,
        message: str,
        document: str | None = None,
        validation_errors: list[str] | None = None,
    ):
        super().__init__(message)
        self.document = document
        self.validation_errors = validation_errors or []


class RateLookupException(BidCurrencyException):
    """Raised when no rate is stored for a conversion pair.

    Attributes:
        kind: Which part of the lookup missed
        from_currency: Source currency code that was requested
        to_currency: Target currency code that was requested
    """

    def __init__(
        self,
        message: str,
        kind: LookupFailure,
        from_currency: str | None = None,
        to_currency: str | None = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.from_currency = from_currency
        self.to_currency = to_currency


class ConfigurationException(BidCurrencyException):
    """Raised when configuration errors occur.

    This exception is raised when:
    - No rates file is given and none is configured in the environment
    - The configured rates file does not exist

    Attributes:
        config_key: The configuration key that caused the error
        config_value: The invalid configuration value
    """

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        config_value: str | None = None,
    ):
        super().__init__(message)
        self.config_key = config_key
        self.config_value = config_value
