"""Immutable currency conversion rate table with a tolerant date decoder."""

import json
import re
from datetime import UTC, datetime
from typing import Annotated, Any

from pydantic import (
    AllowInfNan,
    BaseModel,
    ConfigDict,
    Field,
    Strict,
    ValidationError,
    field_validator,
    model_validator,
)

from bid_currency.exceptions import (
    LookupFailure,
    RateLookupException,
    RatesParseException,
)
from bid_currency.rates.conversions import Conversions

DATE_FORMAT = "%Y-%m-%d"
ZERO_DATE = datetime(1, 1, 1, tzinfo=UTC)

_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

# NaN and Infinity are not JSON and never a usable factor.
Rate = Annotated[float, Strict(), AllowInfNan(False)]


def parse_data_as_of(value: str | None) -> datetime:
    """Parse a ``YYYY-MM-DD`` date at UTC midnight.

    Returns ZERO_DATE for a missing, empty or malformed value.
    """
    if not value or not _DATE_PATTERN.fullmatch(value):
        return ZERO_DATE
    try:
        parsed = datetime.strptime(value, DATE_FORMAT)
    except ValueError:
        return ZERO_DATE
    return parsed.replace(tzinfo=UTC)


def _format_errors(error: ValidationError) -> list[str]:
    messages = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"])
        if location:
            messages.append(f"{location}: {detail['msg']}")
        else:
            messages.append(detail["msg"])
    return messages


class Rates(BaseModel, Conversions):
    """Snapshot of pairwise currency conversion factors.

    ``conversions`` maps a source currency code to a mapping of target
    currency code to factor, so that
    ``amount_in_target = amount_in_source * factor``. Codes are matched
    exactly. A stored ``A -> B`` says nothing about ``B -> A`` and no
    ``A -> A`` rate exists unless it was stored.

    The table is frozen once built and can be shared between threads
    without locking. Freezing is shallow: the nested mappings are plain
    dicts and must not be modified by holders of the table. Tables are
    not hashable.

    Attributes:
        data_as_of: Date the snapshot was produced, ZERO_DATE when unknown
        conversions: Source code -> target code -> factor, or None

    Example:
        ```python
        from bid_currency.rates import Rates

        rates = Rates.parse(
            '{"dataAsOf": "2018-09-12", '
            '"conversions": {"USD": {"GBP": 0.7662523901}}}'
        )
        rates.get_rate("USD", "GBP")  # 0.7662523901
        ```
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    __hash__ = None  # type: ignore[assignment]

    data_as_of: datetime = Field(
        default=ZERO_DATE,
        alias="dataAsOf",
        description="Date the snapshot was produced (UTC midnight)",
    )
    conversions: dict[str, dict[str, Rate] | None] | None = Field(
        default=None,
        description="Source currency -> target currency -> factor",
    )

    @model_validator(mode="before")
    @classmethod
    def null_document_is_empty(cls, data: Any) -> Any:
        """Treat a JSON null document as the empty table."""
        if data is None:
            return {}
        return data

    @field_validator("data_as_of", mode="before")
    @classmethod
    def tolerate_unknown_date(cls, v: Any) -> Any:
        """Downgrade an empty or malformed date string to ZERO_DATE."""
        if v is None or isinstance(v, str):
            return parse_data_as_of(v)
        if isinstance(v, datetime):
            return v
        raise ValueError("dataAsOf must be a string")

    @classmethod
    def parse(cls, document: str | bytes) -> "Rates":
        """Decode a rates document.

        Args:
            document: JSON object with ``dataAsOf`` and ``conversions`` keys

        Returns:
            The decoded table

        Raises:
            RatesParseException: If the document is structurally invalid
        """
        try:
            return cls.model_validate_json(document)
        except ValidationError as e:
            if isinstance(document, bytes):
                document = document.decode("utf-8", errors="replace")
            raise RatesParseException(
                f"Invalid rates document: {e.error_count()} error(s)",
                document=document,
                validation_errors=_format_errors(e),
            ) from e

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Rates":
        """Build a table from an already-decoded document.

        Same tolerance rules as ``parse``.

        Raises:
            RatesParseException: If the mapping has the wrong shape
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise RatesParseException(
                f"Invalid rates document: {e.error_count()} error(s)",
                validation_errors=_format_errors(e),
            ) from e

    @property
    def has_known_date(self) -> bool:
        """Whether the snapshot carries a real date."""
        return self.data_as_of != ZERO_DATE

    def get_rate(self, from_currency: str, to_currency: str) -> float:
        """Get the stored factor for a conversion pair.

        Args:
            from_currency: Source currency code, matched exactly
            to_currency: Target currency code, matched exactly

        Returns:
            The stored factor

        Raises:
            RateLookupException: If the table is empty or the pair is not stored
        """
        if self.conversions is None:
            raise RateLookupException(
                "rates are nil",
                kind=LookupFailure.TABLE_EMPTY,
                from_currency=from_currency,
                to_currency=to_currency,
            )

        if from_currency not in self.conversions:
            raise RateLookupException(
                f"no currency conversion rate for source currency {from_currency!r}",
                kind=LookupFailure.SOURCE_UNKNOWN,
                from_currency=from_currency,
                to_currency=to_currency,
            )

        targets = self.conversions[from_currency] or {}
        if to_currency not in targets:
            raise RateLookupException(
                f"no currency conversion rate for target currency {to_currency!r} "
                f"from source currency {from_currency!r}",
                kind=LookupFailure.TARGET_UNKNOWN,
                from_currency=from_currency,
                to_currency=to_currency,
            )

        return targets[to_currency]

    def get_rates(self) -> dict[str, dict[str, float] | None] | None:
        return self.conversions

    def convert(self, amount: float, from_currency: str, to_currency: str) -> float:
        """Convert an amount using the stored factor for the pair.

        Raises:
            RateLookupException: If no rate is stored for the pair
        """
        return amount * self.get_rate(from_currency, to_currency)

    def to_json(self) -> str:
        """Serialize back to the wire shape.

        An unknown date is written as an empty string.
        """
        data_as_of = self.data_as_of.date().isoformat() if self.has_known_date else ""
        return json.dumps({"dataAsOf": data_as_of, "conversions": self.conversions})


def new_rates(
    data_as_of: datetime, conversions: dict[str, dict[str, float]] | None
) -> Rates:
    """Build a table from a date and a two-level mapping.

    Args:
        data_as_of: Date the snapshot was produced
        conversions: Source code -> target code -> factor; None is allowed

    Returns:
        The new table
    """
    return Rates(data_as_of=data_as_of, conversions=conversions)
