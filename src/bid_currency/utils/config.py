"""Configuration utilities for environment-based setup."""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from bid_currency.exceptions import ConfigurationException
from bid_currency.rates.rates import Rates

RATES_FILE_ENV = "BID_CURRENCY_RATES_FILE"

logger = logging.getLogger(__name__)


def load_environment() -> None:
    """Load environment variables from .env file if it exists."""
    load_dotenv()


def get_rates_file(path: str | Path | None = None) -> Path:
    """Resolve the location of the rates document.

    Args:
        path: Explicit path (if None, loads from BID_CURRENCY_RATES_FILE env var)

    Returns:
        Path to the rates document

    Raises:
        ConfigurationException: If no path is given and none is configured
    """
    load_environment()

    if path is None:
        path = os.getenv(RATES_FILE_ENV)

    if not path:
        raise ConfigurationException(
            f"Rates file not configured. Set {RATES_FILE_ENV} environment "
            "variable or pass path parameter.",
            config_key=RATES_FILE_ENV,
        )

    return Path(path)


def load_rates_file(path: str | Path | None = None) -> Rates:
    """Load a rate table from a JSON document on disk.

    Args:
        path: Explicit path (if None, uses the configured rates file)

    Returns:
        The decoded table

    Raises:
        ConfigurationException: If the file is not configured or does not exist
        RatesParseException: If the document is structurally invalid
    """
    rates_file = get_rates_file(path)
    if not rates_file.is_file():
        raise ConfigurationException(
            f"Rates file not found: {rates_file}",
            config_key=RATES_FILE_ENV,
            config_value=str(rates_file),
        )

    logger.debug("Loading rates from %s", rates_file)
    return Rates.parse(rates_file.read_text(encoding="utf-8"))
