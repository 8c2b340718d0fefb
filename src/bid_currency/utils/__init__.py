"""Configuration utilities."""

from .config import RATES_FILE_ENV, get_rates_file, load_environment, load_rates_file

__all__ = [
    "RATES_FILE_ENV",
    "load_environment",
    "get_rates_file",
    "load_rates_file",
]
