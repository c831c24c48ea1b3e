"""Utility functions."""

from medassess.utils.time import coerce_datetime, format_datetime, parse_datetime, utc_now

__all__ = ["utc_now", "format_datetime", "parse_datetime", "coerce_datetime"]
