"""Utilities - datetime literals, URI encoding, logging."""

from loganalytics.utilities.encoding import decode_uri_component, encode_uri_component
from loganalytics.utilities.logging import setup_logging
from loganalytics.utilities.tz import format_iso_utc, kql_datetime, to_utc

__all__ = [
    "decode_uri_component",
    "encode_uri_component",
    "format_iso_utc",
    "kql_datetime",
    "setup_logging",
    "to_utc",
]
