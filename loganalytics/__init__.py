"""Log Analytics query templating: configuration, utilities and HTTP API."""

__version__ = "0.3.0"
