"""HTTP API for previewing query template resolution."""

from loganalytics.api.app import create_app

__all__ = ["create_app"]
