"""Telemetry: logging setup."""

from tagcloud.shared.telemetry.logging import setup_logging

__all__ = ["setup_logging"]
