"""Operational helpers."""

from seriespick.ops.logging import configure_logging

__all__ = ["configure_logging"]
