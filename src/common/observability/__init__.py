"""Shared observability helpers."""

from common.observability.metrics import schema_metrics

__all__ = ["schema_metrics"]
