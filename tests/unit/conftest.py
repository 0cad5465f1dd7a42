"""Unit test environment helpers."""

import pytest


@pytest.fixture(autouse=True)
def _minimal_env(monkeypatch):
    """Keep unit tests independent of any developer database or exporter settings."""
    for name in (
        "DB_HOST",
        "DB_PORT",
        "DB_USER",
        "DB_PASS",
        "DB_NAME",
        "DB_CONNECT_TIMEOUT_SECS",
        "OTEL_METRICS_EXPORTER",
        "OTEL_DISABLE_EXPORTER",
        "DAL_CLASSIFIED_ERROR_TELEMETRY",
    ):
        monkeypatch.delenv(name, raising=False)
    yield
