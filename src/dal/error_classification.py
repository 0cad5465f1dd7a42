from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from common.config.env import get_env_bool
from table_schema.errors import SourceError

logger = logging.getLogger(__name__)

# MySQL server and client error numbers, as carried in ``exc.args[0]`` by
# PyMySQL / aiomysql errors.
MYSQL_ERRNO_CATEGORIES: dict[int, str] = {
    1044: "auth",  # ER_DBACCESS_DENIED_ERROR
    1045: "auth",  # ER_ACCESS_DENIED_ERROR
    1142: "auth",  # ER_TABLEACCESS_DENIED_ERROR
    1143: "auth",  # ER_COLUMNACCESS_DENIED_ERROR
    1227: "auth",  # ER_SPECIFIC_ACCESS_DENIED_ERROR
    1049: "missing_table",  # ER_BAD_DB_ERROR
    1146: "missing_table",  # ER_NO_SUCH_TABLE
    1064: "syntax",  # ER_PARSE_ERROR
    1205: "timeout",  # ER_LOCK_WAIT_TIMEOUT
    3024: "timeout",  # ER_QUERY_TIMEOUT
    2002: "connectivity",  # CR_CONNECTION_ERROR
    2003: "connectivity",  # CR_CONN_HOST_ERROR
    2005: "connectivity",  # CR_UNKNOWN_HOST
    2006: "connectivity",  # CR_SERVER_GONE_ERROR
    2013: "connectivity",  # CR_SERVER_LOST
    2055: "connectivity",  # CR_SERVER_LOST_EXTENDED
}

RETRYABLE_CATEGORIES = frozenset({"connectivity", "timeout"})

# Recovery hints for each error category
RECOVERY_HINTS: dict[str, str] = {
    "connectivity": "Check network configuration and database availability",
    "auth": "Verify credentials and grants on the schema being introspected",
    "missing_table": "Verify the schema and table names; quoting is applied automatically",
    "syntax": "The server rejected the metadata statement; check server compatibility",
    "timeout": "Retry after the server load drops or raise the server timeout",
    "unknown": "Inspect error details for root cause",
}


@dataclass(frozen=True)
class ErrorClassification:
    """Structured provider-aware error classification."""

    category: str
    provider: str
    is_retryable: bool
    errno: Optional[int] = None


def classify_error(provider: str, exc: Exception) -> str:
    """Classify a driver error into a provider-agnostic category."""
    return classify_error_info(provider, exc).category


def classify_error_info(provider: str, exc: Exception) -> ErrorClassification:
    """Classify a driver error using its MySQL error number, then its message."""
    provider = (provider or "unknown").lower()
    errno = _mysql_errno(exc)
    if errno is not None and errno in MYSQL_ERRNO_CATEGORIES:
        return _classification(MYSQL_ERRNO_CATEGORIES[errno], provider, errno)

    message = str(exc).lower()
    class_name = exc.__class__.__name__.lower()

    if isinstance(exc, TimeoutError) or _matches_any(message, ("timeout", "timed out")):
        return _classification("timeout", provider, errno)
    if isinstance(exc, ConnectionError) or _matches_any(
        message,
        (
            "can't connect",
            "could not connect",
            "connection refused",
            "connection reset",
            "lost connection",
            "server has gone away",
        ),
    ):
        return _classification("connectivity", provider, errno)
    if _matches_any(message, ("access denied", "permission denied", "command denied")):
        return _classification("auth", provider, errno)
    if _matches_any(message, ("doesn't exist", "unknown database", "unknown table")):
        return _classification("missing_table", provider, errno)
    if _matches_any(message, ("syntax error", "you have an error in your sql syntax")):
        return _classification("syntax", provider, errno)
    if class_name in {"interfaceerror", "operationalerror"}:
        return _classification("connectivity", provider, errno)

    return _classification("unknown", provider, errno)


def emit_classified_error(
    classification: ErrorClassification, operation: str, exc: Exception
) -> None:
    """Emit structured telemetry for a classified error when enabled.

    Sets error.classification.* span attributes for observability dashboards.
    """
    if not get_env_bool("DAL_CLASSIFIED_ERROR_TELEMETRY", True):
        return

    recovery_hint = RECOVERY_HINTS.get(classification.category, RECOVERY_HINTS["unknown"])
    try:
        from opentelemetry import trace

        span = trace.get_current_span()
        if span and span.is_recording():
            span.set_attribute("error.classification.category", classification.category)
            span.set_attribute("error.classification.provider", classification.provider)
            span.set_attribute("error.classification.operation", operation)
            span.set_attribute("error.classification.is_retryable", classification.is_retryable)
            span.set_attribute("error.classification.recovery_hint", recovery_hint)
    except Exception as telemetry_exc:
        logger.debug("Span annotation failed for %s: %s", operation, telemetry_exc)

    logger.error(
        "dal_error_classified",
        extra={
            "event": "dal_error_classified",
            "provider": classification.provider,
            "operation": operation,
            "error_category": classification.category,
            "error_type": exc.__class__.__name__,
            "errno": classification.errno,
            "is_retryable": classification.is_retryable,
            "recovery_hint": recovery_hint,
        },
    )


def to_source_error(provider: str, operation: str, exc: Exception) -> SourceError:
    """Classify a driver error, emit telemetry, and wrap it as a SourceError."""
    classification = classify_error_info(provider, exc)
    emit_classified_error(classification, operation, exc)
    return SourceError(
        f"{operation} failed ({classification.category}): {exc}",
        category=classification.category,
        provider=classification.provider,
    )


def _mysql_errno(exc: Exception) -> Optional[int]:
    args = getattr(exc, "args", ())
    if args and isinstance(args[0], int):
        return args[0]
    return None


def _matches_any(text: str, fragments: tuple[str, ...]) -> bool:
    return any(fragment in text for fragment in fragments)


def _classification(category: str, provider: str, errno: Optional[int]) -> ErrorClassification:
    return ErrorClassification(
        category=category,
        provider=provider,
        is_retryable=category in RETRYABLE_CATEGORIES,
        errno=errno,
    )
