"""Logging setup with optional JSON output.

Bank transaction descriptions can carry card or account numbers, so every
formatted message passes through ``filter_pii`` before it is written.
"""

import json
import logging
import re
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# PII patterns to filter from logs
PII_PATTERNS = [
    # Card numbers (13-19 digits, with or without spaces/dashes)
    (re.compile(r"\b\d{4}[\s-]?\d{4}[\s-]?\d{4}[\s-]?\d{1,7}\b"), "[CARD]"),
    # Email addresses
    (re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b"), "[EMAIL]"),
    # Account numbers printed by banks as "acct 123456789" / "account #123456789"
    (re.compile(r"(acct|account)\s*#?\s*\d{6,}", re.I), r"\1 [ACCOUNT]"),
]

# ``extra`` fields copied into JSON log lines when present
EXTRA_FIELDS = ("slug", "plaid_detailed", "category", "count", "error_code")


def filter_pii(text: str) -> str:
    """Remove PII from text using regex patterns."""
    if not text:
        return text

    filtered = text
    for pattern, replacement in PII_PATTERNS:
        filtered = pattern.sub(replacement, filtered)

    return filtered


class JSONLogFormatter(logging.Formatter):
    """Format log records as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": filter_pii(record.getMessage()),
        }

        for field in EXTRA_FIELDS:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        if record.exc_info:
            log_data["exception"] = filter_pii(self.formatException(record.exc_info))

        return json.dumps(log_data)


class PIIFilteringFormatter(logging.Formatter):
    """Plain-text formatter that scrubs PII from the final line."""

    def format(self, record: logging.LogRecord) -> str:
        return filter_pii(super().format(record))


def setup_logging(level: str = "INFO", json_output: bool = False) -> None:
    """Configure the root logger.

    Args:
        level: Log level ('DEBUG', 'INFO', 'WARNING', 'ERROR')
        json_output: Emit one JSON object per line instead of plain text
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    if json_output:
        handler.setFormatter(JSONLogFormatter())
    else:
        handler.setFormatter(PIIFilteringFormatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.addHandler(handler)
