"""Custom exception classes for category seeding and mapping.

Each exception carries an error code from ``errors.py``. The transaction
categorizer itself never raises; these cover the offline data preparation.
"""

from typing import Any


class CategorizationError(Exception):
    """Base exception for categorization data errors.

    Attributes:
        error_code: Code from the error catalog (e.g., "SEED_001")
        details: Additional context about the error (for logging)
    """

    def __init__(self, error_code: str, details: dict[str, Any] | None = None):
        self.error_code = error_code
        self.details = details or {}
        super().__init__(error_code)


class MappingParseError(CategorizationError):
    """Raised when the Plaid mapping dump has no records at all.

    Incomplete record groups are skipped, not raised.
    """

    pass


class SeedingError(CategorizationError):
    """Raised when a database step of category seeding fails.

    The whole run is aborted; re-running is the only recovery path.
    """

    pass
