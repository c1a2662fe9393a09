"""Unit tests for the error catalog, exceptions and PII-safe logging."""

import json
import logging

from budgethero.core.errors import ERROR_CATALOG, get_error, get_user_message, is_retryable
from budgethero.core.exceptions import CategorizationError, MappingParseError, SeedingError
from budgethero.core.logging import JSONLogFormatter, PIIFilteringFormatter, filter_pii


def _record(msg: str, *args, **extra) -> logging.LogRecord:
    record = logging.LogRecord("budgethero.test", logging.INFO, __file__, 1, msg, args, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestErrorCatalog:
    def test_entries_are_complete(self):
        for code, entry in ERROR_CATALOG.items():
            assert entry["code"] == code
            assert {"message", "user_message", "suggestion", "retry_allowed"} <= set(entry)

    def test_catalog_holds_only_raised_codes(self):
        assert set(ERROR_CATALOG) == {"SEED_001", "SEED_002", "MAP_001"}

    def test_known_code(self):
        assert get_error("SEED_002")["code"] == "SEED_002"
        assert is_retryable("SEED_001") is True
        assert is_retryable("MAP_001") is False

    def test_unknown_code_gets_generic_entry(self):
        error = get_error("NOPE_999")
        assert error["code"] == "UNKNOWN"
        assert "NOPE_999" in error["message"]
        assert get_user_message("NOPE_999") == "An unexpected error occurred."


class TestExceptions:
    def test_carries_code_and_details(self):
        exc = SeedingError("SEED_001", details={"error_type": "OperationalError"})
        assert exc.error_code == "SEED_001"
        assert exc.details == {"error_type": "OperationalError"}
        assert str(exc) == "SEED_001"

    def test_details_default_to_empty(self):
        assert MappingParseError("MAP_001").details == {}

    def test_hierarchy(self):
        assert issubclass(SeedingError, CategorizationError)
        assert issubclass(MappingParseError, CategorizationError)


class TestPIIFiltering:
    def test_card_number(self):
        assert filter_pii("POS 4111 1111 1111 1111 STARBUCKS") == "POS [CARD] STARBUCKS"

    def test_email(self):
        assert filter_pii("ZELLE TO john.doe@example.com") == "ZELLE TO [EMAIL]"

    def test_account_number(self):
        assert filter_pii("TRANSFER TO ACCT #123456789") == "TRANSFER TO ACCT [ACCOUNT]"

    def test_plain_text_untouched(self):
        assert filter_pii("Seeded 30 categories") == "Seeded 30 categories"
        assert filter_pii("") == ""


class TestFormatters:
    def test_json_formatter(self):
        record = _record("Categorized %s", "card 4111-1111-1111-1111", slug="groceries", count=3)
        data = json.loads(JSONLogFormatter().format(record))

        assert data["level"] == "INFO"
        assert data["logger"] == "budgethero.test"
        assert data["message"] == "Categorized card [CARD]"
        assert data["slug"] == "groceries"
        assert data["count"] == 3
        assert "error_code" not in data

    def test_plain_formatter_scrubs_message(self):
        formatter = PIIFilteringFormatter("%(levelname)s %(message)s")
        assert formatter.format(_record("email a@b.io")) == "INFO email [EMAIL]"
