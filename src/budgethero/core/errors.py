"""Error codes and user-friendly messages.

Each error has:
- code: Unique identifier
- message: Technical description (for logs)
- user_message: User-friendly explanation
- suggestion: Actionable guidance for the operator
- retry_allowed: Whether re-running the operation can help
"""

ERROR_CATALOG: dict[str, dict] = {
    "SEED_001": {
        "code": "SEED_001",
        "message": "Category seeding aborted by a database error",
        "user_message": "We couldn't finish setting up the category tables.",
        "suggestion": "Fix the database problem and run the seeding step again.",
        "retry_allowed": True,
    },
    "SEED_002": {
        "code": "SEED_002",
        "message": "Plaid category mapping table could not be replaced",
        "user_message": "The Plaid category mappings could not be rebuilt.",
        "suggestion": "Run the seeding step again; the mapping table is fully rebuilt each run.",
        "retry_allowed": True,
    },
    "MAP_001": {
        "code": "MAP_001",
        "message": "Plaid mapping dump contains no records after the header",
        "user_message": "The Plaid category mapping data is empty.",
        "suggestion": "Check the mapping dump: four header lines followed by four lines per record.",
        "retry_allowed": False,
    },
}


def get_error(error_code: str) -> dict:
    """Get error definition by code.

    Args:
        error_code: Error code from the catalog

    Returns:
        Dict with error details; a generic entry for unknown codes
    """
    if error_code not in ERROR_CATALOG:
        return {
            "code": "UNKNOWN",
            "message": f"Unknown error code: {error_code}",
            "user_message": "An unexpected error occurred.",
            "suggestion": "Please try again. Contact support if the problem persists.",
            "retry_allowed": True,
        }
    return ERROR_CATALOG[error_code]


def get_user_message(error_code: str) -> str:
    """Get user-friendly message for an error code."""
    return get_error(error_code)["user_message"]


def is_retryable(error_code: str) -> bool:
    """Check if an error is retryable."""
    return get_error(error_code)["retry_allowed"]
