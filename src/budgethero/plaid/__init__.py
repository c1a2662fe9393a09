"""Plaid category code mapping (offline data preparation)."""

from budgethero.plaid.mapping import (
    get_plaid_mappings,
    name_to_slug,
    parse_plaid_mapping_blob,
    validate_mappings,
)

__all__ = ["get_plaid_mappings", "name_to_slug", "parse_plaid_mapping_blob", "validate_mappings"]
