"""Print a summary of the built-in Plaid category mapping dump.

Does not touch the database.
"""

from budgethero.plaid.mapping import validate_mappings


def print_mapping_summary() -> None:
    """Print totals, ledger-type breakdown and sample mappings."""
    summary = validate_mappings()

    print(f"Parsed {summary.total_mappings} Plaid category mappings")
    print(f"Found {summary.unique_categories} unique categories")

    print("\nCategory breakdown:")
    for ledger_type, count in sorted(summary.breakdown.items()):
        print(f"  - {ledger_type}: {count}")

    print("\nSample mappings:")
    for mapping in summary.samples:
        print(f"  {mapping.plaid_detailed} -> {mapping.budget_hero_category} ({mapping.slug})")


if __name__ == "__main__":
    print_mapping_summary()
