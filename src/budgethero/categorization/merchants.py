"""Merchant keyword table.

Checked before the taxonomy rules. Iteration order matters: categories are
scanned in declaration order and the first keyword found anywhere in the search
text wins, even when a later category would also match.

This table is maintained independently of ``taxonomy.CATEGORY_TAXONOMY`` and
uses its own category names.
"""

from types import MappingProxyType

from budgethero.categorization.taxonomy import TransactionType

_MERCHANT_KEYWORDS: dict[str, tuple[str, ...]] = {
    # Income
    "Paychecks": ("payroll", "salary", "wages", "direct deposit", "paycheck", "employer", "adp", "workday"),
    "Business Income": (
        "freelance", "contractor", "business", "invoice", "consulting", "upwork", "fiverr",
        "stripe", "paypal business",
    ),
    "Interest": ("interest", "dividend", "savings", "investment return", "cd interest", "bond"),
    "Other Income": ("rebate", "bonus", "gift money"),

    # Food & Dining
    "Restaurants & Bars": (
        "restaurant", "bar", "bistro", "grill", "pub", "tavern", "diner", "mcdonald",
        "burger king", "kfc", "taco bell", "subway", "pizza", "chipotle", "wendys",
    ),
    "Coffee Shops": ("starbucks", "dunkin", "coffee", "cafe", "espresso", "latte", "dunkin donuts", "tim hortons"),
    "Groceries": (
        "walmart", "target", "kroger", "safeway", "whole foods", "costco", "grocery", "market",
        "trader joe", "publix", "wegmans", "aldi",
    ),

    # Auto & Transport
    "Taxi & Ride Shares": ("uber", "lyft", "taxi", "cab", "rideshare", "uber trip", "lyft ride"),
    "Gas": ("shell", "exxon", "chevron", "bp", "mobil", "petro", "gas", "fuel", "sunoco", "marathon", "phillips 66"),
    "Parking": ("parking", "meter", "garage", "parkwhiz", "spotangels"),
    "Tolls": ("toll", "fastrak", "ezpass"),
    "Public Transit": ("metro", "bus", "train", "transit", "subway", "mta", "bart", "amtrak"),
    "Auto Payment": ("car payment", "auto loan", "vehicle payment", "honda financial", "toyota financial"),
    "Auto Maintenance": ("jiffy lube", "valvoline", "tire", "mechanic", "oil change", "car wash", "brake"),

    # Shopping
    "Clothing": (
        "clothing", "fashion", "apparel", "dress", "shirt", "nike", "adidas", "gap", "old navy",
        "zara", "h&m",
    ),
    "Electronics": ("best buy", "apple", "electronics", "computer", "phone", "amazon echo", "samsung", "microsoft"),
    "Furniture & Housewares": ("ikea", "home depot", "lowes", "bed bath beyond", "wayfair", "furniture"),

    # Bills & Utilities
    "Phone": ("verizon", "att", "tmobile", "sprint", "phone", "cellular", "wireless", "at&t"),
    "Internet & Cable": ("comcast", "internet", "cable", "wifi", "broadband", "xfinity", "spectrum", "cox"),
    "Gas & Electric": ("electric", "electricity", "gas", "utility", "power", "pge", "southern california edison"),
    "Water": ("water", "water dept", "water department", "municipal water"),
    "Garbage": ("waste", "garbage", "trash", "recycling", "sanitation"),

    # Health & Wellness
    "Medical": ("doctor", "hospital", "pharmacy", "medical", "health", "cvs pharmacy", "walgreens", "clinic"),
    "Dentist": ("dental", "dentist", "orthodontist", "teeth"),
    "Fitness": ("gym", "fitness", "yoga", "planet fitness", "la fitness", "equinox"),

    # Financial
    "Cash & ATM": ("atm", "cash withdrawal", "cash advance", "atm fee"),
    "Financial Fees": ("fee", "charge", "overdraft", "maintenance", "monthly fee", "service charge"),
    "Financial & Legal Services": ("lawyer", "attorney", "legal", "tax prep", "h&r block"),
    "Loan Repayment": ("loan payment", "student loan", "personal loan", "navient", "great lakes"),

    # Housing
    "Rent": ("rent", "rental", "apartment", "lease"),
    "Mortgage": ("mortgage", "home loan", "wells fargo home", "quicken loans"),
    "Home Improvement": ("home depot", "lowes", "contractor", "plumber", "electrician"),

    # Travel & Lifestyle
    "Travel & Vacation": (
        "hotel", "airbnb", "flight", "airline", "united airlines", "delta", "american airlines",
        "southwest", "expedia", "booking.com",
    ),
    "Entertainment & Recreation": (
        "movie", "theater", "netflix", "spotify", "hulu", "disney plus", "concert", "tickets",
    ),

    # Personal
    "Pets": ("pet", "vet", "veterinary", "petco", "petsmart", "dog", "cat"),
    "Fun Money": ("entertainment", "hobby", "games", "toys"),

    # Children
    "Child Care": ("daycare", "babysitter", "childcare", "nanny"),
    "Child Activities": ("sports", "lesson", "camp", "school activity"),
    "Education": ("school", "tuition", "books", "supplies", "education"),
    "Student Loans": ("student loan", "navient", "great lakes", "fedloan"),

    # Gifts & Donations
    "Charity": ("donation", "charity", "church", "nonprofit", "salvation army", "goodwill"),
    "Gifts": ("gift", "present", "birthday", "wedding", "holiday"),

    # Business
    "Advertising & Promotion": ("facebook ads", "google ads", "marketing", "advertising"),
    "Office Supplies & Expenses": ("office supplies", "staples", "paper", "printer"),
    "Business Travel & Meals": ("business travel", "conference", "business meal"),

    # Transfers
    "Credit Card Payment": ("credit card payment", "cc payment", "card payment", "credit card autopay"),
    "Transfer": ("withdrawal", "deposit", "internal transfer"),
    "Balance Adjustments": ("adjustment", "correction", "error correction"),

    # Standalone
    "Insurance": ("insurance", "premium", "policy", "coverage", "geico", "state farm", "progressive"),
    "Taxes": ("tax", "irs", "tax payment", "quarterly tax", "tax prep"),
    "Uncategorized": (),
    "Check": ("check", "cheque"),
    "Miscellaneous": ("misc", "other"),
}

MERCHANT_KEYWORDS = MappingProxyType(_MERCHANT_KEYWORDS)

# Type assignment for merchant-table hits; anything not listed is an expense.
MERCHANT_INCOME_CATEGORIES = frozenset({"Paychecks", "Business Income", "Interest", "Other Income"})
MERCHANT_TRANSFER_CATEGORIES = frozenset({"Transfer", "Credit Card Payment"})
MERCHANT_ADJUSTMENT_CATEGORIES = frozenset({"Balance Adjustments"})


def merchant_category_type(category: str) -> TransactionType:
    """Accounting type for a merchant-table category name."""
    if category in MERCHANT_INCOME_CATEGORIES:
        return TransactionType.INCOME
    if category in MERCHANT_ADJUSTMENT_CATEGORIES:
        return TransactionType.ADJUSTMENT
    if category in MERCHANT_TRANSFER_CATEGORIES:
        return TransactionType.TRANSFER
    return TransactionType.EXPENSE
