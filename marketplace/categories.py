"""
Storefront categories.

Raw values are trimmed and lower-cased; the legacy e-mart spellings map to
``l-mart``. Normalization applies on every write and every filter.
"""

LMART = "l-mart"
LOCALMARKET = "localmarket"
PRINTING = "printing"
NEWS = "news"

CATEGORIES = (LMART, LOCALMARKET, PRINTING, NEWS)
CATEGORY_CHOICES = [(value, value) for value in CATEGORIES]

CATEGORY_ALIASES = {
    "emart": LMART,
    "e-mart": LMART,
    "lmart": LMART,
    "l-mart": LMART,
}

# Aliases stored by older clients that the maintenance command rewrites
LEGACY_ALIASES = ("emart", "e-mart", "lmart")


def normalize_category(value):
    if value is None:
        return None
    cleaned = str(value).strip().lower()
    return CATEGORY_ALIASES.get(cleaned, cleaned)


def is_valid_category(value) -> bool:
    return normalize_category(value) in CATEGORIES
