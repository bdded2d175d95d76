"""
Parsing helpers for product form input.

Multipart forms send lists either as a JSON array or as a separated string;
both shapes are accepted everywhere products are written (admin form, seller
form, bulk upload).
"""

import json
import re
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Optional

_URL_JUNK = re.compile(r"[`'\"]")


def parse_list(raw, separators: str = ",") -> List[str]:
    """
    Parse a JSON array or a separated string into a list of trimmed strings.

    >>> parse_list('["Red", "Blue"]')
    ['Red', 'Blue']
    >>> parse_list("s, m ;l", separators=",;")
    ['s', 'm', 'l']
    """
    if raw is None or raw == "":
        return []
    if isinstance(raw, (list, tuple)):
        return [str(item).strip() for item in raw if str(item).strip()]

    text = str(raw).strip()
    if text.startswith("["):
        try:
            parsed = json.loads(text)
            if isinstance(parsed, list):
                return [str(item).strip() for item in parsed if str(item).strip()]
        except ValueError:
            pass
    pattern = "[" + re.escape(separators) + "]"
    return [part.strip() for part in re.split(pattern, text) if part.strip()]


def parse_color_map(raw) -> Dict[str, Any]:
    """``{"red": [0, 2], "blue": 1}`` from a JSON string or dict; anything unparsable is ``{}``."""
    if not raw:
        return {}
    if isinstance(raw, dict):
        return raw
    try:
        parsed = json.loads(str(raw).strip())
    except ValueError:
        return {}
    return parsed if isinstance(parsed, dict) else {}


def _indices(value) -> List[int]:
    if not isinstance(value, (list, tuple)):
        value = [part.strip() for part in str(value).split(",") if part.strip()]
    result = []
    for item in value:
        try:
            result.append(int(item))
        except (TypeError, ValueError):
            continue
    return result


def build_color_variants(colors: List[str], images: List[str], color_map: Optional[Dict[str, Any]] = None):
    """
    Pair colours with image URLs.

    A colour map (colour to image indices) wins; otherwise colour ``i`` gets
    image ``i`` when there is one. Colours are lower-cased; out of range
    indices are dropped.
    """
    variants = []
    if color_map:
        for color, raw_indices in color_map.items():
            urls = [images[i] for i in _indices(raw_indices) if 0 <= i < len(images)]
            variants.append({"color": str(color).strip().lower(), "images": urls})
        return variants

    for i, color in enumerate(colors or []):
        variants.append({"color": str(color).strip().lower(), "images": [images[i]] if i < len(images) else []})
    return variants


def variant_colors(color_variants) -> List[str]:
    """Colour names of stored variants (older rows may hold plain strings)."""
    colors = []
    for variant in color_variants or []:
        if isinstance(variant, dict):
            if variant.get("color"):
                colors.append(variant["color"])
        elif variant:
            colors.append(str(variant))
    return colors


def clean_url(value) -> str:
    """Strip stray quotes and backticks that spreadsheet exports leave around URLs."""
    return _URL_JUNK.sub("", str(value or "")).strip()


def parse_decimal(value) -> Optional[Decimal]:
    """Decimal from form input; empty values are None, garbage raises ValueError."""
    if value is None or (isinstance(value, str) and value.strip() == ""):
        return None
    try:
        number = Decimal(str(value).strip())
    except InvalidOperation:
        raise ValueError(f"'{value}' is not a number")
    if not number.is_finite():
        raise ValueError(f"'{value}' is not a number")
    return number


def parse_flag(value, default: bool) -> bool:
    """Form booleans: only ``"true"`` (any case) is true; a missing value uses ``default``."""
    if value is None or value == "":
        return default
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() == "true"
