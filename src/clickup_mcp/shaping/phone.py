"""Phone number normalization to E.164."""

from __future__ import annotations

import re
from typing import Any

# "x206", "ext206", "ext.206", "ext 206", "extension 206"; drops the rest of the string.
_EXTENSION_RE = re.compile(r"\s*(?:extension|ext\.?|x)\s*\d+.*$", re.IGNORECASE | re.DOTALL)
_NON_DIGIT_RE = re.compile(r"\D")

MIN_DIGITS = 10
MAX_DIGITS = 15


def normalize_phone(raw: Any) -> str:
    """Normalize free-form phone text to E.164 (``+<country><subscriber>``).

    Returns an empty string when the input cannot be a phone number. Never raises.

    Bare 10-digit numbers are taken as North American and get ``+1``; 11-digit
    numbers starting with 1 already carry it. Longer numbers typed without a
    ``+`` are assumed to include their country code.
    """
    if raw is None:
        return ""
    text = str(raw).strip()
    if not text:
        return ""

    text = _EXTENSION_RE.sub("", text, count=1)
    has_plus = text.startswith("+")
    digits = _NON_DIGIT_RE.sub("", text)

    if len(digits) < MIN_DIGITS or len(digits) > MAX_DIGITS:
        return ""

    if has_plus:
        candidate = "+" + digits
    elif len(digits) == 10:
        if digits.startswith("0"):
            return ""
        candidate = "+1" + digits
    else:
        # 11 digits with a leading 1, or an international number missing its "+"
        candidate = "+" + digits

    if candidate[1] == "0":
        return ""
    if not MIN_DIGITS + 1 <= len(candidate) <= MAX_DIGITS + 1:
        return ""
    return candidate
