# 📄 File: app/modules/case_packs/domain/services/label_parser.py
# 🧭 Purpose (Layman Explanation):
# Reads the text printed under a case's GS1-128 barcode, like "(01)1081...(37)12(3102)018144",
# and pulls out the case's product number, how many units it holds and its weight in kilograms.
# 🧪 Purpose (Technical Summary):
# Minimal GS1-128 human-readable-interpretation parser for AIs (01) GTIN-14, (37) count and
# (310n) net weight in kg with n implied decimals, plus GS1 mod-10 check-digit validation.
# 🔗 Dependencies:
# Standard library only
# 🔄 Connected Modules / Calls From:
# presentation.api.v1.labels (parse-label endpoint)

"""
GS1-128 label parsing.

Only the parenthesised human-readable form is recognised. Each AI value is
the run of ASCII digits that follows the first occurrence of its marker;
anything else on the label is ignored.
"""

import math
from typing import Optional

from ..models.label import ParsedLabel

AI_GTIN = "01"
AI_COUNT = "37"
AI_NET_WEIGHT_KG_PREFIX = "310"

_ASCII_DIGITS = frozenset("0123456789")
_GTIN_LENGTHS = (8, 12, 13, 14)

# Longest count still exact as a float; longer runs are treated as absent
MAX_COUNT_DIGITS = 15


def extract_ai(text: str, ai: str) -> Optional[str]:
    """
    Return the digit run after the first ``(ai)`` marker, or None.
    """
    marker = f"({ai})"
    idx = text.find(marker)
    if idx == -1:
        return None

    start = idx + len(marker)
    end = start
    while end < len(text) and text[end] in _ASCII_DIGITS:
        end += 1
    return text[start:end] or None


def gtin_check_digit_valid(gtin: Optional[str]) -> Optional[bool]:
    """
    Validate a GTIN-8/12/13/14 check digit with the GS1 mod-10 algorithm.

    Returns None when the value is missing or not a GTIN length.
    """
    if not gtin or len(gtin) not in _GTIN_LENGTHS or not set(gtin) <= _ASCII_DIGITS:
        return None

    body, check = gtin[:-1], int(gtin[-1])
    # Weights alternate 3,1,3,... starting from the digit next to the check digit
    total = sum(
        int(digit) * (3 if position % 2 == 0 else 1)
        for position, digit in enumerate(reversed(body))
    )
    return (10 - total % 10) % 10 == check


def _weight_kg(digits: str, decimals: int) -> Optional[float]:
    value = float(digits) / (10 ** decimals)
    return value if math.isfinite(value) else None


def _count(digits: Optional[str]) -> Optional[int]:
    if not digits or len(digits) > MAX_COUNT_DIGITS:
        return None
    return int(digits)


def parse_gs1_128(text: str) -> ParsedLabel:
    """
    Parse GS1-128 case label text.

    Args:
        text: Human-readable label text, e.g. ``(01)10812345678903(37)12(3102)018144``

    Returns:
        ParsedLabel with whichever fields were present
    """
    gtin_case = extract_ai(text, AI_GTIN)
    units = extract_ai(text, AI_COUNT)

    case_kg: Optional[float] = None
    for decimals in range(10):
        digits = extract_ai(text, f"{AI_NET_WEIGHT_KG_PREFIX}{decimals}")
        if digits:
            case_kg = _weight_kg(digits, decimals)
            break

    return ParsedLabel(
        gtin_case=gtin_case,
        units_per_case=_count(units),
        case_kg=case_kg,
        gtin_valid=gtin_check_digit_valid(gtin_case),
    )
