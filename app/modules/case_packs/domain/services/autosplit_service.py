# 📄 File: app/modules/case_packs/domain/services/autosplit_service.py
# 🧭 Purpose (Layman Explanation):
# Works out how a bulk case splits into shares: if a 40 lb case is sold in 2 lb shares there are
# 20 shares per case, and with 13 already pledged, 7 more pledges finish the case.
# 🧪 Purpose (Technical Summary):
# Pure auto-split arithmetic: shares-per-case K, shares needed to fill the open case, small
# divisors of K for group sizing, and buy suggestions with the number of cases each completes.
# 🔗 Dependencies:
# Standard library math
# 🔄 Connected Modules / Calls From:
# presentation.api.v1.autosplit (autosplit endpoint)

import math
from numbers import Real
from typing import List

from ..models.autosplit import AutoSplitResult, SplitSuggestion

NOT_AVAILABLE = "—"
INVALID_SIZES_WARNING = "Enter a positive case size and share size to see suggestions."
UNEVEN_SPLIT_WARNING = "This share size doesn’t divide the case exactly."

MAX_DIVISOR_OPTION = 10
SUGGESTED_BUY_SIZES = (1, 2, 3, 4, 5)


def _is_positive(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value) and value > 0


def _round_half_up(value: float, places: int) -> float:
    factor = 10 ** places
    return math.floor(value * factor + 0.5) / factor


def divisor_options(k: int, limit: int = MAX_DIVISOR_OPTION) -> List[int]:
    """Divisors of k no larger than min(limit, k), ascending."""
    return [d for d in range(1, min(limit, k) + 1) if k % d == 0]


def _invalid_result() -> AutoSplitResult:
    return AutoSplitResult(
        warn=INVALID_SIZES_WARNING,
        k=0,
        k_display=NOT_AVAILABLE,
        needed_to_fill=NOT_AVAILABLE,
    )


def compute_suggestions(case_size: float, share_size: float, current_shares: int) -> AutoSplitResult:
    """
    Compute auto-split suggestions for a case.

    Args:
        case_size: Size of one case (e.g. 40 lb)
        share_size: Size of one share (e.g. 2 lb)
        current_shares: Shares pledged so far

    Returns:
        AutoSplitResult
    """
    if not (_is_positive(case_size) and _is_positive(share_size)):
        return _invalid_result()

    k_raw = case_size / share_size
    if not math.isfinite(k_raw):
        return _invalid_result()

    if not float(k_raw).is_integer():
        k = _round_half_up(k_raw, 3)
        if k.is_integer():
            k = int(k)
        return AutoSplitResult(
            warn=UNEVEN_SPLIT_WARNING,
            k=k,
            k_display=f"{k} (not even)",
            needed_to_fill=NOT_AVAILABLE,
        )

    k = int(k_raw)
    needed = (k - current_shares % k) % k

    suggestions: List[SplitSuggestion] = []
    if needed > 0:
        suggestions.append(SplitSuggestion(buy=needed, completes=1))

    for m in SUGGESTED_BUY_SIZES:
        if m <= k and k % m == 0 and all(s.buy != m for s in suggestions):
            completes = (current_shares + m) // k - current_shares // k
            suggestions.append(SplitSuggestion(buy=m, completes=max(completes, 0)))

    return AutoSplitResult(
        warn="",
        k=k,
        k_display=str(k),
        needed_to_fill=needed,
        divisor_options=divisor_options(k),
        suggestions=suggestions,
    )
