# 📄 File: app/modules/case_packs/domain/models/autosplit.py
# 🧭 Purpose (Layman Explanation):
# Holds the answer to "how should this case be split?": how many shares make a case,
# how many more pledges finish the current case, and a few suggested pledge sizes.
# 🧪 Purpose (Technical Summary):
# Domain result types for the auto-split computation.
# 🔗 Dependencies:
# pydantic, typing
# 🔄 Connected Modules / Calls From:
# autosplit service, autosplit schemas

from typing import List, Union

from pydantic import BaseModel, Field


class SplitSuggestion(BaseModel):
    """Buying `buy` more shares completes `completes` more cases."""
    buy: int
    completes: int


class AutoSplitResult(BaseModel):
    """
    Result of splitting a case into shares.

    `k` is the share count rounded to three decimals, an int whenever that
    value is whole. Only an empty `warn` means the split is exact. `needed_to_fill` holds a placeholder
    string when it cannot be computed.
    """

    warn: str = ""
    k: Union[int, float] = 0
    k_display: str
    needed_to_fill: Union[int, str]
    divisor_options: List[int] = Field(default_factory=list)
    suggestions: List[SplitSuggestion] = Field(default_factory=list)

    @property
    def divides_evenly(self) -> bool:
        return not self.warn and self.k > 0
