# 📄 File: app/modules/case_packs/domain/models/label.py
# 🧭 Purpose (Layman Explanation):
# Holds what we could read off a case's barcode label: which product the case is,
# how many units it contains and its net weight.
# 🧪 Purpose (Technical Summary):
# Domain value object produced by the GS1-128 label parser.
# 🔗 Dependencies:
# pydantic, typing
# 🔄 Connected Modules / Calls From:
# label_parser service, label schemas

from typing import Optional

from pydantic import BaseModel


class ParsedLabel(BaseModel):
    """
    Fields extracted from a human-readable GS1-128 case label.

    Every field is optional: a label may carry any subset of the
    recognised Application Identifiers.
    """

    gtin_case: Optional[str] = None
    units_per_case: Optional[int] = None
    case_kg: Optional[float] = None
    gtin_valid: Optional[bool] = None
