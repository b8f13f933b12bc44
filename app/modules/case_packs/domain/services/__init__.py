"""
Domain services for the case-pack module.
"""

from .autosplit_service import compute_suggestions, divisor_options
from .case_weight_resolver import CaseWeightResolver
from .label_parser import gtin_check_digit_valid, parse_gs1_128

__all__ = [
    "compute_suggestions",
    "divisor_options",
    "CaseWeightResolver",
    "gtin_check_digit_valid",
    "parse_gs1_128",
]
