"""
Tests for the auto-split arithmetic.
"""

import math

import pytest

from app.modules.case_packs.domain.services.autosplit_service import (
    INVALID_SIZES_WARNING,
    NOT_AVAILABLE,
    UNEVEN_SPLIT_WARNING,
    compute_suggestions,
    divisor_options,
)


def _pairs(result):
    return [(s.buy, s.completes) for s in result.suggestions]


class TestEvenSplit:
    def test_partially_filled_case(self):
        result = compute_suggestions(40, 2, 13)

        assert result.warn == ""
        assert result.k == 20
        assert result.k_display == "20"
        assert result.needed_to_fill == 7
        assert result.divisor_options == [1, 2, 4, 5, 10]
        assert _pairs(result) == [(7, 1), (1, 0), (2, 0), (4, 0), (5, 0)]
        assert result.divides_evenly

    def test_empty_case_has_no_fill_suggestion(self):
        result = compute_suggestions(40, 2, 0)

        assert result.needed_to_fill == 0
        assert _pairs(result) == [(1, 0), (2, 0), (4, 0), (5, 0)]

    def test_fill_suggestion_is_not_repeated(self):
        result = compute_suggestions(12, 1, 11)

        assert result.needed_to_fill == 1
        assert result.divisor_options == [1, 2, 3, 4, 6]
        assert _pairs(result) == [(1, 1), (2, 1), (3, 1), (4, 1)]

    def test_buy_sizes_never_exceed_k(self):
        result = compute_suggestions(2, 1, 3)

        assert result.k == 2
        assert _pairs(result) == [(1, 1), (2, 1)]

    def test_single_share_case(self):
        result = compute_suggestions(3, 3, 5)

        assert result.k == 1
        assert result.needed_to_fill == 0
        assert result.divisor_options == [1]
        assert _pairs(result) == [(1, 1)]

    def test_fractional_sizes_that_divide(self):
        result = compute_suggestions(7.5, 2.5, 1)
        assert result.k == 3
        assert result.needed_to_fill == 2

    def test_huge_k_bounds_divisor_search(self):
        result = compute_suggestions(1e12, 1, 0)
        assert result.k == 1_000_000_000_000
        assert result.divisor_options == [1, 2, 4, 5, 8, 10]


class TestUnevenSplit:
    def test_rounds_to_three_decimals(self):
        result = compute_suggestions(10, 3, 4)

        assert result.warn == UNEVEN_SPLIT_WARNING
        assert result.k == 3.333
        assert result.k_display == "3.333 (not even)"
        assert result.needed_to_fill == NOT_AVAILABLE
        assert result.divisor_options == []
        assert result.suggestions == []
        assert not result.divides_evenly

    def test_rounds_half_up(self):
        assert compute_suggestions(2, 3, 0).k == 0.667

    def test_whole_rounded_k_is_shown_without_decimals(self):
        result = compute_suggestions(2.9999, 1, 0)

        assert result.k == 3
        assert isinstance(result.k, int)
        assert result.k_display == "3 (not even)"
        assert result.warn == UNEVEN_SPLIT_WARNING
        assert result.suggestions == []
        assert not result.divides_evenly

    def test_tiny_ratio_rounds_to_zero(self):
        result = compute_suggestions(1, 100000, 0)

        assert result.k == 0
        assert result.k_display == "0 (not even)"
        assert not result.divides_evenly


class TestInvalidSizes:
    @pytest.mark.parametrize("case_size, share_size", [
        (0, 2),
        (40, 0),
        (-40, 2),
        (40, -2),
        (math.nan, 2),
        (math.inf, 2),
        (40, math.inf),
        (1e308, 1e-308),
    ])
    def test_invalid(self, case_size, share_size):
        result = compute_suggestions(case_size, share_size, 0)

        assert result.warn == INVALID_SIZES_WARNING
        assert result.k == 0
        assert result.k_display == NOT_AVAILABLE
        assert result.needed_to_fill == NOT_AVAILABLE
        assert result.divisor_options == []
        assert result.suggestions == []


def test_divisor_options_limit():
    assert divisor_options(60) == [1, 2, 3, 4, 5, 6, 10]
    assert divisor_options(7) == [1, 7]
    assert divisor_options(6, limit=3) == [1, 2, 3]
