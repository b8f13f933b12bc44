"""
Tests for GS1-128 label parsing and GTIN check digits.
"""

import pytest

from app.modules.case_packs.domain.services.label_parser import (
    MAX_COUNT_DIGITS,
    extract_ai,
    gtin_check_digit_valid,
    parse_gs1_128,
)


class TestParseGs1128:
    def test_full_label(self):
        parsed = parse_gs1_128("(01)10812345678903(37)12(3102)018144")

        assert parsed.gtin_case == "10812345678903"
        assert parsed.units_per_case == 12
        assert parsed.case_kg == 181.44
        # Check digit should be 8
        assert parsed.gtin_valid is False

    def test_valid_gtin(self):
        parsed = parse_gs1_128("(01)10812345678908")
        assert parsed.gtin_valid is True
        assert parsed.units_per_case is None
        assert parsed.case_kg is None

    @pytest.mark.parametrize("label, expected", [
        ("(3100)25", 25.0),
        ("(3101)0125", 12.5),
        ("(3103)012345", 12.345),
    ])
    def test_weight_decimals(self, label, expected):
        assert parse_gs1_128(label).case_kg == expected

    def test_first_weight_ai_with_digits_wins(self):
        # (3100) is present but empty, so (3101) answers
        assert parse_gs1_128("(3100)(3101)0125").case_kg == 12.5

    def test_lower_decimal_ai_checked_first(self):
        assert parse_gs1_128("(3102)018144(3100)7").case_kg == 7.0

    def test_first_occurrence_of_marker_is_used(self):
        assert parse_gs1_128("(37)6 (37)12").units_per_case == 6

    def test_digit_run_stops_at_non_digit(self):
        parsed = parse_gs1_128("(37)24 cases")
        assert parsed.units_per_case == 24

    def test_empty_value_is_absent(self):
        parsed = parse_gs1_128("(01)(37)")
        assert parsed.gtin_case is None
        assert parsed.units_per_case is None
        assert parsed.gtin_valid is None

    def test_non_ascii_digits_are_not_digits(self):
        assert parse_gs1_128("(37)١٢").units_per_case is None

    def test_unrelated_text(self):
        parsed = parse_gs1_128("FRESH APPLES 40LB")
        assert parsed.model_dump() == {
            "gtin_case": None,
            "units_per_case": None,
            "case_kg": None,
            "gtin_valid": None,
        }

    def test_unknown_ais_are_ignored(self):
        parsed = parse_gs1_128("(10)LOT42(17)250101(01)10812345678908")
        assert parsed.gtin_case == "10812345678908"

    def test_oversized_weight_is_absent(self):
        parsed = parse_gs1_128("(3100)" + "9" * 400)

        assert parsed.case_kg is None

    def test_long_weight_run_still_parses(self):
        parsed = parse_gs1_128("(3102)" + "1" * 30)

        assert parsed.case_kg == pytest.approx(float("1" * 30) / 100)

    def test_oversized_count_is_absent(self):
        parsed = parse_gs1_128("(01)10812345678908(37)" + "1" * 5000)

        assert parsed.units_per_case is None
        assert parsed.gtin_valid is True

    def test_count_at_digit_limit(self):
        parsed = parse_gs1_128("(37)" + "9" * MAX_COUNT_DIGITS)

        assert parsed.units_per_case == int("9" * MAX_COUNT_DIGITS)


class TestExtractAi:
    def test_missing_marker(self):
        assert extract_ai("(01)123", "37") is None

    def test_marker_at_end(self):
        assert extract_ai("abc(37)", "37") is None


class TestGtinCheckDigit:
    @pytest.mark.parametrize("gtin", [
        "12345670",        # GTIN-8
        "036000291452",    # GTIN-12 (UPC-A)
        "4006381333931",   # GTIN-13 (EAN-13)
        "10812345678908",  # GTIN-14
    ])
    def test_valid(self, gtin):
        assert gtin_check_digit_valid(gtin) is True

    @pytest.mark.parametrize("gtin", ["12345671", "036000291453", "10812345678903"])
    def test_invalid(self, gtin):
        assert gtin_check_digit_valid(gtin) is False

    @pytest.mark.parametrize("gtin", [None, "", "1234567", "1234567890", "123456789012345"])
    def test_not_a_gtin_length(self, gtin):
        assert gtin_check_digit_valid(gtin) is None
