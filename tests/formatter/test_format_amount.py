# -*- coding: utf-8 -*-
"""
Unit tests for format_amount module.
"""

from decimal import Decimal

import pytest
from cn_amount.formatter.format_amount import (
    amount_to_chinese,
    fraction_to_chinese,
    integer_to_chinese,
    to_decimal,
)
from cn_amount.parser.errors import AmountError, AmountErrorCode


class TestAmountToChinese:
    """Tests for amount_to_chinese function."""

    # === Zero and sign ===

    @pytest.mark.parametrize("amount", [0, Decimal("0.00"), "0", Decimal("-0"), Decimal("0.0001")])
    def test_zero(self, amount):
        assert amount_to_chinese(amount) == "零元整"

    def test_ten_thousand(self):
        assert amount_to_chinese(10000) == "壹万元整"

    def test_negative(self):
        result = amount_to_chinese(-10000)
        assert result.startswith("负")
        assert result == "负壹万元整"

    # === Zero elision ===

    @pytest.mark.parametrize(
        "amount, expected",
        [
            (Decimal("1105000.00"), "壹佰壹拾万伍仟元整"),
            (Decimal("86410"), "捌万陆仟肆佰壹拾元整"),
            (Decimal("10005"), "壹万零伍元整"),
            (Decimal("1010"), "壹仟零壹拾元整"),
            (Decimal("100000001"), "壹亿零壹元整"),
            (Decimal("120000000"), "壹亿贰仟万元整"),
            (Decimal("1000000000"), "壹拾亿元整"),
            (Decimal("100000000001.1"), "壹仟亿零壹元壹角"),
            (Decimal("10000.200"), "壹万元贰角"),
            (Decimal("10000.0"), "壹万元整"),
        ],
    )
    def test_known_amounts(self, amount, expected):
        assert amount_to_chinese(amount) == expected

    # === Fractions ===

    def test_rounds_to_li_half_even(self):
        """10000.2345 -> 10000.234（ROUND_HALF_EVEN）"""
        assert amount_to_chinese(Decimal("10000.2345")) == "壹万元贰角叁分肆厘"

    def test_drops_zero_fen(self):
        assert amount_to_chinese(Decimal("10001.1034")) == "壹万零壹元壹角叁厘"

    def test_fraction_only(self):
        assert amount_to_chinese(Decimal("0.5")) == "伍角"
        assert amount_to_chinese(Decimal("0.05")) == "伍分"
        assert amount_to_chinese(Decimal("0.001")) == "壹厘"

    def test_float_uses_shortest_repr(self):
        assert amount_to_chinese(0.1) == "壹角"

    # === Errors ===

    @pytest.mark.parametrize("amount", [Decimal("1e13"), 10 ** 14, Decimal("9999999999999.9999")])
    def test_out_of_range(self, amount):
        with pytest.raises(AmountError) as exc_info:
            amount_to_chinese(amount)
        assert exc_info.value.code == AmountErrorCode.OUT_OF_RANGE

    def test_largest_supported(self):
        assert amount_to_chinese(Decimal("9999999999999")).startswith("玖万玖仟")

    @pytest.mark.parametrize("amount", ["abc", "", None, True, Decimal("NaN"), float("inf"), [1]])
    def test_invalid_amount(self, amount):
        with pytest.raises(AmountError) as exc_info:
            amount_to_chinese(amount)
        assert exc_info.value.code == AmountErrorCode.INVALID_AMOUNT


def test_to_decimal_keeps_digits() -> None:
    assert str(to_decimal("1105000.00")) == "1105000.00"
    assert to_decimal(12) == Decimal(12)


def test_integer_to_chinese_expands_every_digit() -> None:
    assert integer_to_chinese("1005") == "壹仟零佰零拾伍元"


def test_integer_to_chinese_out_of_range() -> None:
    with pytest.raises(AmountError):
        integer_to_chinese("1" * 14)


def test_fraction_to_chinese_keeps_leading_zero() -> None:
    assert fraction_to_chinese("050") == "零角伍分零厘"
