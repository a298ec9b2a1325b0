# -*- coding: utf-8 -*-
"""
Round trip: amount_to_chinese -> parse_chinese / get_amount must keep the exact value.
"""

from decimal import Decimal

import pytest
from cn_amount import amount_to_chinese, get_amount
from cn_amount.parser.parse_chinese import parse_chinese


_AMOUNTS = [
    "1",
    "10",
    "15",
    "100",
    "1010",
    "10005",
    "86410",
    "1105000",
    "15410.354",
    "100000001",
    "100001000",
    "120000000",
    "1000000000",
    "1110005410.284",
    "100010000000",
    "100000000001.1",
    "123456789.123",
    "999999999999.999",
    "0.5",
    "0.05",
    "0.001",
    "1234.5",
    "-1234.5",
    "-0.009",
]


@pytest.mark.parametrize("amount", _AMOUNTS)
def test_parse_chinese_inverts_format(amount) -> None:
    value = Decimal(amount)
    assert parse_chinese(amount_to_chinese(value)) == value


@pytest.mark.parametrize("amount", [a for a in _AMOUNTS if not a.startswith("-") and Decimal(a) >= 1])
def test_get_amount_finds_formatted_amount_in_prose(amount) -> None:
    value = Decimal(amount)
    text = f"经审核，应支付人民币{amount_to_chinese(value)}，请于三日内付清。"
    assert get_amount(text) == value
