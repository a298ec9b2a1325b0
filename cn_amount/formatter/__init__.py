# -*- coding: utf-8 -*-
"""
Amount Formatter Module

主要入口：
- amount_to_chinese(amount) -> str

Usage:
    from cn_amount.formatter import amount_to_chinese
    text = amount_to_chinese(Decimal("1105000.00"))  # 壹佰壹拾万伍仟元整
"""

from cn_amount.formatter.format_amount import amount_to_chinese, to_decimal
from cn_amount.formatter.normalize_zero import normalize_zero

__all__ = [
    "amount_to_chinese",
    "to_decimal",
    "normalize_zero",
]
