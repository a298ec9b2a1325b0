# -*- coding: utf-8 -*-
"""
中文大写金额工具

- get_amount(text) -> Decimal：从文本抽取金额（数字优先，其次中文大写），找不到为 0
- amount_to_chinese(amount) -> str：金额转中文大写，如 1105000.00 -> 壹佰壹拾万伍仟元整
"""

from cn_amount.parser import get_amount, parse_amount, AmountError, AmountErrorCode
from cn_amount.formatter import amount_to_chinese

__version__ = "0.1.0"

__all__ = [
    "get_amount",
    "parse_amount",
    "amount_to_chinese",
    "AmountError",
    "AmountErrorCode",
]
