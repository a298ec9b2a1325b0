# -*- coding: utf-8 -*-
"""
Digit Amount Parser

把 Extractor 抽出的阿拉伯数字金额（如 "1,000.5元"、"2.8万元"）转为 Decimal（单位：元）。
"""

import logging
from decimal import Decimal, InvalidOperation

logger = logging.getLogger(__name__)

_THOUSANDS_SEPARATORS = (",", "，")

# 长的先比对：万元 必须在 万、元 之前
_UNIT_SUFFIXES = ("万元", "万", "元")

_TEN_THOUSAND = Decimal(10000)


def _remove_unit(content: str) -> str:
    for suffix in _UNIT_SUFFIXES:
        if content.endswith(suffix):
            return content[: -len(suffix)]
    return content


def parse_digits(matched: str) -> Decimal:
    """数字金额转为元；无法解析时回传 0"""
    if not matched:
        return Decimal(0)

    content = matched
    for separator in _THOUSANDS_SEPARATORS:
        content = content.replace(separator, "")

    number = _remove_unit(content)
    if not number:
        return Decimal(0)

    try:
        amount = Decimal(number)
    except InvalidOperation:
        logger.debug(f"Unparseable digit amount: {matched!r}")
        return Decimal(0)

    if not amount.is_finite():
        logger.debug(f"Non-finite digit amount: {matched!r}")
        return Decimal(0)

    # 万、万元 -> 元
    if "万" in content:
        amount *= _TEN_THOUSAND

    return amount
