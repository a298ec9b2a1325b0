# -*- coding: utf-8 -*-
"""
Amount Parser Module

负责从自由文本中抽取金额，并转为 Decimal（单位：元）。
优先阿拉伯数字金额，找不到才用中文大写金额。

主要入口：
- get_amount(text: str) -> Decimal        找不到金额时回传 0（fail soft）
- parse_amount(text: str) -> Decimal      找不到金额时抛出 AmountError

Usage:
    from cn_amount.parser import get_amount
    amount = get_amount("已履行行政处罚决定,罚款10000元")
"""

import logging
from decimal import Decimal
from typing import Optional

from cn_amount.parser.types import AmountKind, AmountMatch
from cn_amount.parser.errors import AmountError, AmountErrorCode
from cn_amount.parser.extract_amount import extract_amount_text
from cn_amount.parser.parse_digits import parse_digits
from cn_amount.parser.parse_chinese import parse_chinese

logger = logging.getLogger(__name__)


def parse_match(match: AmountMatch) -> Decimal:
    """依片段种类选择解析方式"""
    if match.kind is AmountKind.DIGIT:
        return parse_digits(match.text)
    return parse_chinese(match.text)


def parse_amount(text: Optional[str]) -> Decimal:
    """
    从文本中抽取并解析金额。

    Raises:
        AmountError: 文本中没有金额 (NO_MATCH)
    """
    match = extract_amount_text(text)
    if match is None:
        raise AmountError.from_code(AmountErrorCode.NO_MATCH)
    return parse_match(match)


def get_amount(text: Optional[str]) -> Decimal:
    """
    从文本中抽取金额并转为元。

    Args:
        text: 任意文本，可为空或 None

    Returns:
        Decimal: 金额；找不到金额时为 0
    """
    logger.debug(f"get_amount request: {text!r}")

    match = extract_amount_text(text)
    if match is None:
        logger.debug(f"get_amount no match: {text!r}")
        return Decimal(0)

    amount = parse_match(match)
    logger.debug(f"get_amount {match.kind.value} match {match.text!r} => {amount}")
    return amount


# Export
__all__ = [
    "get_amount",
    "parse_amount",
    "parse_match",
    "extract_amount_text",
    "parse_digits",
    "parse_chinese",
    "AmountKind",
    "AmountMatch",
    "AmountError",
    "AmountErrorCode",
]
