# -*- coding: utf-8 -*-
"""
Amount Formatting

把金额转成中文大写金额，例如：
- 10000      -> 壹万元整
- 1105000.00 -> 壹佰壹拾万伍仟元整
- 10001.1034 -> 壹万零壹元壹角叁厘（先按设定的舍入方式取到厘）
- -10000     -> 负壹万元整
"""

import logging
from decimal import Decimal, InvalidOperation
from typing import Union

from cn_amount import config
from cn_amount.glyphs import (
    DIGIT_GLYPHS,
    FRACTION_UNIT_GLYPHS,
    INT_UNIT_GLYPHS,
    NEGATIVE_GLYPH,
    ZERO_AMOUNT_TEXT,
)
from cn_amount.formatter.normalize_zero import normalize_zero
from cn_amount.parser.errors import AmountError, AmountErrorCode

logger = logging.getLogger(__name__)

AmountLike = Union[Decimal, int, float, str]

# 大写金额最小单位是厘
_LI = Decimal("0.001")

# 整数部分最多 13 位（到 万亿）
_MAX_MAGNITUDE = Decimal(10) ** len(INT_UNIT_GLYPHS)


def to_decimal(amount: AmountLike) -> Decimal:
    """
    转为 Decimal。float 先转字串，避免二进位误差带进大写金额。

    Raises:
        AmountError: 非数字或非有限值 (INVALID_AMOUNT)
    """
    if isinstance(amount, bool):
        raise AmountError.from_code(AmountErrorCode.INVALID_AMOUNT, value=repr(amount))

    if isinstance(amount, Decimal):
        value = amount
    elif isinstance(amount, int):
        value = Decimal(amount)
    elif isinstance(amount, (float, str)):
        try:
            value = Decimal(str(amount).strip())
        except InvalidOperation:
            raise AmountError.from_code(AmountErrorCode.INVALID_AMOUNT, value=repr(amount))
    else:
        raise AmountError.from_code(AmountErrorCode.INVALID_AMOUNT, value=repr(amount))

    if not value.is_finite():
        raise AmountError.from_code(AmountErrorCode.INVALID_AMOUNT, value=repr(amount))
    return value


def integer_to_chinese(digits: str) -> str:
    """整数部分：每个数字接上对应位数的单位（由个位往左）"""
    if len(digits) > len(INT_UNIT_GLYPHS):
        raise AmountError.from_code(AmountErrorCode.OUT_OF_RANGE, value=digits)

    width = len(digits)
    return "".join(
        DIGIT_GLYPHS[int(d)] + INT_UNIT_GLYPHS[width - i - 1]
        for i, d in enumerate(digits)
    )


def fraction_to_chinese(digits: str) -> str:
    """小数部分：固定 3 位，依序对应 角、分、厘"""
    return "".join(
        DIGIT_GLYPHS[int(d)] + unit
        for d, unit in zip(digits, FRACTION_UNIT_GLYPHS)
    )


def amount_to_chinese(amount: AmountLike) -> str:
    """
    金额转成中文大写金额。

    Args:
        amount: Decimal / int / 数字字串（float 会以字串形式转换）

    Returns:
        str: 大写金额，0 为 "零元整"，负数前加 "负"

    Raises:
        AmountError: INVALID_AMOUNT（非数字）或 OUT_OF_RANGE（整数部分超过 13 位）
    """
    logger.debug(f"amount_to_chinese request: {amount!r}")

    value = to_decimal(amount)
    if abs(value) >= _MAX_MAGNITUDE:
        logger.warning(f"Amount {value} exceeds the supported unit range")
        raise AmountError.from_code(AmountErrorCode.OUT_OF_RANGE, value=str(value))

    # 1. 保留 3 位小数
    magnitude = abs(value).quantize(_LI, rounding=config.ROUNDING)
    if magnitude.is_zero():
        return ZERO_AMOUNT_TEXT

    # 2. 拆成整数与小数（进位到 10^13 时由 integer_to_chinese 报 OUT_OF_RANGE）
    int_str, frac_str = f"{magnitude:f}".split(".")
    int_str = int_str.lstrip("0")

    # 整数部分为 0 时不写 零元，直接从 角/分/厘 开始
    raw = (integer_to_chinese(int_str) if int_str else "") + fraction_to_chinese(frac_str)

    # 3. 清理多余的零
    result = normalize_zero(raw)

    # 4. 最后一个单位是 元，补上 整
    if result.endswith("元"):
        result += "整"

    if value.is_signed():
        result = NEGATIVE_GLYPH + result

    logger.debug(f"amount_to_chinese {value} => {result}")
    return result
