# -*- coding: utf-8 -*-
"""
Chinese Amount Parser

把中文大写金额（如 "拾壹亿壹仟万伍仟肆佰壹拾元贰角捌分肆厘"）转为 Decimal（单位：元）。

规则：
- 数字字形只设定「当前数字」，遇到单位才累加 数字 × 单位。
- 万、亿 是分组单位：单位右边还有更大的单位时，再乘上右边最大单位的倍数
  （"壹仟万" 的 仟 实际是 1000 × 10000）。
- 右边最大单位由一次右到左扫描先算好，每个字 O(1) 查表。
- 解析一律 fail soft：不认识的字、结尾没有单位的数字都当作 0，不抛错。
"""

import logging
from decimal import Decimal
from typing import Optional

from cn_amount.glyphs import (
    DIGIT_VALUES,
    GLYPH_SYNONYMS,
    NEGATIVE_GLYPH,
    UNIT_GLYPHS,
    UNITS_BY_RANK,
)

logger = logging.getLogger(__name__)


def normalize_synonyms(text: str) -> str:
    """元 -> 圆，正 -> 整"""
    for glyph, canonical in GLYPH_SYNONYMS.items():
        text = text.replace(glyph, canonical)
    return text


def _suffix_max_ranks(text: str) -> list[int]:
    """每个位置（含自己）往右所有单位中的最大 rank；右边没有单位时为 -1"""
    ranks = [-1] * len(text)
    current = -1
    for i in range(len(text) - 1, -1, -1):
        unit = UNIT_GLYPHS.get(text[i])
        if unit is not None and unit.rank > current:
            current = unit.rank
        ranks[i] = current
    return ranks


def parse_chinese(text: str) -> Decimal:
    """中文大写金额转为元；无法识别的部分当作 0"""
    if not text:
        return Decimal(0)

    negative = text.startswith(NEGATIVE_GLYPH)
    if negative:
        text = text[len(NEGATIVE_GLYPH):]

    content = normalize_synonyms(text)
    max_ranks = _suffix_max_ranks(content)

    result = Decimal(0)
    # None 表示尚未出现任何数字：开头的单位（如 拾伍万 的 拾）视为 壹
    digit: Optional[int] = None

    for i, char in enumerate(content):
        if char in DIGIT_VALUES:
            digit = DIGIT_VALUES[char]
            continue

        unit = UNIT_GLYPHS.get(char)
        if unit is None:
            logger.debug(f"Skipping unknown glyph {char!r} in {text!r}")
            continue

        contribution = (1 if digit is None else digit) * unit.value
        if unit.rank != max_ranks[i]:
            contribution *= UNITS_BY_RANK[max_ranks[i]].value
        result += contribution
        digit = 0

    if digit:
        logger.debug(f"Ignoring trailing digit without unit in {text!r}")

    return -result if negative else result
