# -*- coding: utf-8 -*-
"""
中文大写金额对照表

数字字形、金额单位（排序与倍数）在这里集中定义，
解析（parser）与格式化（formatter）共用。所有表在 import 时建立，之后不再修改。
"""

from __future__ import annotations

from decimal import Decimal
from types import MappingProxyType
from typing import NamedTuple


class UnitGlyph(NamedTuple):
    """金额单位：rank 越小单位越小，value 为倍数"""

    glyph: str
    rank: int
    value: Decimal


# 阿拉伯数字 -> 大写字形（下标即数值）
DIGIT_GLYPHS: tuple[str, ...] = ("零", "壹", "贰", "叁", "肆", "伍", "陆", "柒", "捌", "玖")

# 大写字形 -> 数值
DIGIT_VALUES = MappingProxyType({glyph: value for value, glyph in enumerate(DIGIT_GLYPHS)})

# 同义字：元=圆，正=整
GLYPH_SYNONYMS = MappingProxyType({"元": "圆", "正": "整"})

# 由小到大排列；整 是结尾标记，不是倍数
_UNITS = (
    UnitGlyph("整", 0, Decimal(0)),
    UnitGlyph("厘", 1, Decimal("0.001")),
    UnitGlyph("分", 2, Decimal("0.01")),
    UnitGlyph("角", 3, Decimal("0.1")),
    UnitGlyph("圆", 4, Decimal(1)),
    UnitGlyph("拾", 5, Decimal(10)),
    UnitGlyph("佰", 6, Decimal(100)),
    UnitGlyph("仟", 7, Decimal(1000)),
    UnitGlyph("万", 8, Decimal(10000)),
    UnitGlyph("亿", 9, Decimal(100000000)),
)

UNIT_GLYPHS = MappingProxyType({unit.glyph: unit for unit in _UNITS})

# rank -> 单位，rank 连续，直接用 tuple 下标
UNITS_BY_RANK: tuple[UnitGlyph, ...] = _UNITS

# 格式化整数部分时，由个位往高位依次使用的单位（最多 13 位）
INT_UNIT_GLYPHS: tuple[str, ...] = (
    # 元到万
    "元", "拾", "佰", "仟", "万",
    # 拾万到仟万
    "拾", "佰", "仟",
    # 亿到万亿
    "亿", "拾", "佰", "仟", "万",
)

# 小数部分：角、分、厘
FRACTION_UNIT_GLYPHS: tuple[str, ...] = ("角", "分", "厘")

NEGATIVE_GLYPH = "负"
ZERO_AMOUNT_TEXT = "零元整"
