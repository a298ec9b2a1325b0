# -*- coding: utf-8 -*-
"""
Amount Text Extraction

负责从任意文本中找出金额片段（只回传第一个）。
优先匹配阿拉伯数字金额，找不到才匹配中文大写金额：
- 整段文本就是数字：10000、1105000.00
- 数字 + 单位：1,000元、2.8万元、1万、0.5元
- 中文大写：壹佰壹拾万元整、拾壹亿壹仟万元
"""

import re
from typing import Optional

from cn_amount.parser.types import AmountKind, AmountMatch

# 编译正则表达式以提升效能
_WHITESPACE_PATTERN = re.compile(r"\s+")

# 数字单位：长的放前面，1万元 不会被切成 1万 + 元
_DIGIT_UNITS = r"万元|万|元"
_DIGIT_AMOUNT_PATTERN = re.compile(
    r"(^\d+(?:\.\d+)?$)|"                                      # 整段都是数字
    rf"(?:(?:[1-9]\d*[\d,，]*\.?\d*)|(?:0\.\d+))(?:{_DIGIT_UNITS})"  # 数字 + 单位
)

# 第一个字必须是数字（或 拾），后面可接任意大写字形
_CHINESE_AMOUNT_PATTERN = re.compile(
    r"[壹贰叁肆伍陆柒捌玖拾][壹贰叁肆伍陆柒捌玖拾佰仟万亿元圆角分厘零整正]*"
)


def strip_whitespace(text: str) -> str:
    """移除所有空白（含全形空格）"""
    return _WHITESPACE_PATTERN.sub("", text or "")


def extract_amount_text(text: Optional[str]) -> Optional[AmountMatch]:
    """
    从文本中抽取金额片段。

    Args:
        text: 要解析的文本 (e.g., "罚款10000元", "人民币壹万元整")

    Returns:
        AmountMatch 或 None（文本中没有金额）
    """
    if not text:
        return None

    content = strip_whitespace(text)

    # 1. 阿拉伯数字金额
    match = _DIGIT_AMOUNT_PATTERN.search(content)
    if match:
        return AmountMatch(match.group(0), match.start(), match.end(), AmountKind.DIGIT)

    # 2. 中文大写金额
    match = _CHINESE_AMOUNT_PATTERN.search(content)
    if match:
        return AmountMatch(match.group(0), match.start(), match.end(), AmountKind.CHINESE)

    return None
