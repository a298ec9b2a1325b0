# -*- coding: utf-8 -*-
"""Zero elision for Chinese uppercase amounts.

Applied to the raw digit+unit expansion (e.g. 壹佰壹拾零万伍仟零佰零拾零元零角零分零厘)
to produce the written form (壹佰壹拾万伍仟元). Pass order matters: later passes
rely on the zero runs left by earlier ones.
"""

from __future__ import annotations


# 1) 零仟 / 零佰 / 零拾 -> 零
_SMALL_UNIT_ZEROS = ("零仟", "零佰", "零拾")

# 2) 零亿 / 零万 / 零元 -> 亿 / 万 / 元 (the boundary glyph is always kept)
_GROUP_BOUNDARIES = (("零亿", "亿"), ("零万", "万"), ("零元", "元"))

# 3) fractional zeros are never written
_FRACTION_ZEROS = ("零角", "零分", "零厘")


def _replace_all(s: str, old: str, new: str) -> str:
    # Repeat until the pattern is gone, so results of a replacement are also rewritten.
    while old in s:
        s = s.replace(old, new)
    return s


def normalize_zero(text: str) -> str:
    s = text or ""

    for pattern in _SMALL_UNIT_ZEROS:
        s = _replace_all(s, pattern, "零")

    for pattern, boundary in _GROUP_BOUNDARIES:
        s = _replace_all(s, "零零零", "零")
        s = _replace_all(s, "零零", "零")
        s = _replace_all(s, pattern, boundary)

    for pattern in _FRACTION_ZEROS:
        s = _replace_all(s, pattern, "")

    # 4) an all-zero 万 group right after 亿 disappears
    s = _replace_all(s, "亿万", "亿")

    return s
