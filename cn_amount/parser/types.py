# -*- coding: utf-8 -*-
"""
Amount match types

定义抽取结果的种类与匹配片段，Extractor 和 Parser 共用。
"""

from dataclasses import dataclass
from enum import Enum


class AmountKind(Enum):
    """金额文本种类"""

    DIGIT = "digit"       # 阿拉伯数字金额，如 1,000.5元、1万元
    CHINESE = "chinese"   # 中文大写金额，如 壹万伍仟元整


@dataclass(frozen=True)
class AmountMatch:
    """文本中被识别为金额的片段（start/end 以去除空白后的文本为准）"""

    text: str
    start: int
    end: int
    kind: AmountKind

    @property
    def span(self) -> tuple[int, int]:
        return self.start, self.end
