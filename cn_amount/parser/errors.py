# -*- coding: utf-8 -*-
"""
Amount Error Types

定义金额解析/格式化错误类型与讯息模板。
get_amount 一律 fail soft（回传 0 或部分结果），只有严格接口与格式化会抛出 AmountError。
"""

from enum import Enum
from dataclasses import dataclass
from typing import Optional


class AmountErrorCode(Enum):
    """金额错误代码"""

    NO_MATCH = "no_match"                   # 文本中找不到金额
    MALFORMED_NUMERAL = "malformed_numeral" # 大写金额中有无法识别的字
    INVALID_AMOUNT = "invalid_amount"       # 金额格式错误（非数字）
    OUT_OF_RANGE = "out_of_range"           # 超出单位表支持范围（>= 10^13）


# 错误讯息模板
ERROR_MESSAGES = {
    AmountErrorCode.NO_MATCH: "文本中没有可识别的金额",
    AmountErrorCode.MALFORMED_NUMERAL: "无法识别的大写金额「{value}」",
    AmountErrorCode.INVALID_AMOUNT: "金额格式有误：{value}",
    AmountErrorCode.OUT_OF_RANGE: "金额 {value} 超出支持范围（整数部分最多 13 位）",
}


@dataclass
class AmountError(Exception):
    """金额解析/格式化错误"""

    code: AmountErrorCode
    message: str
    details: Optional[dict] = None

    def __str__(self) -> str:
        return self.message

    @classmethod
    def from_code(cls, code: AmountErrorCode, **kwargs) -> "AmountError":
        """从错误代码建立错误物件"""
        template = ERROR_MESSAGES.get(code, "金额错误")
        message = template.format(**kwargs) if kwargs else template
        return cls(code=code, message=message, details=kwargs if kwargs else None)
