"""字符池与参数解析相关的异常。"""

from typing import Optional


class RandStrGenError(Exception):
    """所有可报告给用户的错误的基类。

    Attributes:
        hint: 附加的帮助提示，由 CLI 在错误信息之后输出。
    """

    exit_code = 1

    def __init__(self, message: str, hint: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint


class UsageError(RandStrGenError):
    """参数缺失或格式错误。"""

    exit_code = 2


class EmptyPoolError(RandStrGenError):
    """最终字符池为空，无法采样。"""
