"""生成请求与字符池条目 (entries) 的解析。"""

from dataclasses import dataclass
from typing import Iterable

from .charsets import ALL_SETS_ALIAS, DEFINED_SETS, SETS_BY_CODE
from .errors import UsageError

ADD_PREFIX = "+"
REMOVE_PREFIX = "-"
CUSTOM_SET_OPEN = "["
CUSTOM_SET_CLOSE = "]"

_VALID_CODES_HINT = "可选: d, l, u, s, m, A, [字符...]"


@dataclass(frozen=True)
class GenerationRequest:
    """一次调用所需的全部参数。

    `include_*` 字段控制对应的预定义字符集，默认全部启用。
    """

    length: int
    include_digits: bool = True
    include_lowercase: bool = True
    include_uppercase: bool = True
    include_symbols: bool = True
    include_misc_symbols: bool = True
    extra_included: frozenset[str] = frozenset()
    extra_excluded: frozenset[str] = frozenset()
    repeat: int = 1
    show_pool: bool = False

    def __post_init__(self) -> None:
        if self.length < 1:
            raise UsageError(f"无效的长度: {self.length}", "长度必须为正整数")
        if self.repeat < 1:
            raise UsageError(f"无效的数量: {self.repeat}", "数量必须为正整数")

    @property
    def enabled_sets(self) -> frozenset[str]:
        """启用的预定义字符集代号。"""
        return frozenset(s.code for s in DEFINED_SETS if getattr(self, s.flag))


def _read_custom_set(entry: str, start: int) -> tuple[str, int]:
    """读取 `[` 之后直到 `]` (或条目末尾) 的字符。

    Returns:
        (字符, 下一个待解析位置)。
    """
    end = entry.find(CUSTOM_SET_CLOSE, start)
    if end == -1:
        return entry[start:], len(entry)
    return entry[start:end], end + 1


def parse_entries(
    entries: Iterable[str],
    *,
    length: int,
    repeat: int = 1,
    show_pool: bool = False,
) -> GenerationRequest:
    """将长度之后的条目参数解析为 GenerationRequest。

    每个条目以 `+` (加入) 或 `-` (移除) 开头，后接任意个字符集代号
    或 `[...]` 自定义字符。条目按出现顺序依次生效。

    示例: parse_entries(["-m", "+[%$^@]"], length=10)
    """
    enabled = {s.code for s in DEFINED_SETS}
    added: list[str] = []
    removed: list[str] = []

    for entry in entries:
        if not entry:
            continue

        prefix, body = entry[0], entry[1:]
        if prefix == ADD_PREFIX:
            state = True
        elif prefix == REMOVE_PREFIX:
            state = False
        else:
            raise UsageError(f"无效的条目前缀: '{prefix}'", "应为 + 或 -")

        pos = 0
        while pos < len(body):
            code = body[pos]
            pos += 1
            if code == CUSTOM_SET_OPEN:
                chars, pos = _read_custom_set(body, pos)
                (added if state else removed).extend(chars)
            elif code == ALL_SETS_ALIAS:
                enabled = set(SETS_BY_CODE) if state else set()
            elif code in SETS_BY_CODE:
                if state:
                    enabled.add(code)
                else:
                    enabled.discard(code)
            else:
                raise UsageError(f"无效的字符池条目: '{code}'", _VALID_CODES_HINT)

    return GenerationRequest(
        length=length,
        **{s.flag: s.code in enabled for s in DEFINED_SETS},
        extra_included=frozenset(added),
        extra_excluded=frozenset(removed),
        repeat=repeat,
        show_pool=show_pool,
    )

