"""预定义字符集。"""

import string
from dataclasses import dataclass


@dataclass(frozen=True)
class CharacterSet:
    """预定义字符集。`flag` 为 GenerationRequest 中控制该集合的字段名。"""

    code: str
    name: str
    chars: str
    flag: str


DIGITS = CharacterSet("d", "digits", string.digits, "include_digits")
LOWERCASE = CharacterSet(
    "l", "lowercase", string.ascii_lowercase, "include_lowercase"
)
UPPERCASE = CharacterSet(
    "u", "uppercase", string.ascii_uppercase, "include_uppercase"
)
SEPARATORS = CharacterSet("s", "separators", "-._", "include_symbols")
MISC_SYMBOLS = CharacterSet("m", "misc", "!*&#", "include_misc_symbols")

# 顺序即字符池中的顺序
DEFINED_SETS: tuple[CharacterSet, ...] = (
    DIGITS,
    LOWERCASE,
    UPPERCASE,
    SEPARATORS,
    MISC_SYMBOLS,
)

SETS_BY_CODE: dict[str, CharacterSet] = {s.code: s for s in DEFINED_SETS}

# 代表全部预定义字符集 (dlusm)
ALL_SETS_ALIAS = "A"
