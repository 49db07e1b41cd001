"""字符池构建。"""

from typing import Iterable, Iterator, overload

from .charsets import DEFINED_SETS
from .errors import EmptyPoolError
from .request import GenerationRequest


class CharacterPool:
    """去重后的候选字符集合，支持按下标随机访问。

    保留插入顺序，使 `--show-pool` 的输出稳定。
    """

    def __init__(self, chars: Iterable[str] = ()) -> None:
        self._chars: tuple[str, ...] = tuple(dict.fromkeys(chars))

    def __len__(self) -> int:
        return len(self._chars)

    @overload
    def __getitem__(self, index: int) -> str: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[str, ...]: ...

    def __getitem__(self, index: int | slice) -> str | tuple[str, ...]:
        return self._chars[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self._chars)

    def __contains__(self, char: object) -> bool:
        return char in self._chars

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CharacterPool):
            return NotImplemented
        return set(self._chars) == set(other._chars)

    def __repr__(self) -> str:
        return f"CharacterPool({''.join(self._chars)!r})"

    @property
    def chars(self) -> tuple[str, ...]:
        return self._chars


def _defined_chars(request: GenerationRequest) -> list[str]:
    chars: list[str] = []
    for charset in DEFINED_SETS:
        if getattr(request, charset.flag):
            chars.extend(charset.chars)
    return chars


def ineffective_changes(
    request: GenerationRequest,
) -> tuple[frozenset[str], frozenset[str]]:
    """找出不会改变字符池的自定义条目。

    Returns:
        (已在预定义字符集中的加入字符, 不在字符池中的移除字符)。
    """
    defined = set(_defined_chars(request))
    redundant_adds = request.extra_included & defined
    missing_removes = request.extra_excluded - defined - request.extra_included
    return frozenset(redundant_adds), frozenset(missing_removes)


def build_pool(request: GenerationRequest) -> CharacterPool:
    """根据请求构建字符池。

    先加入启用的预定义字符集与自定义加入的字符，再移除自定义移除的字符。
    重复加入的字符会被合并；移除不存在的字符不做处理。

    Raises:
        EmptyPoolError: 最终字符池为空。
    """
    chars = _defined_chars(request)
    chars.extend(sorted(request.extra_included))

    pool = CharacterPool(c for c in chars if c not in request.extra_excluded)
    if not pool:
        raise EmptyPoolError(
            "字符池为空，无法生成字符串",
            "至少保留一个字符集，或用 \"+[...]\" 加入字符",
        )
    return pool


CUSTOM_SECTION = "custom"


def pool_sections(
    request: GenerationRequest, pool: CharacterPool
) -> list[tuple[str, str]]:
    """按来源把字符池分组，用于 `--show-pool` 输出。

    Returns:
        (字符集名称, 该组仍留在池中的字符) 列表，空组省略。
        自定义加入的字符归入 "custom"。
    """
    sections: list[tuple[str, str]] = []
    seen: set[str] = set()
    for charset in DEFINED_SETS:
        if not getattr(request, charset.flag):
            continue
        chars = "".join(c for c in charset.chars if c in pool)
        seen.update(chars)
        if chars:
            sections.append((charset.name, chars))

    custom = "".join(c for c in pool if c not in seen)
    if custom:
        sections.append((CUSTOM_SECTION, custom))
    return sections
