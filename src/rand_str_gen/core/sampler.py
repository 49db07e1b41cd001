"""从字符池中均匀随机采样。"""

import random
from typing import Optional

from .errors import EmptyPoolError
from .pool import CharacterPool, build_pool
from .request import GenerationRequest


def sample(
    pool: CharacterPool, length: int, rng: Optional[random.Random] = None
) -> str:
    """从字符池中有放回地独立均匀抽取 length 个字符。

    Args:
        pool: 非空字符池。
        length: 字符串长度，0 时返回空字符串。
        rng: 随机源。默认使用以系统熵为种子的 random.Random (非密码学安全)。
    """
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")
    if length == 0:
        return ""
    if not pool:
        raise EmptyPoolError("字符池为空，无法生成字符串")

    rng = rng or random.Random()
    return "".join(rng.choices(pool.chars, k=length))


def generate(
    request: GenerationRequest,
    rng: Optional[random.Random] = None,
    *,
    pool: Optional[CharacterPool] = None,
) -> list[str]:
    """按请求生成 request.repeat 个字符串。

    未传入 pool 时按请求构建字符池。
    """
    if pool is None:
        pool = build_pool(request)
    rng = rng or random.Random()
    return [sample(pool, request.length, rng) for _ in range(request.repeat)]
