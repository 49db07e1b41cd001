"""rand-str-gen CLI 入口。"""

from typing import NoReturn

import click
import pyperclip
from rich.markup import escape
from rich.text import Text

from . import __version__
from .core.errors import RandStrGenError
from .core.pool import (
    CharacterPool,
    build_pool,
    ineffective_changes,
    pool_sections,
)
from .core.request import GenerationRequest, parse_entries
from .core.sampler import generate
from .utils.console import error, info, print_panel, success, warning

USE_HELP_MSG = "使用 `--help` 查看可用参数"

CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
    "auto_envvar_prefix": "RAND_STR_GEN",
    # LENGTH 之后的参数都是条目，即使以 - 开头 (如 -m, "-[.]")
    "allow_interspersed_args": False,
}

EPILOG = """\b
示例:
  # 生成长度为 10 的随机字符串
  rand-str-gen 10
  # 不含杂项符号
  rand-str-gen 10 -m
  # 不含杂项符号，加入自定义字符 % $ ^ @
  rand-str-gen 10 -m "+[%$^@]"
  # 使用默认字符集，但去掉 '.'
  rand-str-gen 10 "-[.]"
  # 只用数字，生成 5 个
  rand-str-gen -r 5 6 -A +d
  # 生成并复制到剪贴板
  rand-str-gen -c 16
"""


def _fail(ctx: click.Context, exc: RandStrGenError) -> NoReturn:
    error(escape(exc.message))
    info(escape(exc.hint or USE_HELP_MSG))
    ctx.exit(exc.exit_code)


def _report_ineffective(request: GenerationRequest) -> None:
    redundant, missing = ineffective_changes(request)
    if redundant:
        warning(
            escape(f"以下字符已在字符池中，无需加入: {', '.join(sorted(redundant))}")
        )
    if missing:
        warning(escape(f"以下字符不在字符池中，无法移除: {', '.join(sorted(missing))}"))


def _render_pool(request: GenerationRequest, pool: CharacterPool) -> Text:
    # Text 不解析 markup，池中的 [ 与 \ 原样显示
    lines = [
        f"{name}: {' '.join(chars)}" for name, chars in pool_sections(request, pool)
    ]
    return Text("\n".join(lines))


@click.command(context_settings=CONTEXT_SETTINGS, epilog=EPILOG)
@click.version_option(version=__version__, prog_name="rand-str-gen")
@click.option(
    "--repeat",
    "-r",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="生成的字符串数量，每行一个",
)
@click.option(
    "--copy",
    "-c",
    is_flag=True,
    default=False,
    help="将最后一个生成的字符串复制到系统剪贴板",
)
@click.option(
    "--show-pool", is_flag=True, default=False, help="输出最终字符池 (stderr)"
)
@click.argument("length", type=click.IntRange(min=1))
@click.argument("entries", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def main(
    ctx: click.Context,
    repeat: int,
    copy: bool,
    show_pool: bool,
    length: int,
    entries: tuple[str, ...],
) -> None:
    """rand-str-gen: 随机字符串生成工具

    LENGTH: 生成字符串的长度，必须为正整数。

    \b
    ENTRIES: [+|-][条目]
      +  将条目加入字符池
      -  从字符池移除条目
    条目是预定义字符集代号与自定义字符集的序列 (不以空格或逗号分隔)。

    \b
    预定义字符集:
      d : 数字, 0-9
      u : 大写英文字母, A-Z
      l : 小写英文字母, a-z
      s : 分隔符, - . _
      m : 杂项符号, ! * & #
      A : 全部字符集 (dulsm) 的别名

    \b
    自定义字符集: [字符]
      '[' 与 ']' 之间的所有字符都会加入该集合，']' 本身无法加入。
      使用自定义字符集时通常需要给参数加引号。

    默认启用全部预定义字符集。
    """
    try:
        request = parse_entries(
            entries, length=length, repeat=repeat, show_pool=show_pool
        )
        _report_ineffective(request)
        pool = build_pool(request)
        if request.show_pool:
            print_panel("字符池", _render_pool(request, pool))
        strings = generate(request, pool=pool)
    except RandStrGenError as e:
        _fail(ctx, e)

    for s in strings:
        click.echo(s)

    if copy:
        try:
            pyperclip.copy(strings[-1])
        except pyperclip.PyperclipException as e:
            error(escape(f"无法写入剪贴板: {e}"))
            ctx.exit(1)
        success("已将最后一个字符串复制到剪贴板")


if __name__ == "__main__":
    main()
