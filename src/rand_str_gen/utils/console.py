"""统一终端输出工具，基于 Rich。

诊断信息全部写到 stderr，stdout 只输出生成的字符串。
"""

from rich.console import Console, RenderableType
from rich.panel import Panel
from rich.theme import Theme

_theme = Theme(
    {
        "info": "cyan",
        "success": "bold green",
        "warning": "bold yellow",
        "error": "bold red",
    }
)

console = Console(theme=_theme, stderr=True)


def info(msg: str) -> None:
    console.print(f"[info]ℹ[/info] {msg}")


def success(msg: str) -> None:
    console.print(f"[success]✔[/success] {msg}")


def warning(msg: str) -> None:
    console.print(f"[warning]⚠[/warning] {msg}")


def error(msg: str) -> None:
    console.print(f"[error]✖[/error] {msg}")


def print_panel(title: str, content: RenderableType, style: str = "cyan") -> None:
    console.print(Panel(content, title=title, border_style=style))
