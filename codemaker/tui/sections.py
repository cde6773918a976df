from typing import Iterable

from rich.panel import Panel
from rich.syntax import Syntax

from codemaker.tui.enums import UIStyle
from codemaker.utils import compact_home_paths_in_text


class UISection:
    @staticmethod
    def wrap(title: str, body, style: str = UIStyle.BLUE.value) -> Panel:
        return Panel(body, title=title, border_style=style, padding=(0, 1))

    @staticmethod
    def bullets(title: str, items: Iterable[object], style: str = UIStyle.RED.value) -> Panel:
        text = "\n".join(f"- {compact_home_paths_in_text(str(item))}" for item in items)
        return Panel(text, title=title, border_style=style, padding=(0, 1))

    @staticmethod
    def source(path: str, text: str) -> Panel:
        code = Syntax(text, "python", theme="ansi_dark", line_numbers=False)
        return Panel(code, title=path, border_style=UIStyle.DIM.value, padding=(0, 1))
