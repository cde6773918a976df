from codemaker.tui.renderers import CodemakerConsoleUI

__all__ = ["CodemakerConsoleUI"]
