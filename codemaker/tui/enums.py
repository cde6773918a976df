from enum import Enum

from codemaker.models import WriteStatus


class UIStyle(str, Enum):
    BLUE = "blue"
    GREEN = "green"
    RED = "red"
    CYAN = "cyan"
    DIM = "dim"
    WHITE = "white"


WRITE_STATUS_STYLE = {
    WriteStatus.CREATE: UIStyle.GREEN.value,
    WriteStatus.UPDATE: UIStyle.CYAN.value,
    WriteStatus.NOOP: UIStyle.DIM.value,
}
