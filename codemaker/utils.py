import shutil
from datetime import datetime
from pathlib import Path

from codemaker.constants import BACKUP_SUFFIX


def now_stamp() -> str:
    return datetime.now().strftime("%Y%m%d-%H%M%S")


def read_text_safe(path: Path) -> str | None:
    if not path.exists():
        return None
    return path.read_text(encoding="utf-8")


def write_text(path: Path, payload: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="\n") as handle:
        handle.write(payload)


def backup_file(path: Path) -> Path:
    backup_path = Path(f"{path}{BACKUP_SUFFIX}-{now_stamp()}")
    shutil.copy2(path, backup_path)
    return backup_path


def compact_home_path(path: str | Path) -> str:
    text = str(path)
    home = str(Path.home())
    if text == home:
        return "~"
    home_prefix = f"{home}/"
    if text.startswith(home_prefix):
        return f"~/{text[len(home_prefix):]}"
    return text


def compact_home_paths_in_text(text: str) -> str:
    home = str(Path.home())
    if text == home:
        return "~"
    return text.replace(f"{home}/", "~/")
