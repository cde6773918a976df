import sys
from pathlib import Path

import pytest
from click.testing import CliRunner


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setattr(Path, "home", lambda: tmp_path)


@pytest.fixture
def sample_pairs() -> list[tuple[int, str]]:
    return [(100, "Continue"), (200, "OK"), (404, "Not Found")]


@pytest.fixture
def write_codes_yaml(tmp_path: Path):
    def _write(text: str, name: str = "status_codes.yaml") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def codes_yaml(write_codes_yaml) -> Path:
    return write_codes_yaml(
        "codes:\n"
        "  - [100, Continue]\n"
        "  - [200, OK]\n"
        "  - [404, Not Found]\n"
    )


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()
