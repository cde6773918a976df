"""Flatten a syntax tree into the ordered set of files it produces."""

from __future__ import annotations

import io
from pathlib import PurePath
from typing import IO, Protocol, Sequence, runtime_checkable


@runtime_checkable
class OutputFile(Protocol):
    @property
    def path(self) -> PurePath: ...

    def write_into(self, writer: IO[str]) -> None: ...


@runtime_checkable
class OutputFileSet(Protocol):
    def files(self) -> Sequence[OutputFile]: ...


def files(root: OutputFileSet) -> list[OutputFile]:
    """Return the files of ``root`` in pre-order.

    For a package that is its root module, its submodules in insertion
    order, then every subpackage's own files, recursively.
    """
    return list(root.files())


def render_file(output_file: OutputFile) -> str:
    buffer = io.StringIO()
    output_file.write_into(buffer)
    return buffer.getvalue()
