"""Modules and packages of generated Python code."""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import IO, Iterable

from codemaker.constants import PACKAGE_ROOT_MODULE, PYTHON_EXTENSION
from codemaker.python.syntax import Block, Statement


class Module:
    def __init__(self, name: str) -> None:
        self.name = name
        self.filepath = PurePosixPath(f"{name}{PYTHON_EXTENSION}")
        self.body = Block()

    @property
    def path(self) -> PurePosixPath:
        return self.filepath

    @property
    def statements(self) -> list[Statement]:
        return self.body.statements

    def push(self, statement: Statement) -> "Module":
        self.body.push(statement)
        return self

    def extend(self, statements: Iterable[Statement]) -> "Module":
        self.body.extend(statements)
        return self

    def lines(self) -> Iterable[str]:
        for statement in self.body:
            yield from statement.render(0)

    def write_into(self, writer: IO[str]) -> None:
        for line in self.lines():
            writer.write(f"{line}\n")

    def render(self) -> str:
        return "".join(f"{line}\n" for line in self.lines())

    def files(self) -> list["Module"]:
        return [self]

    def _move_under(self, dirpath: PurePosixPath) -> None:
        self.filepath = dirpath / self.filepath

    def __repr__(self) -> str:
        return f"Module({str(self.filepath)!r}, statements={len(self.body)})"


class Package:
    """A directory of modules with an ``__init__`` root module.

    Statements pushed onto a package always land in its root module.
    Submodules and subpackages are re-rooted under the package directory
    when attached, so paths stay prefix-closed however deep the nesting.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self.dirpath = PurePosixPath(name)
        self.root = Module(PACKAGE_ROOT_MODULE)
        self.root._move_under(self.dirpath)
        self.modules: list[Module] = []
        self.packages: list[Package] = []

    def push(self, statement: Statement) -> "Package":
        self.root.push(statement)
        return self

    def extend(self, statements: Iterable[Statement]) -> "Package":
        self.root.extend(statements)
        return self

    def add_module(self, module: Module) -> "Package":
        module._move_under(self.dirpath)
        self.modules.append(module)
        return self

    def add_package(self, package: "Package") -> "Package":
        package._move_under(self.dirpath)
        self.packages.append(package)
        return self

    def files(self) -> list[Module]:
        collected = [self.root, *self.modules]
        for package in self.packages:
            collected.extend(package.files())
        return collected

    def _move_under(self, dirpath: PurePosixPath) -> None:
        self.dirpath = dirpath / self.dirpath
        self.root._move_under(dirpath)
        for module in self.modules:
            module._move_under(dirpath)
        for package in self.packages:
            package._move_under(dirpath)

    def __repr__(self) -> str:
        return (
            f"Package({str(self.dirpath)!r}, modules={len(self.modules)}, "
            f"packages={len(self.packages)})"
        )
