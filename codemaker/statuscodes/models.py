"""Status-code table data models."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, NamedTuple


class StatusCode(NamedTuple):
    code: int
    name: str


@dataclass(frozen=True)
class StatusCodes:
    codes: tuple[StatusCode, ...] = field(default_factory=tuple)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[int, str]]) -> "StatusCodes":
        return cls(codes=tuple(StatusCode(int(code), str(name)) for code, name in pairs))

    def __len__(self) -> int:
        return len(self.codes)


_NON_WORD_RE = re.compile(r"[^0-9A-Za-z]+")


class NamingConvention(str, Enum):
    AS_IS = "as_is"
    UPPER_SNAKE = "upper_snake"

    def apply(self, name: str) -> str:
        if self == NamingConvention.AS_IS:
            return name
        constant = _NON_WORD_RE.sub("_", name).strip("_").upper()
        if not constant or constant[0].isdigit():
            constant = f"_{constant}"
        return constant
