from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path, PurePath


class WriteStatus(str, Enum):
    NOOP = "noop"
    CREATE = "create"
    UPDATE = "update"


@dataclass
class WriteAction:
    path: Path
    relative: PurePath
    status: WriteStatus
    detail: str
    payload: str


@dataclass
class OutputPlan:
    root: Path
    actions: list[WriteAction]
    errors: list[Exception] = field(default_factory=list)

    def is_valid(self) -> bool:
        return not self.errors

    def summary(self) -> dict[str, int]:
        counts = {status.value: 0 for status in WriteStatus}
        for action in self.actions:
            counts[action.status.value] += 1
        counts["actions"] = len(self.actions)
        counts["errors"] = len(self.errors)
        return counts

    def pending(self) -> list[WriteAction]:
        return [action for action in self.actions if action.status != WriteStatus.NOOP]


@dataclass(frozen=True)
class WriteResult:
    applied: int
    failed: int
    failures: list[str]

    @property
    def ok(self) -> bool:
        return self.failed == 0
