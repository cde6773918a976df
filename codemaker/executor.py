from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Protocol

from codemaker.models import OutputPlan, WriteAction, WriteResult, WriteStatus
from codemaker.output import OutputFileSet
from codemaker.planner import OutputPlanner
from codemaker.utils import backup_file, write_text

logger = logging.getLogger(__name__)


class ActionHandler(Protocol):
    def handle(self, action: WriteAction) -> tuple[bool, Optional[str]]: ...


class WriteTextHandler:
    def __init__(self, backup: bool = False) -> None:
        self.backup = backup

    def handle(self, action: WriteAction) -> tuple[bool, Optional[str]]:
        if action.status == WriteStatus.NOOP:
            return False, None
        try:
            if self.backup and action.path.exists():
                backup_file(action.path)
            write_text(action.path, action.payload)
        except OSError as exc:
            logger.debug("Failed to write %s", action.path, exc_info=True)
            return False, f"write failed for {action.path}: {exc}"
        return True, None


class OutputExecutor:
    def __init__(self, backup: bool = False) -> None:
        self.handler: ActionHandler = WriteTextHandler(backup=backup)

    def execute(self, plan: OutputPlan) -> WriteResult:
        applied = 0
        failed = 0
        failures: list[str] = []

        for action in plan.actions:
            changed, failure = self.handler.handle(action)
            if failure is not None:
                failed += 1
                failures.append(failure)
                continue
            if changed:
                applied += 1
                logger.debug("Wrote %s (%s)", action.path, action.status.value)

        return WriteResult(applied=applied, failed=failed, failures=failures)


def write_into_dir(
    fileset: OutputFileSet, root: Path, backup: bool = False
) -> WriteResult:
    plan = OutputPlanner(root).build(fileset)
    result = OutputExecutor(backup=backup).execute(plan)
    failures = [f"cannot read existing output: {error}" for error in plan.errors]
    return WriteResult(
        applied=result.applied,
        failed=result.failed + len(failures),
        failures=failures + result.failures,
    )
