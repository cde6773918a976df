"""Compare rendered output files with what is already on disk."""

from __future__ import annotations

import logging
from pathlib import Path

from codemaker.models import OutputPlan, WriteAction, WriteStatus
from codemaker.output import OutputFileSet, files, render_file
from codemaker.utils import read_text_safe

logger = logging.getLogger(__name__)


class OutputPlanner:
    def __init__(self, root: Path) -> None:
        self.root = root

    def build(self, fileset: OutputFileSet) -> OutputPlan:
        actions: list[WriteAction] = []
        errors: list[Exception] = []

        for output_file in files(fileset):
            target = self.root / output_file.path
            payload = render_file(output_file)
            try:
                existing = read_text_safe(target)
            except (OSError, UnicodeDecodeError) as exc:
                errors.append(exc)
                continue

            if existing is None:
                status, detail = WriteStatus.CREATE, "new file"
            elif existing == payload:
                status, detail = WriteStatus.NOOP, "up to date"
            else:
                status, detail = WriteStatus.UPDATE, "content changed"

            actions.append(
                WriteAction(
                    path=target,
                    relative=output_file.path,
                    status=status,
                    detail=detail,
                    payload=payload,
                )
            )

        plan = OutputPlan(root=self.root, actions=actions, errors=errors)
        logger.debug("Planned output under %s: %s", self.root, plan.summary())
        return plan
