from rich.console import Console

from codemaker.models import OutputPlan, WriteResult
from codemaker.tui.enums import UIStyle
from codemaker.tui.sections import UISection
from codemaker.tui.tables import ApplyTable, PlanTable


class CodemakerConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_plan(self, plan: OutputPlan, mode: str) -> None:
        self.console.print(
            UISection.wrap("plan overview", PlanTable.summary_block(plan, mode=mode))
        )

        if plan.actions:
            self.console.print(
                UISection.wrap(
                    "generated files",
                    PlanTable.actions_table(plan.actions),
                    style=UIStyle.CYAN.value,
                )
            )
        else:
            self.console.print(
                UISection.wrap("files", "No files generated.", style=UIStyle.DIM.value)
            )

        if plan.errors:
            self.console.print(UISection.bullets("errors", plan.errors))

    def render_apply_result(self, result: WriteResult) -> None:
        self.console.print(
            ApplyTable.stats_panel(applied=result.applied, failed=result.failed)
        )
        if result.failures:
            self.console.print(UISection.bullets("failures", result.failures))

    def render_source(self, path: str, text: str) -> None:
        self.console.print(UISection.source(path, text))
