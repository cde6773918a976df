from collections import Counter

from rich.panel import Panel
from rich.table import Column, Table

from codemaker.models import OutputPlan, WriteAction
from codemaker.tui.enums import WRITE_STATUS_STYLE, UIStyle
from codemaker.utils import compact_home_path


class PlanTable:
    @staticmethod
    def summary_block(plan: OutputPlan, mode: str) -> Table:
        counts = Counter(action.status.value for action in plan.actions)
        chips = [f"{key}={value}" for key, value in sorted(counts.items()) if value > 0]
        if not chips:
            chips = ["none"]

        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Mode", mode)
        table.add_row("Output", compact_home_path(plan.root))
        table.add_row("Files", str(len(plan.actions)))
        table.add_row("Statuses", "  ".join(chips))
        return table

    @staticmethod
    def actions_table(actions: list[WriteAction]) -> Table:
        table = Table(
            Column(header="Status", width=10),
            Column(header="File", overflow="ellipsis"),
            Column(header="Lines", width=8, justify="right"),
            Column(header="Reason", overflow="ellipsis"),
            expand=True,
            header_style="bold",
        )

        for action in actions:
            status_style = WRITE_STATUS_STYLE.get(action.status, UIStyle.WHITE.value)
            status_text = f"[{status_style}]{action.status.value}[/{status_style}]"
            table.add_row(
                status_text,
                str(action.relative),
                str(action.payload.count("\n")),
                action.detail,
            )
        return table


class ApplyTable:
    @staticmethod
    def stats_panel(applied: int, failed: int) -> Panel:
        stats: dict[str, str] = {
            "written": str(applied),
            "failed": str(failed),
        }
        table = Table(show_header=False, box=None)
        for key, value in stats.items():
            table.add_row(f"[bold]{key}[/bold]", value)
        return Panel(
            table,
            title="generate",
            border_style=UIStyle.GREEN.value if failed == 0 else UIStyle.RED.value,
        )
