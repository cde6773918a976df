import logging
from pathlib import Path
from typing import Callable, Dict

import click
from rich.console import Console
from rich.logging import RichHandler

from codemaker import python as py
from codemaker.constants import DEFAULT_LOOKUP_RESULT, DEFAULT_MODULE_NAME
from codemaker.errors import CodemakerError
from codemaker.executor import OutputExecutor
from codemaker.output import OutputFileSet, files, render_file
from codemaker.planner import OutputPlanner
from codemaker.statuscodes import (
    NamingConvention,
    StatusModuleMaker,
    StatusPackageMaker,
    load_status_codes,
)
from codemaker.tui import CodemakerConsoleUI


NAMING_VALUES = [naming.value for naming in NamingConvention]


def _generation_options(command: Callable) -> Callable:
    options = [
        click.argument("input_path", type=click.Path(path_type=Path)),
        click.option(
            "--out",
            "out_dir",
            type=click.Path(file_okay=False, path_type=Path),
            default=Path("."),
            show_default=True,
            help="Directory the generated files are rooted at.",
        ),
        click.option(
            "--module",
            "module_name",
            default=DEFAULT_MODULE_NAME,
            show_default=True,
            help="Name of the generated module.",
        ),
        click.option(
            "--package",
            "package_name",
            default=None,
            help="Wrap the module in a package of this name.",
        ),
        click.option(
            "--naming",
            type=click.Choice(NAMING_VALUES, case_sensitive=False),
            default=NamingConvention.UPPER_SNAKE.value,
            show_default=True,
            help="Naming convention for the generated constants.",
        ),
        click.option(
            "--default",
            "default_result",
            default=DEFAULT_LOOKUP_RESULT,
            show_default=True,
            help="Python expression returned for unknown codes.",
        ),
    ]
    for option in reversed(options):
        command = option(command)
    return command


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _build_output(
    input_path: Path,
    module_name: str,
    package_name: str | None,
    naming: str,
    default_result: str,
) -> OutputFileSet:
    codes = load_status_codes(input_path)
    module_maker = StatusModuleMaker(
        module_name=module_name,
        default=py.Literal(default_result),
        naming=NamingConvention(naming.lower()),
    )
    if package_name:
        return StatusPackageMaker(package_name=package_name, module=module_maker).make(
            codes
        )
    return module_maker.make(codes)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Generate Python modules from status-code tables."""
    _configure_logging(verbose)
    ctx.obj = {"verbose": verbose}


@cli.command(help="Build and print a dry-run plan of the generated files.")
@_generation_options
@click.pass_obj
def plan(
    obj: Dict[str, bool],
    input_path: Path,
    out_dir: Path,
    module_name: str,
    package_name: str | None,
    naming: str,
    default_result: str,
) -> None:
    ui = CodemakerConsoleUI(Console())
    try:
        output = _build_output(
            input_path, module_name, package_name, naming, default_result
        )
    except CodemakerError as exc:
        raise click.ClickException(str(exc))

    plan_result = OutputPlanner(out_dir).build(output)
    ui.render_plan(plan_result, mode="plan")

    if plan_result.errors:
        raise click.exceptions.Exit(1)


@cli.command(help="Generate the files and write them to disk.")
@_generation_options
@click.option("--backup", is_flag=True, help="Back up files before overwriting them.")
@click.option("--print", "echo", is_flag=True, help="Print the generated source.")
@click.pass_obj
def generate(
    obj: Dict[str, bool],
    input_path: Path,
    out_dir: Path,
    module_name: str,
    package_name: str | None,
    naming: str,
    default_result: str,
    backup: bool,
    echo: bool,
) -> None:
    ui = CodemakerConsoleUI(Console())
    try:
        output = _build_output(
            input_path, module_name, package_name, naming, default_result
        )
    except CodemakerError as exc:
        raise click.ClickException(str(exc))

    if echo:
        for output_file in files(output):
            ui.render_source(str(output_file.path), render_file(output_file))

    plan_result = OutputPlanner(out_dir).build(output)
    ui.render_plan(plan_result, mode="generate")

    if plan_result.errors:
        raise click.ClickException("Generate aborted due to errors above.")

    result = OutputExecutor(backup=backup).execute(plan_result)
    ui.render_apply_result(result)

    if result.failed:
        raise click.exceptions.Exit(1)


def main() -> int:
    # Without standalone mode click returns the code of an `Exit` instead of raising.
    try:
        code = cli(standalone_mode=False)
    except click.ClickException as exc:
        exc.show()
        return 2
    return code if isinstance(code, int) else 0


if __name__ == "__main__":
    raise SystemExit(main())
