"""Define a command-line interface for solving planning problems with GPS."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from gps_planner.classical_planning.planning_problem import PlanningProblem
from gps_planner.classical_planning.set_algebra import Condition
from gps_planner.io.logging import configure_logging, console, logger
from gps_planner.io.problem_schemata import ProblemFileError, load_problem
from gps_planner.io.yaml_utils import export_yaml_data
from gps_planner.planning import ActionEvent, PlannerConfig, PlanningDidNotTerminateError, gps
from gps_planner.problems import SCHOOL_VARIANTS, school_problem

EXIT_SOLVED = 0
EXIT_FAILED = 1
EXIT_ERROR = 2


def _join(conditions: tuple[Condition, ...]) -> str:
    """Join conditions into a comma-separated string (or "-" if there are none)."""
    return ", ".join(map(str, conditions)) or "-"


def _render_problem_table(problem: PlanningProblem) -> Table:
    """Render a table summarizing the actions available in a planning problem."""
    table = Table(title=f"Actions: {escape(problem.name)}", show_lines=False)
    table.add_column("Action", style="bold")
    table.add_column("Preconditions", style="cyan")
    table.add_column("Adds", style="green")
    table.add_column("Deletes", style="red")

    for action in problem.actions:
        table.add_row(
            escape(action.name),
            escape(_join(action.preconditions)),
            escape(_join(action.adds)),
            escape(_join(action.deletes)),
        )
    return table


def _print_event(event: ActionEvent) -> None:
    """Print a line reporting an applied action."""
    console.print(f"[dim]{event.step}.[/] Executing action: [bold]{escape(event.name)}[/].")


def solve_and_report(problem: PlanningProblem, config: PlannerConfig, show_actions: bool) -> int:
    """Solve a planning problem, print its trace and outcome, and return an exit code.

    :param problem: Planning problem to be solved
    :param config: Configuration of the achievement engine
    :param show_actions: Whether to print a table of the problem's actions first
    :return: Exit code indicating whether the problem was solved, failed, or didn't terminate
    """
    console.print(Panel.fit(f"[bold]{escape(problem.name)}[/]", border_style="blue"))
    if show_actions:
        console.print(_render_problem_table(problem))
    console.print(f"Initial state: {escape(_join(problem.initial_state))}")
    console.print(f"Goals: {escape(_join(problem.goals))}")

    # Applied actions are already reported by the log when INFO records are shown
    listeners = [] if logger.isEnabledFor(logging.INFO) else [_print_event]

    try:
        solved = gps(problem.initial_state, problem.goals, problem.actions, config, listeners)
    except PlanningDidNotTerminateError as error:
        console.print(f"[red]{escape(str(error))}[/]")
        return EXIT_ERROR

    if solved:
        console.print("[green]SOLVED.[/]")
        return EXIT_SOLVED

    console.print("[red]FAILED.[/]")
    return EXIT_FAILED


def _override_config(config: PlannerConfig, max_depth: int | None) -> PlannerConfig:
    """Apply a command-line override of the maximum planning depth, if one was given."""
    return config if max_depth is None else PlannerConfig(max_depth=max_depth)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log every goal attempt.")
def cli(verbose: bool) -> None:
    """Solve means-ends planning problems with the General Problem Solver."""
    configure_logging(verbose)


@cli.command("run")
@click.argument("problem_yaml", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--max-depth", type=click.IntRange(min=1), help="Maximum goal nesting depth.")
@click.option("--show-actions", is_flag=True, help="Print the problem's actions before solving.")
def run_problem(problem_yaml: Path, max_depth: int | None, show_actions: bool) -> None:
    """Solve the planning problem defined in a YAML file."""
    try:
        problem, config = load_problem(problem_yaml)
    except ProblemFileError as error:
        console.print(f"[red]{escape(str(error))}[/]")
        sys.exit(EXIT_ERROR)

    sys.exit(solve_and_report(problem, _override_config(config, max_depth), show_actions))


@cli.command("school")
@click.option(
    "--variant",
    type=click.Choice(sorted(SCHOOL_VARIANTS)),
    default="battery",
    show_default=True,
    help="Initial world state of the problem.",
)
@click.option("--max-depth", type=click.IntRange(min=1), help="Maximum goal nesting depth.")
@click.option("--show-actions", is_flag=True, help="Print the problem's actions before solving.")
@click.option(
    "--export",
    "export_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the problem to a YAML file instead of solving it.",
)
def school(
    variant: str,
    max_depth: int | None,
    show_actions: bool,
    export_path: Path | None,
) -> None:
    """Solve (or export) the "drive son to school" example problem."""
    problem = school_problem(variant)

    if export_path is not None:
        export_yaml_data(problem.to_yaml_data(), export_path)
        console.print(f"Exported problem '{problem.name}' to {export_path}.")
        return

    sys.exit(solve_and_report(problem, _override_config(PlannerConfig(), max_depth), show_actions))


def main() -> None:
    """Run the GPS command-line interface."""
    cli()


if __name__ == "__main__":
    main()
