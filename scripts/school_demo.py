"""Demonstrate GPS on every variant of the "drive son to school" problem.

To run this script, use the commands:

    uv venv --clear && uv sync
    uv run scripts/school_demo.py

"""

from __future__ import annotations

import click

from gps_planner.io import configure_logging, console
from gps_planner.io.gps_cli import solve_and_report
from gps_planner.planning import PlannerConfig
from gps_planner.problems import SCHOOL_VARIANTS, school_problem


@click.command()
@click.option("--verbose", "-v", is_flag=True, help="Log every goal attempt.")
def main(verbose: bool) -> None:
    """Solve each variant of the school problem in turn and summarize the outcomes."""
    configure_logging(verbose)

    outcomes: dict[str, int] = {}
    for variant in SCHOOL_VARIANTS:
        outcomes[variant] = solve_and_report(school_problem(variant), PlannerConfig(), False)
        console.print()

    for variant, exit_code in outcomes.items():
        color = "green" if exit_code == 0 else "red"
        console.print(f"[{color}]{variant}: {'SOLVED' if exit_code == 0 else 'FAILED'}[/]")


if __name__ == "__main__":
    main()
