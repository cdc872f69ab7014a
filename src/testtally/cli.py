"""Command-line interface for testtally."""

import logging
import shlex
import subprocess

import click

from .config import TallySettings
from .outcomes import ReportMode
from .session import RunSession
from .version import __version__


logger = logging.getLogger(__name__)


def run_command(command: str) -> int:
    """Run a shell-style command line and return its exit status."""
    try:
        args = shlex.split(command)
    except ValueError as e:
        logger.warning("Could not parse %r: %s", command, e)
        return 2
    if not args:
        return 1
    try:
        return subprocess.run(args, check=False).returncode
    except (FileNotFoundError, PermissionError) as e:
        logger.warning("Could not run %r: %s", command, e)
        return 127


@click.group()
@click.version_option(__version__, prog_name="testtally")
def main() -> None:
    """Testtally - tally shell checks into a pass/fail report."""


@main.command()
@click.option("--check", "-c", "checks", multiple=True, required=True, help="Command to run as one check")
@click.option("--squelch/--no-squelch", default=None, help="Only print failures and the final report")
@click.option("--name", "-n", default="checks", help="Test name shown in the output")
@click.option("--description", "-d", default="command exit codes", help="Test description shown in the output")
@click.option("--group", "-g", "group_label", default=None, help="Fold all checks into one sub-test group")
@click.option(
    "--report-mode",
    type=click.IntRange(0, 2),
    default=None,
    help="Group summary: 0 never, 1 always, 2 only on failure",
)
@click.pass_context
def run(
    ctx: click.Context,
    checks: tuple[str, ...],
    squelch: bool | None,
    name: str,
    description: str,
    group_label: str | None,
    report_mode: int | None,
) -> None:
    """
    Run each CHECK command and exit non-zero if any of them failed.

    Example:
        testtally run -c "test -f setup.py" -c "grep -q click requirements.txt"
    """
    settings = TallySettings()
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    session = RunSession(squelch, settings=settings)
    session.begin_test(name, description)

    if group_label is not None:
        session.begin_group(group_label)
    for command in checks:
        if group_label is not None:
            session.set_unit_name(command)
        code = run_command(command)
        session.process_result(code, f"`{command}` exited 0", f"`{command}` exited {code}")
    if group_label is not None:
        session.end_group(None if report_mode is None else ReportMode(report_mode))

    session.final_results()
    ctx.exit(session.exit_code())


if __name__ == "__main__":
    main()
