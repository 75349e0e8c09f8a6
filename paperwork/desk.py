"""
Paperwork Desk — run one form through signing and execution.

Builds a bureaucrat and a form from the factory, then has the bureaucrat
sign and execute it. Refusals are reported, not raised, so the desk shows
the full picture of what was and was not allowed.

Usage:
    python -m paperwork.desk "robotomy request" Bender --name Alice --grade 30
    python -m paperwork.desk "shrubbery creation" garden --name Dave --grade 1 --artifact-dir /tmp
    python -m paperwork.desk "presidential pardon" Ford --name Bob --grade 100 --json

Exit status: 0 when both steps were allowed, 1 when either was refused,
2 for an invalid grade or an unknown form kind.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

import structlog
from rich.console import Console
from rich.table import Table

from paperwork.config import settings
from paperwork.errors import ActionReport, PaperworkError
from paperwork.governance.actor import Bureaucrat
from paperwork.governance.factory import FormFactory
from paperwork.integrations.artifacts import FileArtifactWriter
from paperwork.integrations.randomness import SystemRandomSource

console = Console()


def configure_logging() -> None:
    """Configure structured logging."""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            (
                structlog.dev.ConsoleRenderer()
                if settings.log_format != "json"
                else structlog.processors.JSONRenderer()
            ),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(settings.log_level)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")


def report_to_dict(report: ActionReport) -> dict:
    return {
        "action": report.action.value,
        "actor": report.actor_name,
        "form": report.form_name,
        "allowed": report.allowed,
        "reason": report.reason,
        "error_kind": report.error_kind.value if report.error_kind else None,
        "outcome": report.outcome.model_dump(mode="json") if report.outcome else None,
    }


def render_reports(reports: list[ActionReport]) -> None:
    table = Table(show_lines=True)
    table.add_column("Step", style="cyan", width=8)
    table.add_column("Bureaucrat", style="yellow")
    table.add_column("Form", style="green")
    table.add_column("Allowed", width=8)
    table.add_column("Detail")

    for report in reports:
        table.add_row(
            report.action.value,
            report.actor_name,
            report.form_name,
            "[bold green]✓[/bold green]" if report.allowed else "[bold red]✗[/bold red]",
            report.reason,
        )
    console.print(table)


def run_desk(
    kind: str,
    target: str,
    name: str,
    grade: int,
    factory: FormFactory,
) -> list[ActionReport]:
    """
    Sign then execute one form.

    Raises:
        PaperworkError: GRADE_TOO_HIGH / GRADE_TOO_LOW for an invalid grade,
            FORM_NOT_FOUND for an unknown kind.
    """
    log = structlog.get_logger()

    bureaucrat = Bureaucrat(name, grade)
    form = factory.create(kind, target)
    log.info("paperwork.desk.form_ready", bureaucrat=str(bureaucrat), form=str(form))

    reports = [bureaucrat.sign_form(form), bureaucrat.execute_form(form)]
    for report in reports:
        log.info(
            "paperwork.desk.step",
            action=report.action.value,
            allowed=report.allowed,
            reason=report.reason,
        )
    return reports


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Sign and execute a form as a bureaucrat of the given grade"
    )
    parser.add_argument("kind", help=f"Form kind, one of: {FormFactory.available_kinds()}")
    parser.add_argument("target", help="Target of the form")
    parser.add_argument("--name", required=True, help="Bureaucrat name")
    parser.add_argument("--grade", type=int, required=True, help="Bureaucrat grade (1..150)")
    parser.add_argument(
        "--artifact-dir",
        default=None,
        help="Directory for shrubbery artifacts (defaults to .env settings)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for robotomy outcomes (defaults to .env settings)",
    )
    parser.add_argument("--json", action="store_true", help="Print reports as JSON")
    args = parser.parse_args(argv)

    configure_logging()
    log = structlog.get_logger()

    seed = args.seed if args.seed is not None else settings.random_seed
    factory = FormFactory(
        artifact_writer=FileArtifactWriter(args.artifact_dir),
        random_source=SystemRandomSource(seed),
    )

    try:
        reports = run_desk(args.kind, args.target, args.name, args.grade, factory)
    except PaperworkError as e:
        log.error("paperwork.desk.rejected", kind=e.kind.value, error=e.message)
        console.print(f"[bold red]✗ {e.message}[/bold red]")
        sys.exit(2)

    if args.json:
        print(json.dumps([report_to_dict(r) for r in reports], indent=2))
    else:
        render_reports(reports)

    sys.exit(0 if all(r.allowed for r in reports) else 1)


if __name__ == "__main__":
    main()
