"""CLI for branch-ticket."""

import sys
from typing import NoReturn

import click
import structlog
from pydantic import ValidationError

from branch_ticket.config.logging import configure_logging
from branch_ticket.config.settings import Settings, get_settings
from branch_ticket.core.exceptions import BranchTicketError, SettingsError
from branch_ticket.git.reader import GitDirReader
from branch_ticket.services.ticket import TicketService, load_repository
from branch_ticket.tickets.resolver import TicketResolver

logger = structlog.get_logger(__name__)


def _abort(error: BranchTicketError) -> NoReturn:
    click.echo(f"Error: {error.message}", err=True)
    logger.debug("Aborting", error=type(error).__name__, **error.details)
    sys.exit(error.exit_code)


def _report(error: BranchTicketError) -> None:
    """Report an error; fatal ones end the process with their exit code."""
    if error.fatal:
        _abort(error)
    click.echo(error.message)


def _load_settings() -> Settings:
    try:
        return get_settings()
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"])
        _abort(
            SettingsError(
                f"Invalid setting {field}: {first['msg']}",
                details={"field": field, "errors": e.error_count()},
            )
        )


def _create_service(settings: Settings, repo_path: str | None) -> tuple[TicketService, GitDirReader]:
    reader = GitDirReader(repo_path or settings.repo_path, git_dir=settings.git_dir)
    try:
        repository = load_repository(reader)
    except BranchTicketError as e:
        logger.debug("Failed to load repo", error=e.message)
        _abort(e)
    resolver = TicketResolver(default_provider=settings.default_provider)
    return TicketService(repository, resolver=resolver), reader


@click.group(invoke_without_command=True)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option("--repo", "repo_path", default=None, help="Repository path (default: current directory)")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, repo_path: str | None) -> None:
    """branch-ticket: open the issue-tracker ticket for a git branch."""
    settings = _load_settings()
    configure_logging(log_level="DEBUG" if verbose else settings.log_level)
    ctx.obj = {"settings": settings, "repo_path": repo_path}
    if ctx.invoked_subcommand is None:
        ctx.invoke(info)


@cli.command()
@click.pass_obj
def info(obj: dict) -> None:
    """Show the remotes and branches of the repository."""
    service, _ = _create_service(obj["settings"], obj["repo_path"])
    repository = service.repository

    click.echo("Remotes:")
    if not repository.remotes:
        click.echo("  (none)")
    for remote in repository.remotes.values():
        click.echo(f"  {remote.name}  {remote.url or '-'}")
        if remote.fetch:
            click.echo(f"     fetch: {remote.fetch}")

    click.echo("Branches:")
    if not repository.branches:
        click.echo("  (none)")
    for branch in repository.branches.values():
        category = service.classify(branch.name)
        click.echo(f"  [{category!s:>8}] {branch.name}")
        if branch.has_remote:
            click.echo(f"     remote: {branch.remote}  merge: {branch.merge or '-'}")


@cli.command()
@click.argument("branch", required=False)
@click.pass_obj
def ticket(obj: dict, branch: str | None) -> None:
    """Open the ticket for BRANCH in your web browser.

    If no branch is given, the currently checked-out one is used.
    """
    service, reader = _create_service(obj["settings"], obj["repo_path"])

    if branch is None:
        try:
            branch = reader.read_current_branch()
        except BranchTicketError as e:
            _report(e)
            return
        if branch is None:
            click.echo("HEAD is detached; pass a branch name explicitly.")
            return

    try:
        resolution = service.open_ticket(branch)
    except BranchTicketError as e:
        _report(e)
        return

    click.echo(f"Opened {resolution.ticket}: {resolution.url}")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
