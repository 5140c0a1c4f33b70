"""Ticket service."""

from collections.abc import Callable

import click
import structlog

from branch_ticket.core.exceptions import OpenFailedError
from branch_ticket.core.models.provider import ProviderCategory, TicketResolution
from branch_ticket.core.models.repository import Repository
from branch_ticket.git.builder import build_repository
from branch_ticket.git.config_parser import parse_git_config
from branch_ticket.git.reader import GitDirReader
from branch_ticket.tickets.classifier import classify_branch
from branch_ticket.tickets.resolver import TicketResolver

logger = structlog.get_logger(__name__)

Opener = Callable[[str], int | None]


def load_repository(reader: GitDirReader) -> Repository:
    """Load the repository model from a git directory.

    Errors reading or parsing the config propagate unchanged.
    """
    config = parse_git_config(reader.read_config())
    return build_repository(config, reader.list_branch_refs())


class TicketService:
    """Service for resolving and opening branch tickets."""

    def __init__(
        self,
        repository: Repository,
        resolver: TicketResolver | None = None,
        opener: Opener | None = None,
    ) -> None:
        self._repository = repository
        self._resolver = resolver or TicketResolver()
        self._opener = opener or click.launch

    @property
    def repository(self) -> Repository:
        return self._repository

    def classify(self, branch_name: str) -> ProviderCategory:
        branch = self._repository.get_branch(branch_name)
        return classify_branch(branch, self._repository)

    def resolve_branch(self, branch_name: str) -> TicketResolution:
        """Resolve a branch to its ticket URL without opening it."""
        category = self.classify(branch_name)
        logger.debug("Branch classified", branch=branch_name, category=str(category))
        return self._resolver.resolve(branch_name, category)

    def open_ticket(self, branch_name: str) -> TicketResolution:
        """Resolve a branch and open its ticket URL.

        Raises:
            OpenFailedError: If the opener fails or returns non-zero.
        """
        resolution = self.resolve_branch(branch_name)
        try:
            result = self._opener(resolution.url)
        except OSError as e:
            raise OpenFailedError(
                f"Failed to open {resolution.url}: {e}",
                details={"url": resolution.url},
            ) from e

        if result:
            raise OpenFailedError(
                f"Failed to open {resolution.url} (exit code {result})",
                details={"url": resolution.url, "returncode": result},
            )

        logger.info("Ticket opened", branch=branch_name, url=resolution.url)
        return resolution
