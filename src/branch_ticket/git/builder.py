"""Builds a Repository from parsed git config and on-disk branch refs."""

from collections.abc import Iterable

import structlog

from branch_ticket.core.models.repository import Branch, Remote, Repository
from branch_ticket.git.config_parser import GitConfig

logger = structlog.get_logger(__name__)


def build_repository(config: GitConfig, branch_refs: Iterable[str] = ()) -> Repository:
    """Build the repository model.

    Names are first-seen-wins: a remote or branch already derived is never
    overwritten, and config-declared branches take precedence over refs
    found only on disk.
    """
    remotes: dict[str, Remote] = {}
    for name, values in config.subsections("remote").items():
        if name in remotes:
            continue
        remotes[name] = Remote(
            name=name,
            url=values.get("url", ""),
            fetch=values.get("fetch", ""),
        )

    branches: dict[str, Branch] = {}
    for name, values in config.subsections("branch").items():
        if name in branches:
            continue
        branches[name] = Branch(
            name=name,
            remote=values.get("remote", ""),
            merge=values.get("merge", ""),
        )

    for name in branch_refs:
        if name.upper() == "HEAD" or name in branches:
            continue
        branches[name] = Branch(name=name)

    logger.debug(
        "Repository built",
        remotes=list(remotes),
        branches=list(branches),
    )
    return Repository(remotes=remotes, branches=branches)
