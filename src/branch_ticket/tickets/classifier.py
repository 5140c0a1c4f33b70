"""Classifies a branch's remote into a hosting provider."""

from collections.abc import Mapping

import structlog

from branch_ticket.core.exceptions import InvalidRemoteUrlError
from branch_ticket.core.models.provider import Provider, ProviderCategory
from branch_ticket.core.models.repository import Branch, Repository
from branch_ticket.git.url_parser import parse_remote_url
from branch_ticket.tickets.providers import PROVIDER_HOSTS

logger = structlog.get_logger(__name__)


def classify_remote(
    remote_name: str,
    repository: Repository,
    hosts: Mapping[str, Provider] = PROVIDER_HOSTS,
) -> ProviderCategory:
    """Classify a remote by the hostname of its URL.

    An empty remote name is ``unset``. A remote whose URL does not parse,
    or whose host is not in ``hosts``, is ``unknown``.
    """
    if not remote_name:
        return ProviderCategory.unset()

    remote = repository.get_remote(remote_name)
    url = remote.url if remote is not None else ""
    try:
        parsed = parse_remote_url(url)
    except InvalidRemoteUrlError as e:
        logger.warning("Could not parse remote URL", remote=remote_name, error=e.reason)
        return ProviderCategory.unknown()

    provider = hosts.get(parsed.host)
    if provider is None:
        logger.debug("Unknown remote host", remote=remote_name, host=parsed.host)
        return ProviderCategory.unknown()

    return ProviderCategory.known(provider)


def classify_branch(
    branch: Branch,
    repository: Repository,
    hosts: Mapping[str, Provider] = PROVIDER_HOSTS,
) -> ProviderCategory:
    return classify_remote(branch.remote, repository, hosts)
