"""Resolves a branch name to its ticket URL."""

from collections.abc import Mapping

import structlog

from branch_ticket.core.exceptions import NoRuleForProviderError, NoTicketInBranchNameError
from branch_ticket.core.models.provider import (
    Provider,
    ProviderCategory,
    ProviderKind,
    TicketResolution,
    TicketRule,
)
from branch_ticket.tickets.providers import TICKET_RULES

logger = structlog.get_logger(__name__)


class TicketResolver:
    """Applies provider ticket rules to branch names.

    Branches without a remote are assumed to belong to
    ``default_provider``; pass None to disable that fallback.
    """

    def __init__(
        self,
        rules: Mapping[Provider, TicketRule] = TICKET_RULES,
        default_provider: Provider | None = Provider.ACRONIS,
    ) -> None:
        self._rules = rules
        self._default_provider = default_provider

    @property
    def default_provider(self) -> Provider | None:
        return self._default_provider

    def resolve(self, branch_name: str, category: ProviderCategory) -> TicketResolution:
        """Resolve a branch to a ticket URL.

        The template receives the whole branch name, not just the
        extracted ticket id.

        Raises:
            NoRuleForProviderError: If the provider is unknown or has no rule.
            NoTicketInBranchNameError: If the branch name holds no ticket.
        """
        provider = self._select_provider(branch_name, category)

        rule = self._rules.get(provider)
        if rule is None:
            raise NoRuleForProviderError(
                f"No ticket rule for remote type {provider.value} found for branch {branch_name}",
                details={"branch": branch_name, "provider": provider.value},
            )

        match = rule.pattern.search(branch_name)
        if match is None:
            raise NoTicketInBranchNameError(
                f"Branch {branch_name} does not have an associated ticket "
                "or is not formed correctly",
                details={"branch": branch_name, "provider": provider.value},
            )

        ticket = match.group(1) if rule.pattern.groups else match.group(0)
        logger.info("Ticket found", branch=branch_name, ticket=ticket)

        return TicketResolution(
            branch=branch_name,
            provider=provider,
            ticket=ticket,
            url=rule.url_template.format(branch=branch_name),
        )

    def _select_provider(self, branch_name: str, category: ProviderCategory) -> Provider:
        if category.kind == ProviderKind.UNSET:
            if self._default_provider is None:
                raise NoRuleForProviderError(
                    f"Branch {branch_name} has no remote and no default provider is set",
                    details={"branch": branch_name},
                )
            logger.info(
                "Remote not set, assuming default provider",
                branch=branch_name,
                provider=self._default_provider.value,
            )
            return self._default_provider

        if category.kind == ProviderKind.UNKNOWN or category.provider is None:
            raise NoRuleForProviderError(
                f"Do not know how to open ticket for branch {branch_name}: "
                "its remote is not a known provider",
                details={"branch": branch_name},
            )

        logger.debug("Branch remote type", branch=branch_name, provider=category.provider.value)
        return category.provider
