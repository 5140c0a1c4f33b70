"""Domain models for branch-ticket."""

from branch_ticket.core.models.provider import (
    Provider,
    ProviderCategory,
    ProviderKind,
    TicketResolution,
    TicketRule,
)
from branch_ticket.core.models.repository import Branch, Remote, Repository

__all__ = [
    "Branch",
    "Remote",
    "Repository",
    "Provider",
    "ProviderCategory",
    "ProviderKind",
    "TicketRule",
    "TicketResolution",
]
