"""Core domain models and exceptions for branch-ticket."""

from branch_ticket.core.exceptions import (
    BranchNotFoundError,
    BranchTicketError,
    ConfigParseError,
    InvalidRemoteUrlError,
    NoRuleForProviderError,
    NoTicketInBranchNameError,
    OpenFailedError,
    RepositoryNotFoundError,
    RepositoryReadError,
    SettingsError,
)
from branch_ticket.core.models import (
    Branch,
    Provider,
    ProviderCategory,
    ProviderKind,
    Remote,
    Repository,
    TicketResolution,
    TicketRule,
)

__all__ = [
    # Models
    "Branch",
    "Remote",
    "Repository",
    "Provider",
    "ProviderCategory",
    "ProviderKind",
    "TicketRule",
    "TicketResolution",
    # Exceptions
    "BranchTicketError",
    "RepositoryNotFoundError",
    "ConfigParseError",
    "RepositoryReadError",
    "SettingsError",
    "OpenFailedError",
    "BranchNotFoundError",
    "NoRuleForProviderError",
    "NoTicketInBranchNameError",
    "InvalidRemoteUrlError",
]
