"""Provider classification and ticket resolution."""

from branch_ticket.tickets.classifier import classify_branch, classify_remote
from branch_ticket.tickets.providers import PROVIDER_HOSTS, TICKET_RULES
from branch_ticket.tickets.resolver import TicketResolver

__all__ = [
    "PROVIDER_HOSTS",
    "TICKET_RULES",
    "TicketResolver",
    "classify_branch",
    "classify_remote",
]
