"""Application services."""

from branch_ticket.services.ticket import TicketService, load_repository

__all__ = ["TicketService", "load_repository"]
