"""Configuration for branch-ticket."""

from branch_ticket.config.logging import configure_logging
from branch_ticket.config.settings import Settings, get_settings

__all__ = ["Settings", "configure_logging", "get_settings"]
