"""Exception hierarchy for branch-ticket."""

from typing import Any


class BranchTicketError(Exception):
    """Base exception for all branch-ticket errors.

    ``fatal`` errors abort the whole invocation with ``exit_code``;
    the others only abort the current ticket lookup.
    """

    fatal: bool = True
    exit_code: int = 1

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)


class RepositoryNotFoundError(BranchTicketError):
    """No git config at the expected location."""

    exit_code = 42


class ConfigParseError(BranchTicketError):
    """Malformed git configuration text."""

    exit_code = 43

    def __init__(self, message: str, line: int | None = None, text: str = "") -> None:
        self.line = line
        self.text = text
        super().__init__(message, details={"line": line, "text": text})


class RepositoryReadError(BranchTicketError):
    """Filesystem access failure other than a missing config."""

    exit_code = 44


class SettingsError(BranchTicketError):
    """An environment or ``.env`` setting has an invalid value."""

    exit_code = 45


class OpenFailedError(BranchTicketError):
    """The URL opener failed."""

    exit_code = 50


class BranchNotFoundError(BranchTicketError):
    fatal = False
    exit_code = 0


class NoRuleForProviderError(BranchTicketError):
    fatal = False
    exit_code = 0


class NoTicketInBranchNameError(BranchTicketError):
    fatal = False
    exit_code = 0


class InvalidRemoteUrlError(BranchTicketError):
    """Remote URL could not be parsed."""

    fatal = False
    exit_code = 0

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Invalid remote URL {url!r}: {reason}", details={"url": url})
