"""branch-ticket: open the issue-tracker ticket for a git branch."""

__version__ = "0.1.0"
