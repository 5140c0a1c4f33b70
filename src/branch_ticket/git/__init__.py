"""Git integration module for branch-ticket."""

from branch_ticket.git.builder import build_repository
from branch_ticket.git.config_parser import GitConfig, parse_git_config
from branch_ticket.git.reader import GitDirReader
from branch_ticket.git.url_parser import RemoteUrl, parse_remote_url

__all__ = [
    "GitConfig",
    "GitDirReader",
    "RemoteUrl",
    "build_repository",
    "parse_git_config",
    "parse_remote_url",
]
