"""Git remote URL parsing.

Supported URL forms:
    URL syntax:
        - https://github.com/owner/repo.git
        - ssh://git@git.example.com:2222/team/repo.git
        - git://host/path, file:///srv/repo.git

    scp-like syntax:
        - git@github.com:owner/repo.git
        - github.com:owner/repo

    Local paths:
        - /srv/git/repo.git, ./repo, ../repo
"""

import re
from dataclasses import dataclass
from urllib.parse import urlsplit

from branch_ticket.core.exceptions import InvalidRemoteUrlError

# scheme://... ; the scheme must be at least two characters so that a
# Windows drive letter is not mistaken for one
URL_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]+://")

# [user@]host:path, where the host part holds no slash
SCP_PATTERN = re.compile(r"^(?:(?P<user>[^@/:]+)@)?(?P<host>[^@/:]+):(?P<path>.*)$")


@dataclass(frozen=True)
class RemoteUrl:
    """Components of a parsed remote URL.

    ``host`` is lower-cased and empty for local repositories.
    """

    url: str
    scheme: str
    host: str
    path: str
    user: str | None = None
    port: int | None = None

    @property
    def is_local(self) -> bool:
        return self.scheme == "file"


def parse_remote_url(url: str) -> RemoteUrl:
    """Parse a git remote URL.

    Raises:
        InvalidRemoteUrlError: If the URL is empty, holds whitespace or
            carries an invalid port.
    """
    url = url.strip()
    if not url:
        raise InvalidRemoteUrlError(url, reason="Empty URL")
    if re.search(r"\s", url):
        raise InvalidRemoteUrlError(url, reason="URL contains whitespace")

    if URL_PATTERN.match(url):
        return _parse_url_syntax(url)

    if url.startswith(("/", "./", "../", "~")):
        return RemoteUrl(url=url, scheme="file", host="", path=url)

    match = SCP_PATTERN.match(url)
    if match:
        return RemoteUrl(
            url=url,
            scheme="ssh",
            host=match.group("host").lower(),
            path=match.group("path"),
            user=match.group("user"),
        )

    # git treats anything else without a colon as a local path
    return RemoteUrl(url=url, scheme="file", host="", path=url)


def _parse_url_syntax(url: str) -> RemoteUrl:
    try:
        parts = urlsplit(url)
        port = parts.port
    except ValueError as e:
        raise InvalidRemoteUrlError(url, reason=str(e)) from e

    scheme = parts.scheme.lower()
    host = (parts.hostname or "").lower()
    if not host and scheme != "file":
        raise InvalidRemoteUrlError(url, reason="Missing host")

    return RemoteUrl(
        url=url,
        scheme=scheme,
        host=host,
        path=parts.path,
        user=parts.username,
        port=port,
    )
