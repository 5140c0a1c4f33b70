"""Read-only access to a repository's git directory."""

from pathlib import Path

import structlog

from branch_ticket.core.exceptions import RepositoryNotFoundError, RepositoryReadError

logger = structlog.get_logger(__name__)

HEAD_REF_PREFIX = "ref: refs/heads/"


class GitDirReader:
    """Reads config, HEAD and local branch refs straight from ``.git``.

    Reads files directly (no git CLI, no gitpython dependency).
    """

    def __init__(self, repo_path: str | Path = ".", git_dir: str = ".git") -> None:
        self._repo_path = Path(repo_path).resolve()
        self._git_dir = self._repo_path / git_dir

    @property
    def repo_path(self) -> Path:
        return self._repo_path

    @property
    def git_dir(self) -> Path:
        return self._git_dir

    def read_config(self) -> str:
        """Read the git config text.

        Raises:
            RepositoryNotFoundError: If there is no config file.
            RepositoryReadError: If the file can't be read.
        """
        path = self._git_dir / "config"
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise RepositoryNotFoundError(
                f"{self._repo_path} is not a valid git repository",
                details={"path": str(path)},
            ) from e
        except (OSError, UnicodeDecodeError) as e:
            raise RepositoryReadError(
                f"Failed to read git config: {e}",
                details={"path": str(path)},
            ) from e

    def list_branch_refs(self) -> list[str]:
        """List local branch names under ``refs/heads``.

        Only direct file entries are returned; ``HEAD`` is skipped in
        any case.
        """
        heads = self._git_dir / "refs" / "heads"
        try:
            entries = sorted(heads.iterdir())
        except OSError as e:
            raise RepositoryReadError(
                f"Failed to list branch refs: {e}",
                details={"path": str(heads)},
            ) from e

        branches = []
        for entry in entries:
            if entry.is_dir():
                continue
            if entry.name.upper() == "HEAD":
                continue
            branches.append(entry.name)

        logger.debug("Listed branch refs", count=len(branches))
        return branches

    def read_current_branch(self) -> str | None:
        """Get the checked-out branch name, or None for a detached HEAD."""
        path = self._git_dir / "HEAD"
        try:
            data = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise RepositoryReadError(
                f"Failed to read HEAD: {e}",
                details={"path": str(path)},
            ) from e

        if not data.startswith("ref:"):
            logger.debug("HEAD is detached", head=data.strip())
            return None

        branch = data.strip().removeprefix(HEAD_REF_PREFIX).strip()
        logger.debug("Branch is", branch=branch)
        return branch
