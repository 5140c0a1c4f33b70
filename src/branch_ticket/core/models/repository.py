"""Repository, remote and branch models."""

from pydantic import BaseModel, ConfigDict, Field

from branch_ticket.core.exceptions import BranchNotFoundError


class Remote(BaseModel):
    """A configured remote endpoint."""

    model_config = ConfigDict(frozen=True)

    name: str
    url: str = ""
    fetch: str = ""


class Branch(BaseModel):
    """A local branch, optionally tracking a remote.

    Branches discovered only under ``refs/heads`` have empty
    ``remote`` and ``merge``.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    remote: str = ""
    merge: str = ""

    @property
    def has_remote(self) -> bool:
        return bool(self.remote)


class Repository(BaseModel):
    """Remotes and branches of a local repository, keyed by name."""

    model_config = ConfigDict(frozen=True)

    remotes: dict[str, Remote] = Field(default_factory=dict)
    branches: dict[str, Branch] = Field(default_factory=dict)

    def get_remote(self, name: str) -> Remote | None:
        return self.remotes.get(name)

    def get_branch(self, name: str) -> Branch:
        """Get a branch by name.

        Raises:
            BranchNotFoundError: If the repository has no such branch.
        """
        branch = self.branches.get(name)
        if branch is None:
            raise BranchNotFoundError(
                f"Branch {name} not found",
                details={"branch": name},
            )
        return branch
