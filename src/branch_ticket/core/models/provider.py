"""Provider classification and ticket models."""

import re
from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict


class Provider(str, Enum):
    """Known hosting providers."""

    ACRONIS = "acronis"
    GITHUB = "github"


class ProviderKind(str, Enum):
    """Outcome of classifying a branch's remote."""

    KNOWN = "known"
    UNSET = "unset"  # branch declares no remote
    UNKNOWN = "unknown"  # remote host matches no provider


class ProviderCategory(BaseModel):
    """Classification of a remote; ``provider`` is set only when known."""

    model_config = ConfigDict(frozen=True)

    kind: ProviderKind
    provider: Provider | None = None

    @classmethod
    def known(cls, provider: Provider) -> "ProviderCategory":
        return cls(kind=ProviderKind.KNOWN, provider=provider)

    @classmethod
    def unset(cls) -> "ProviderCategory":
        return cls(kind=ProviderKind.UNSET)

    @classmethod
    def unknown(cls) -> "ProviderCategory":
        return cls(kind=ProviderKind.UNKNOWN)

    def __str__(self) -> str:
        if self.provider is not None:
            return self.provider.value
        return self.kind.value


@dataclass(frozen=True)
class TicketRule:
    """Extraction pattern and URL template for one provider.

    The template has a single ``{branch}`` slot.
    """

    pattern: re.Pattern[str]
    url_template: str


class TicketResolution(BaseModel):
    """A branch resolved to its ticket URL."""

    model_config = ConfigDict(frozen=True)

    branch: str
    provider: Provider
    ticket: str
    url: str
