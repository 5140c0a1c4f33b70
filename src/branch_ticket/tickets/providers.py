"""Fixed provider tables."""

import re
from types import MappingProxyType

from branch_ticket.core.models.provider import Provider, TicketRule

PROVIDER_HOSTS = MappingProxyType(
    {
        "git.acronis.com": Provider.ACRONIS,
        "github.com": Provider.GITHUB,
    }
)

TICKET_RULES = MappingProxyType(
    {
        Provider.ACRONIS: TicketRule(
            pattern=re.compile(r"(ABR-\d{6})"),
            url_template="https://pmc.acronis.com/browse/{branch}",
        ),
    }
)
