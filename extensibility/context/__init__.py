"""Runtime context exchanged between the host application and addons."""

from .base import ContextRecord
from .keys import (
    AccountContextKeys,
    ClientContextKeys,
    OpportunityContextKeys,
    ProspectContextKeys,
    UserContextKeys,
)
from .marshalling import HostContext, hydrate, serialize
from .param import ContextParam
from .records import (
    AccountContext,
    ClientContext,
    OpportunityContext,
    ProspectContext,
    UserContext,
)

__all__ = [
    'AccountContext',
    'AccountContextKeys',
    'ClientContext',
    'ClientContextKeys',
    'ContextParam',
    'ContextRecord',
    'HostContext',
    'OpportunityContext',
    'OpportunityContextKeys',
    'ProspectContext',
    'ProspectContextKeys',
    'UserContext',
    'UserContextKeys',
    'hydrate',
    'serialize',
]
