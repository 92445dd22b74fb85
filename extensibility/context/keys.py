"""Context key enumerations.

Every attribute of a context record travels between the host application and
the addon as one context parameter tagged with one of these keys. The same
keys are declared in the ``context`` section of manifest extensions.
"""

from enum import Enum
from typing import FrozenSet, Iterable, Optional, Type


class AccountContextKeys(str, Enum):
    """Keys describing the account the addon is loaded for."""

    ID = "acc.id"
    CUSTOM_ID = "acc.cstmId"
    DOMAIN = "acc.dom"
    DESCRIPTION = "acc.desc"
    EXTERNAL_PROVIDER_ID = "acc.extId"
    EXTERNAL_PROVIDER_NAME = "acc.extName"
    LOCALITY = "acc.loc"
    NAME = "acc.name"
    TAGS = "acc.tags"


class UserContextKeys(str, Enum):
    """Keys describing the host user loading the addon."""

    ID = "usr.id"
    EMAIL = "usr.email"
    FIRST_NAME = "usr.fname"
    LAST_NAME = "usr.lname"
    TITLE = "usr.title"
    USERNAME = "usr.uname"
    EXTERNAL_ID = "usr.extId"


class ClientContextKeys(str, Enum):
    """Keys describing the client (browser) hosting the addon."""

    LOCALE = "cli.loc"
    TIMEZONE = "cli.tz"
    VERSION = "cli.ver"


class OpportunityContextKeys(str, Enum):
    """Keys describing the opportunity an opportunity tab is opened for."""

    ID = "opp.id"
    NAME = "opp.name"
    DESCRIPTION = "opp.desc"
    AMOUNT = "opp.amnt"
    PROBABILITY = "opp.prob"
    NEXT_STEP = "opp.nextStep"
    EXTERNAL_PROVIDER_ID = "opp.extId"
    EXTERNAL_PROVIDER_NAME = "opp.extName"
    TAGS = "opp.tags"


class ProspectContextKeys(str, Enum):
    """Keys describing the prospect a prospect tab is opened for."""

    ID = "pro.id"
    FIRST_NAME = "pro.fname"
    LAST_NAME = "pro.lname"
    TITLE = "pro.title"
    COMPANY = "pro.company"
    EMAILS = "pro.emails"
    LOCALITY = "pro.loc"
    EXTERNAL_PROVIDER_ID = "pro.extId"
    EXTERNAL_PROVIDER_NAME = "pro.extName"
    TAGS = "pro.tags"


def key_values(*enums: Type[Enum]) -> FrozenSet[str]:
    """Union of the string values of the given key enumerations."""
    return frozenset(member.value for enum in enums for member in enum)


def invalid_keys(keys: Iterable, allowed: FrozenSet[str]) -> list:
    """Return the entries of ``keys`` that are not in ``allowed``, in order."""
    return [key for key in keys if _key_value(key) not in allowed]


def _key_value(key) -> Optional[str]:
    if isinstance(key, Enum):
        return key.value
    if isinstance(key, str):
        return key
    return None
