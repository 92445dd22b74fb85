"""Context records available to addons."""

from typing import ClassVar, Mapping, Optional

from pydantic import Field

from extensibility.context.base import ContextRecord, key_table
from extensibility.context.keys import (
    AccountContextKeys,
    ClientContextKeys,
    OpportunityContextKeys,
    ProspectContextKeys,
    UserContextKeys,
)


class AccountContext(ContextRecord):
    """Account the addon is loaded for."""

    id: Optional[str] = Field(default=None, description="Unique account identifier")
    custom_id: Optional[str] = Field(
        default=None,
        description="Custom ID for the account, often referencing an ID in an external system",
    )
    domain: Optional[str] = Field(default=None, description="Domain of the account company")
    description: Optional[str] = Field(default=None, description="Custom description of the account")
    external_provider_id: Optional[str] = Field(
        default=None,
        description="Identity of the account in the external system linked through an installed integration",
    )
    external_provider_name: Optional[str] = Field(
        default=None,
        description="Name of the external system provider linked through an installed integration",
    )
    locality: Optional[str] = Field(
        default=None, description="Primary geographic region, e.g. 'Eastern USA'"
    )
    name: Optional[str] = Field(default=None, description="Company name, e.g. 'Acme Corporation'")
    tags: Optional[str] = Field(default=None, description="Tag values associated with the account")

    KEYS: ClassVar[Mapping[str, str]] = key_table({
        AccountContextKeys.ID: "id",
        AccountContextKeys.CUSTOM_ID: "custom_id",
        AccountContextKeys.DOMAIN: "domain",
        AccountContextKeys.DESCRIPTION: "description",
        AccountContextKeys.EXTERNAL_PROVIDER_ID: "external_provider_id",
        AccountContextKeys.EXTERNAL_PROVIDER_NAME: "external_provider_name",
        AccountContextKeys.LOCALITY: "locality",
        AccountContextKeys.NAME: "name",
        AccountContextKeys.TAGS: "tags",
    })


class UserContext(ContextRecord):
    """Host user loading the addon."""

    id: Optional[str] = None
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    title: Optional[str] = None
    username: Optional[str] = None
    external_id: Optional[str] = None

    KEYS: ClassVar[Mapping[str, str]] = key_table({
        UserContextKeys.ID: "id",
        UserContextKeys.EMAIL: "email",
        UserContextKeys.FIRST_NAME: "first_name",
        UserContextKeys.LAST_NAME: "last_name",
        UserContextKeys.TITLE: "title",
        UserContextKeys.USERNAME: "username",
        UserContextKeys.EXTERNAL_ID: "external_id",
    })


class ClientContext(ContextRecord):
    """Client (browser) the addon runs in."""

    locale: Optional[str] = Field(default=None, description="Locale of the host UI, e.g. 'en-US'")
    timezone: Optional[str] = Field(default=None, description="IANA timezone of the user")
    version: Optional[str] = Field(default=None, description="Host client version")

    KEYS: ClassVar[Mapping[str, str]] = key_table({
        ClientContextKeys.LOCALE: "locale",
        ClientContextKeys.TIMEZONE: "timezone",
        ClientContextKeys.VERSION: "version",
    })
    IDENTIFIER: ClassVar[Optional[str]] = None


class OpportunityContext(ContextRecord):
    """Opportunity an opportunity tab extension is opened for."""

    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    amount: Optional[str] = None
    probability: Optional[str] = None
    next_step: Optional[str] = None
    external_provider_id: Optional[str] = None
    external_provider_name: Optional[str] = None
    tags: Optional[str] = None

    KEYS: ClassVar[Mapping[str, str]] = key_table({
        OpportunityContextKeys.ID: "id",
        OpportunityContextKeys.NAME: "name",
        OpportunityContextKeys.DESCRIPTION: "description",
        OpportunityContextKeys.AMOUNT: "amount",
        OpportunityContextKeys.PROBABILITY: "probability",
        OpportunityContextKeys.NEXT_STEP: "next_step",
        OpportunityContextKeys.EXTERNAL_PROVIDER_ID: "external_provider_id",
        OpportunityContextKeys.EXTERNAL_PROVIDER_NAME: "external_provider_name",
        OpportunityContextKeys.TAGS: "tags",
    })


class ProspectContext(ContextRecord):
    """Prospect a prospect tab extension is opened for."""

    id: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    title: Optional[str] = None
    company: Optional[str] = None
    emails: Optional[str] = None
    locality: Optional[str] = None
    external_provider_id: Optional[str] = None
    external_provider_name: Optional[str] = None
    tags: Optional[str] = None

    KEYS: ClassVar[Mapping[str, str]] = key_table({
        ProspectContextKeys.ID: "id",
        ProspectContextKeys.FIRST_NAME: "first_name",
        ProspectContextKeys.LAST_NAME: "last_name",
        ProspectContextKeys.TITLE: "title",
        ProspectContextKeys.COMPANY: "company",
        ProspectContextKeys.EMAILS: "emails",
        ProspectContextKeys.LOCALITY: "locality",
        ProspectContextKeys.EXTERNAL_PROVIDER_ID: "external_provider_id",
        ProspectContextKeys.EXTERNAL_PROVIDER_NAME: "external_provider_name",
        ProspectContextKeys.TAGS: "tags",
    })
