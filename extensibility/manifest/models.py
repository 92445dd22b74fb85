"""Application manifest models - describe an addon's store listing, api needs and extensions."""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from extensibility.manifest.extensions import Extension, parse_extension
from extensibility.manifest.scopes import Scopes

# Language code -> text; the "en" entry is mandatory
LocalizedString = Dict[str, str]


class StoreType(str, Enum):
    """Visibility of the addon in the store."""

    PERSONAL = "personal"
    PRIVATE = "private"
    PUBLIC = "public"


class MediaType(str, Enum):
    """Kind of store media item."""

    IMAGE = "image"
    VIDEO = "video"


class ManifestModel(BaseModel):
    """Base for manifest sections: camelCase on the wire, unknown keys kept."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class Author(ManifestModel):
    company: Optional[str] = Field(default=None, description="Company name")
    website_url: Optional[str] = Field(default=None, alias="websiteUrl")
    privacy_url: Optional[str] = Field(default=None, alias="privacyUrl")
    terms_of_use_url: Optional[str] = Field(default=None, alias="termsOfUseUrl")
    email: Optional[str] = Field(default=None, description="Support contact e-mail")


class Media(ManifestModel):
    url: Optional[str] = None
    title: Optional[str] = None
    type: Optional[MediaType] = None


class Store(ManifestModel):
    """Store listing of the addon."""

    identifier: Optional[str] = Field(default=None, description="Unique addon identifier")
    version: Optional[str] = Field(default=None, description="Addon version")
    title: Optional[LocalizedString] = None
    description: Optional[LocalizedString] = None
    headline: Optional[LocalizedString] = None
    author: Optional[Author] = None
    categories: Optional[List[str]] = None
    icon_url: Optional[str] = Field(default=None, alias="iconUrl")
    medias: Optional[List[Media]] = None
    type: Optional[StoreType] = None


class ApiClient(ManifestModel):
    id: Optional[str] = Field(default=None, description="OAuth client id")


class ManifestApi(ManifestModel):
    """Optional section defining what the addon needs to call the host API."""

    scopes: Optional[List[Scopes]] = Field(
        default=None,
        description="Scopes the current user is asked to consent to",
    )
    client: Optional[ApiClient] = None
    application_id: Optional[str] = Field(
        default=None,
        alias="applicationId",
        description="Deprecated, use client.id",
    )
    redirect_uris: Optional[List[str]] = Field(
        default=None,
        alias="redirectUris",
        description="Urls on which the OAuth authorization endpoint is implemented",
    )
    redirect_uri: Optional[str] = Field(
        default=None,
        alias="redirectUri",
        description="Deprecated, use redirectUris",
    )


class Application(ManifestModel):
    """Application manifest.

    The manifest carries no validity flag; use
    ``extensibility.manifest.validator.validate`` to list its issues.
    """

    store: Store = Field(..., description="Store listing")
    api: Optional[ManifestApi] = Field(default=None, description="Host API access")
    # Extension instances (see extensibility.manifest.extensions)
    extensions: List[Any] = Field(default_factory=list)

    @field_validator("extensions", mode="before")
    @classmethod
    def parse_extensions(cls, v: Any) -> Any:
        if v is None:
            return []
        if isinstance(v, list):
            return [parse_extension(ext) for ext in v]
        return v

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the manifest to its wire form."""
        data = self.model_dump(mode="json", by_alias=True, exclude_none=True, exclude={"extensions"})
        data["extensions"] = [
            ext.to_dict() if isinstance(ext, Extension) else ext for ext in self.extensions
        ]
        return data
