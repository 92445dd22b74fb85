"""Manifest validation - lists every integrity problem of an application manifest."""

import logging
from typing import Any, Iterable, List, Mapping, Union

from extensibility.constants import DEFAULT_LANGUAGE
from extensibility.manifest.extensions import Extension, parse_extension
from extensibility.manifest.models import Application, MediaType, StoreType
from extensibility.manifest.scopes import Scopes
from extensibility.utils.validation import email_validation, url_validation

logger = logging.getLogger(__name__)

SCOPE_VALUES = frozenset(s.value for s in Scopes)
STORE_TYPE_VALUES = frozenset(t.value for t in StoreType)
MEDIA_TYPE_VALUES = frozenset(t.value for t in MediaType)


def validate(application: Union[Application, Mapping[str, Any]]) -> List[str]:
    """Validates given manifest if it contains all of the required fields with correct values.

    Every check runs regardless of the others, so all problems are reported
    in one pass. Problems in the data never raise.

    Args:
        application: ``Application`` model or the raw manifest mapping as
            loaded from a manifest file

    Returns:
        List of validation issues (empty if the manifest is valid)

    Raises:
        TypeError: If ``application`` is neither a model nor a mapping
    """
    if isinstance(application, Application):
        document = application.to_dict()
        extensions: Any = application.extensions
    elif isinstance(application, Mapping):
        document = application
        extensions = application.get("extensions")
    else:
        raise TypeError(f"Expected Application or mapping, got {type(application).__name__}")

    issues: List[str] = []

    api = document.get("api")
    if api is not None:
        if isinstance(api, Mapping):
            issues.extend(_validate_api(api))
        else:
            issues.append(f"Api section is not an object. Value: {api}")

    store = document.get("store")
    if store is None:
        issues.append("Store section is missing.")
        store = {}
    elif not isinstance(store, Mapping):
        issues.append(f"Store section is not an object. Value: {store}")
        store = {}
    issues.extend(_validate_store(store))

    issues.extend(_validate_extensions(extensions))

    logger.debug(f"Manifest validation found {len(issues)} issue(s)")
    return issues


def _validate_api(api: Mapping[str, Any]) -> List[str]:
    issues = []

    scopes = api.get("scopes")
    if scopes is None:
        issues.append("Undefined api scopes")
    elif not isinstance(scopes, list):
        issues.append(f"Api scopes value is not an array. Value: {scopes}")
    else:
        for scope in scopes:
            if not _member(scope, SCOPE_VALUES):
                issues.append(f"Invalid api scope value. Value: {scope}")

    # client.id is preferred; the deprecated applicationId is only looked at
    # when client.id is missing, and only to avoid reporting it as missing
    client = api.get("client")
    client_id = client.get("id") if isinstance(client, Mapping) else None
    if not client_id:
        if not api.get("applicationId"):
            issues.append("Manifest Api section needs to have client.id value.")

    # Same for redirectUris and the deprecated single redirectUri
    redirect_uris = api.get("redirectUris")
    if redirect_uris is None or redirect_uris == []:
        redirect_uri = api.get("redirectUri")
        if redirect_uri is None:
            issues.append("Undefined redirectUris")
        elif not url_validation(redirect_uri):
            issues.append(
                f"Manifest Api section needs to have a valid redirect url. Value: {redirect_uri}"
            )
    elif not isinstance(redirect_uris, list):
        issues.append(f"redirectUris value is not an array. Value: {redirect_uris}")
    else:
        for redirect_uri in redirect_uris:
            if not url_validation(redirect_uri):
                issues.append(
                    f"Manifest Api section needs to have valid redirect urls. Value: {redirect_uri}"
                )

    return issues


def _validate_store(store: Mapping[str, Any]) -> List[str]:
    issues = []

    author = store.get("author")
    if author is None:
        issues.append("Author section is missing")
    elif not isinstance(author, Mapping):
        issues.append(f"Author section is not an object. Value: {author}")
    else:
        if not email_validation(author.get("email")):
            issues.append(f"Author e-mail is invalid e-mail. Value: {author.get('email')}")
        if not url_validation(author.get("websiteUrl")):
            issues.append(f"Author website url is invalid url. Value: {author.get('websiteUrl')}")
        if not url_validation(author.get("privacyUrl")):
            issues.append(f"Author privacy url is invalid url. Value: {author.get('privacyUrl')}")
        if not url_validation(author.get("termsOfUseUrl")):
            issues.append(
                f"Author terms of use url is invalid url. Value: {author.get('termsOfUseUrl')}"
            )

    categories = store.get("categories")
    if categories is None:
        issues.append("Categories section is missing")
    elif not isinstance(categories, list):
        issues.append(f"Categories is not an array. Value: {categories}")
    elif len(categories) == 0:
        issues.append(f"There are no categories selected for addon. Value: {categories}")

    medias = store.get("medias")
    if medias is not None:
        if not isinstance(medias, list):
            issues.append(f"Medias section value is not a valid array. Value: {medias}")
        else:
            for media in medias:
                issues.extend(_validate_media(media))

    issues.extend(_validate_localized(store, "description", "Description"))
    issues.extend(_validate_localized(store, "headline", "Headline"))

    icon_url = store.get("iconUrl")
    if not icon_url:
        issues.append("Application icon is missing.")
    elif not url_validation(icon_url):
        issues.append(f"Application icon url is invalid url. Value: {icon_url}")

    if not store.get("identifier"):
        issues.append("Manifest identifier definition is missing.")

    issues.extend(_validate_localized(store, "title", "Title"))

    store_type = store.get("type")
    if not store_type or not _member(store_type, STORE_TYPE_VALUES):
        issues.append(f"Store value is invalid. Value: {store_type}")

    if not store.get("version"):
        issues.append("Manifest Version definition is missing.")

    return issues


def _validate_media(media: Any) -> List[str]:
    if not isinstance(media, Mapping):
        return [f"Media entry is not an object. Value: {media}"]

    issues = []

    url = media.get("url")
    if not url:
        issues.append("Url value is missing")
    elif not url_validation(url):
        issues.append(f"Url value is not a valid url. Value: {url}")

    if not media.get("title"):
        issues.append("Title value is missing")

    media_type = media.get("type")
    if not media_type:
        issues.append("Type value is missing")
    elif not _member(media_type, MEDIA_TYPE_VALUES):
        issues.append(f"Type value is invalid. Value: {media_type}")

    return issues


def _validate_localized(store: Mapping[str, Any], field: str, label: str) -> List[str]:
    value = store.get(field)
    if value is None:
        return [f"{label} section is missing."]
    if not isinstance(value, Mapping) or not value.get(DEFAULT_LANGUAGE):
        return [f"{label} section is missing English entry."]
    return []


def _validate_extensions(extensions: Any) -> List[str]:
    if extensions is None:
        return []
    if not isinstance(extensions, list):
        return [f"Extensions section is not an array. Value: {extensions}"]

    issues = []
    for ext in extensions:
        if not isinstance(ext, Extension):
            ext = parse_extension(ext)
        issues.extend(ext.validate())
    return issues


def _member(value: Any, values: Iterable[str]) -> bool:
    return isinstance(value, str) and value in values
