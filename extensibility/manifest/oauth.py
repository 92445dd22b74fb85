"""OAuth authorize url for the addon's host API access."""

import logging
from typing import List, Optional
from urllib.parse import urlencode

from extensibility.constants import OAUTH_AUTHORIZE_URL
from extensibility.manifest.models import Application

logger = logging.getLogger(__name__)


def declared_redirect_uris(application: Application) -> List[str]:
    """Redirect uris declared by the manifest (deprecated redirectUri as fallback)."""
    api = application.api
    if api is None:
        return []
    if api.redirect_uris:
        return list(api.redirect_uris)
    if api.redirect_uri:
        return [api.redirect_uri]
    return []


def build_authorize_url(application: Application, redirect_uri: Optional[str] = None) -> str:
    """Build the url of the host OAuth authorization page.

    Args:
        application: Manifest with an api section
        redirect_uri: One of the declared redirect uris; the first declared one
            is used when omitted

    Returns:
        Authorize url with client_id, redirect_uri, response_type and scope

    Raises:
        ValueError: If the manifest has no api section, no client id, no
            redirect uri, or ``redirect_uri`` is not declared in the manifest
    """
    api = application.api
    if api is None:
        raise ValueError("Manifest has no api section")

    client_id = api.client.id if api.client and api.client.id else api.application_id
    if not client_id:
        raise ValueError("Manifest api section has no client.id")

    redirect_uris = declared_redirect_uris(application)
    if redirect_uri is None:
        if not redirect_uris:
            raise ValueError("Manifest api section has no redirect uri")
        redirect_uri = redirect_uris[0]
    elif redirect_uri not in redirect_uris:
        raise ValueError(f"Redirect uri is not declared in the manifest: {redirect_uri}")

    scopes = " ".join(scope.value for scope in api.scopes or [])
    query = urlencode({
        "client_id": client_id,
        "redirect_uri": redirect_uri,
        "response_type": "code",
        "scope": scopes,
    })
    url = f"{OAUTH_AUTHORIZE_URL}?{query}"
    logger.debug(f"Authorize url for client {client_id}: {url}")
    return url
