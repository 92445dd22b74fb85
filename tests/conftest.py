"""Shared fixtures for the extensibility SDK tests."""

import pytest


@pytest.fixture
def manifest():
    """A complete manifest that passes validation (fresh copy per test)."""
    return {
        "store": {
            "identifier": "hello-world",
            "version": "1.0.0",
            "title": {"en": "Hello world", "de": "Hallo Welt"},
            "description": {"en": "Says hello to the current account"},
            "headline": {"en": "Hello!"},
            "author": {
                "company": "Addon Host",
                "websiteUrl": "https://addon-host.com",
                "privacyUrl": "https://addon-host.com/privacy",
                "termsOfUseUrl": "https://addon-host.com/terms",
                "email": "dev@addon-host.com",
            },
            "categories": ["productivity"],
            "iconUrl": "https://addon-host.com/icon.png",
            "medias": [
                {
                    "url": "https://addon-host.com/screenshot.png",
                    "title": "Screenshot",
                    "type": "image",
                }
            ],
            "type": "public",
        },
        "api": {
            "scopes": ["accounts.all"],
            "client": {"id": "AbCd123456qW"},
            "redirectUris": [
                "https://addon-host.com/hello-world1",
                "https://addon-host.com/hello-world2",
            ],
        },
        "extensions": [
            {
                "type": "tile-home",
                "identifier": "hello-tile",
                "version": "1.0.0",
                "host": {
                    "url": "https://addon-host.com/tile",
                    "icon": "https://addon-host.com/icon.png",
                },
                "context": ["acc.id", "usr.id", "cli.loc"],
                "settings": {"width": 300, "height": 200},
            }
        ],
    }
