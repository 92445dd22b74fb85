"""Tests for manifest extensions."""

from dataclasses import dataclass
from typing import List, Optional

import pytest

from extensibility.context import AccountContextKeys, UserContextKeys
from extensibility.manifest import validate
from extensibility.manifest.extensions import (
    ApplicationExtension,
    Extension,
    ExtensionType,
    HomeTileExtension,
    TabExtension,
    extension_class,
    parse_extension,
    register_extension,
    registered_types,
)
from extensibility.manifest.extensions import base

HOST = {"url": "https://addon-host.com/ext", "icon": "https://addon-host.com/icon.png"}


def home_tile(**overrides):
    definition = {
        "type": "tile-home",
        "identifier": "hello-tile",
        "version": "1.0.0",
        "host": dict(HOST),
        "context": ["acc.id"],
    }
    definition.update(overrides)
    return parse_extension(definition)


class TestParseExtension:
    """Tests for building extensions from manifest definitions."""

    def test_builtin_types_are_registered(self):
        assert set(registered_types()) >= {t.value for t in ExtensionType}

    def test_variant_selected_by_type(self):
        assert isinstance(home_tile(), HomeTileExtension)
        assert isinstance(parse_extension({"type": "tab-prospect"}), TabExtension)
        assert isinstance(parse_extension({"type": "application"}), ApplicationExtension)

    def test_unknown_type_gives_base_extension(self):
        ext = parse_extension({"type": "tile-sidebar", "identifier": "x"})
        assert type(ext) is Extension
        assert "Extension type is invalid. Value: tile-sidebar" in ext.validate()

    def test_type_registered_to_another_variant(self):
        ext = HomeTileExtension(
            type="application",
            identifier="hello-tile",
            version="1.0.0",
            host=dict(HOST),
            context=["usr.id"],
        )
        assert ext.validate() == [
            "Extension type does not match HomeTileExtension. Value: application",
        ]

    def test_base_extension_accepts_any_registered_type(self):
        ext = Extension(type="tab-account", identifier="tab", version="1", host=dict(HOST))
        assert ext.validate() == []

    def test_missing_type(self):
        ext = parse_extension({"identifier": "x"})
        assert ext.validate()[0] == "Extension type is missing."

    def test_enum_type_is_stored_as_value(self):
        ext = HomeTileExtension(type=ExtensionType.HOME_TILE)
        assert ext.type == "tile-home"
        assert extension_class(ExtensionType.ACCOUNT_TAB) is TabExtension

    def test_unknown_keys_are_kept(self):
        ext = home_tile(notificationsUrl="https://addon-host.com/notify")
        assert ext.extra == {"notificationsUrl": "https://addon-host.com/notify"}
        assert ext.to_dict()["notificationsUrl"] == "https://addon-host.com/notify"
        assert parse_extension(ext.to_dict()) == ext

    def test_null_context_is_empty(self):
        assert home_tile(context=None).context == []

    def test_extension_instances_pass_through(self):
        ext = home_tile()
        assert parse_extension(ext) is ext


class TestBaseChecks:
    """Tests for the checks shared by every extension."""

    def test_valid_extension(self):
        assert home_tile().validate() == []

    def test_missing_fields(self):
        ext = parse_extension({"type": "application"})
        assert ext.validate() == [
            "Extension identifier is missing. Type: application",
            "Extension version is missing. Identifier: None",
            "Extension host section is missing. Identifier: None",
        ]

    def test_host_urls(self):
        ext = home_tile(host={"icon": "icon.png"})
        assert ext.validate() == [
            "Extension host url is missing. Identifier: hello-tile",
            "Extension host icon is invalid url. Value: icon.png",
        ]

        ext = home_tile(host={"url": "/relative"})
        assert ext.validate() == ["Extension host url is invalid url. Value: /relative"]


class TestHomeTileExtension:
    """Tests for home tile context and settings checks."""

    def test_account_user_and_client_keys_are_valid(self):
        ext = home_tile(context=["acc.id", "acc.name", "usr.email", "cli.tz"])
        assert ext.validate() == []

    def test_enum_keys_are_valid(self):
        ext = HomeTileExtension(
            identifier="hello-tile",
            version="1.0.0",
            host=dict(HOST),
            context=[AccountContextKeys.ID, UserContextKeys.EMAIL],
        )
        assert ext.validate() == []

    def test_one_issue_per_invalid_key(self):
        ext = home_tile(context=["acc.id", "opp.id", "acc.secret"])
        assert ext.validate() == [
            "Context key is not one of the valid values for the home tile extension. Key: opp.id",
            "Context key is not one of the valid values for the home tile extension. Key: acc.secret",
        ]

    def test_base_issues_come_first(self):
        ext = home_tile(identifier=None, context=["pro.id"])
        assert ext.validate() == [
            "Extension identifier is missing. Type: tile-home",
            "Context key is not one of the valid values for the home tile extension. Key: pro.id",
        ]

    @pytest.mark.parametrize("width", [0, -10, "300", 2.5, True])
    def test_invalid_width(self, width):
        ext = home_tile(settings={"width": width})
        assert ext.validate() == [f"Tile width must be a positive integer. Value: {width}"]

    def test_settings_not_an_object(self):
        ext = home_tile(settings=[300, 200])
        assert ext.validate() == ["Tile settings section is not an object. Value: [300, 200]"]


class TestTabExtension:
    """Tests for tab context checks."""

    def test_opportunity_keys_only_on_opportunity_tab(self):
        definition = {
            "identifier": "tab",
            "version": "1",
            "host": dict(HOST),
            "context": ["opp.id", "acc.id"],
        }

        assert parse_extension({**definition, "type": "tab-opportunity"}).validate() == []
        assert parse_extension({**definition, "type": "tab-account"}).validate() == [
            "Context key is not one of the valid values for the tab-account extension. Key: opp.id",
        ]

    def test_prospect_tab(self):
        ext = parse_extension({
            "type": "tab-prospect",
            "identifier": "tab",
            "version": "1",
            "host": dict(HOST),
            "context": ["pro.id", "pro.emails", "usr.id", "opp.id"],
        })
        assert ext.validate() == [
            "Context key is not one of the valid values for the tab-prospect extension. Key: opp.id",
        ]

    def test_non_tab_type(self):
        ext = TabExtension(type="tile-home", identifier="tab", version="1", host=dict(HOST))
        assert ext.validate() == [
            "Extension type does not match TabExtension. Value: tile-home",
            "Tab extension type must be one of "
            "['tab-account', 'tab-opportunity', 'tab-prospect']. Value: tile-home",
        ]


class TestApplicationExtension:
    """Tests for application extension context checks."""

    def test_only_user_and_client_keys(self):
        ext = parse_extension({
            "type": "application",
            "identifier": "app",
            "version": "1",
            "host": dict(HOST),
            "context": ["usr.id", "cli.loc", "acc.id"],
        })
        assert ext.validate() == [
            "Context key is not one of the valid values for the application extension. Key: acc.id",
        ]


class TestCustomExtension:
    """Tests for adding extension types without touching the validator."""

    def test_registered_extension_is_validated(self, monkeypatch, manifest):
        monkeypatch.setattr(base, "_EXTENSION_CLASSES", dict(base._EXTENSION_CLASSES))

        @register_extension("tile-sidebar")
        @dataclass
        class SidebarTileExtension(Extension):
            type: Optional[str] = "tile-sidebar"
            position: Optional[str] = None

            def validate(self) -> List[str]:
                issues = super().validate()
                if self.position not in ("left", "right"):
                    issues.append(f"Sidebar position is invalid. Value: {self.position}")
                return issues

        manifest["extensions"].append({
            "type": "tile-sidebar",
            "identifier": "sidebar",
            "version": "1",
            "host": dict(HOST),
            "position": "top",
        })

        assert validate(manifest) == ["Sidebar position is invalid. Value: top"]
