"""Tests for loading manifest files."""

import json

import pytest
import yaml

from extensibility.manifest import (
    Application,
    HomeTileExtension,
    ManifestLoadError,
    load_application,
    load_manifest,
    validate,
)


class TestLoadManifest:
    """Tests for load_manifest."""

    def test_json(self, tmp_path, manifest):
        path = tmp_path / "manifest.json"
        path.write_text(json.dumps(manifest), encoding="utf-8")

        assert load_manifest(path) == manifest

    def test_yaml(self, tmp_path, manifest):
        path = tmp_path / "manifest.yaml"
        path.write_text(yaml.safe_dump(manifest), encoding="utf-8")

        data = load_manifest(str(path))
        assert data == manifest
        assert validate(data) == []

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "manifest.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ManifestLoadError):
            load_manifest(path)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "manifest.yml"
        path.write_text("store: [unclosed", encoding="utf-8")

        with pytest.raises(ManifestLoadError):
            load_manifest(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ManifestLoadError):
            load_manifest(tmp_path / "missing.json")

    def test_document_must_be_an_object(self, tmp_path):
        path = tmp_path / "manifest.json"
        path.write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(ManifestLoadError):
            load_manifest(path)


class TestLoadApplication:
    """Tests for load_application."""

    def test_models_and_extensions(self, tmp_path, manifest):
        path = tmp_path / "manifest.json"
        path.write_text(json.dumps(manifest), encoding="utf-8")

        application = load_application(path)

        assert isinstance(application, Application)
        assert application.store.author.website_url == "https://addon-host.com"
        assert application.api.client.id == "AbCd123456qW"
        assert isinstance(application.extensions[0], HomeTileExtension)

    def test_to_dict_restores_the_manifest(self, tmp_path, manifest):
        manifest["extensions"].append("not-an-extension")
        path = tmp_path / "manifest.json"
        path.write_text(json.dumps(manifest), encoding="utf-8")

        assert load_application(path).to_dict() == manifest

    def test_wrongly_typed_manifest(self, tmp_path, manifest):
        manifest["api"]["scopes"] = ["bogus.read"]
        path = tmp_path / "manifest.json"
        path.write_text(json.dumps(manifest), encoding="utf-8")

        with pytest.raises(ManifestLoadError):
            load_application(path)

        # The raw document still reports the problem as an issue
        assert validate(load_manifest(path)) == ["Invalid api scope value. Value: bogus.read"]
