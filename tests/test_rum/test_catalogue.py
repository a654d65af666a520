"""Tests for catalogue persistence."""

from __future__ import annotations

import json

import pytest

from rum.catalogue import CatalogueStore
from rum.errors import ConfigError
from rum.model.style import Catalogue, OriginKind, StyleRecord


def _record(**overrides) -> StyleRecord:
    fields = dict(
        id=0,
        name="Dark",
        uri="146771",
        origin_kind=OriginKind.CATALOGUE,
        target_path="/c/userContent.css",
        domain='domain("kernel.org")',
        enabled=False,
        settings={"ACCENTCOLOR": "#0F9D58"},
        css="a { color: #0F9D58; }",
    )
    fields.update(overrides)
    return StyleRecord(**fields)


class TestWriteAndLoad:
    def test_round_trip_preserves_fields(self, tmp_path) -> None:
        store = CatalogueStore(tmp_path / "rum.json")
        store.write(Catalogue(chrome_path="/c", styles=[_record(), _record(id=1, name="Light", enabled=True, domain=None)]))

        loaded = store.load()

        assert loaded.chrome_path == "/c"
        assert loaded.styles == [_record(), _record(id=1, name="Light", enabled=True, domain=None)]

    def test_css_is_not_persisted(self, tmp_path) -> None:
        store = CatalogueStore(tmp_path / "rum.json")
        store.write(Catalogue(chrome_path="/c", styles=[_record()]))

        raw = json.loads((tmp_path / "rum.json").read_text())

        assert "css" not in raw["styles"][0]
        assert store.load().styles[0].css == ""

    def test_document_layout(self, tmp_path) -> None:
        store = CatalogueStore(tmp_path / "rum.json")
        store.write(Catalogue(chrome_path="/c", styles=[_record()]))

        raw = json.loads((tmp_path / "rum.json").read_text())

        assert raw["styles"][0] == {
            "id": 0,
            "uri": "146771",
            "name": "Dark",
            "path": "/c/userContent.css",
            "enabled": False,
            "style_type": "CatalogueStyle",
            "domain": 'domain("kernel.org")',
            "settings": {"ACCENTCOLOR": "#0F9D58"},
        }

    def test_write_overwrites(self, tmp_path) -> None:
        store = CatalogueStore(tmp_path / "rum.json")
        store.write(Catalogue(chrome_path="/c", styles=[_record()]))
        store.write(Catalogue(chrome_path="/d"))

        loaded = store.load()

        assert loaded.chrome_path == "/d"
        assert loaded.styles == []

    def test_write_creates_parent_directory(self, tmp_path) -> None:
        store = CatalogueStore(tmp_path / "config" / "rum.json")
        store.write(Catalogue(chrome_path="/c"))
        assert store.exists()

    def test_enabled_defaults_to_true(self, tmp_path) -> None:
        path = tmp_path / "rum.json"
        path.write_text(json.dumps({
            "chrome_path": "/c",
            "styles": [{"id": 0, "uri": "/a.css", "name": "a", "path": "/c/userContent.css",
                        "style_type": "Local", "domain": None, "settings": {}}],
        }))

        assert CatalogueStore(path).load().styles[0].enabled is True


class TestLoadErrors:
    def test_missing_file(self, tmp_path) -> None:
        store = CatalogueStore(tmp_path / "missing.json")
        assert not store.exists()
        with pytest.raises(ConfigError):
            store.load()

    def test_malformed_json(self, tmp_path) -> None:
        path = tmp_path / "rum.json"
        path.write_text("{not json")
        with pytest.raises(ConfigError):
            CatalogueStore(path).load()

    def test_missing_chrome_path(self, tmp_path) -> None:
        path = tmp_path / "rum.json"
        path.write_text(json.dumps({"styles": []}))
        with pytest.raises(ConfigError):
            CatalogueStore(path).load()

    def test_unknown_style_type(self, tmp_path) -> None:
        path = tmp_path / "rum.json"
        path.write_text(json.dumps({
            "chrome_path": "/c",
            "styles": [{"id": 0, "uri": "x", "name": "x", "path": "/c/userContent.css",
                        "style_type": "Ftp", "settings": {}}],
        }))
        with pytest.raises(ConfigError):
            CatalogueStore(path).load()

    def test_duplicate_ids(self, tmp_path) -> None:
        style = {"id": 1, "uri": "x", "name": "x", "path": "/c/userContent.css",
                 "style_type": "Remote", "settings": {}}
        path = tmp_path / "rum.json"
        path.write_text(json.dumps({"chrome_path": "/c", "styles": [style, style]}))
        with pytest.raises(ConfigError):
            CatalogueStore(path).load()

    def test_negative_id(self, tmp_path) -> None:
        path = tmp_path / "rum.json"
        path.write_text(json.dumps({
            "chrome_path": "/c",
            "styles": [{"id": -1, "uri": "x", "name": "x", "path": "/c/userContent.css",
                        "style_type": "Remote", "settings": {}}],
        }))
        with pytest.raises(ConfigError):
            CatalogueStore(path).load()

    def test_unreadable_path(self, tmp_path) -> None:
        # A directory in place of the file cannot be read
        (tmp_path / "rum.json").mkdir()
        with pytest.raises(ConfigError):
            CatalogueStore(tmp_path / "rum.json").load()

    def test_write_failure(self, tmp_path) -> None:
        (tmp_path / "rum.json").mkdir()
        with pytest.raises(ConfigError):
            CatalogueStore(tmp_path / "rum.json").write(Catalogue(chrome_path="/c"))
