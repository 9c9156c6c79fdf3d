"""Tests for the catalog loader (core/catalog.py)."""

from __future__ import annotations

import pytest

from create_site.core.catalog import load_catalogs, load_plugin_schemas, parse_catalog, parse_entry
from create_site.core.models import CatalogEntry
from create_site.exceptions import CatalogError


class TestParseEntry:
    def test_defaults_are_empty(self) -> None:
        entry = parse_entry("gatsby-plugin-sitemap", {"message": "Sitemap"})
        assert entry == CatalogEntry(message="Sitemap")
        assert entry.dependencies == ()
        assert entry.plugins == ()
        assert dict(entry.options) == {}

    def test_lists_become_tuples(self) -> None:
        entry = parse_entry("x", {"message": "X", "dependencies": ["a", "b"], "plugins": ["c:k"]})
        assert entry.dependencies == ("a", "b")
        assert entry.plugins == ("c:k",)

    def test_missing_message_rejected(self) -> None:
        with pytest.raises(CatalogError, match="missing a message"):
            parse_entry("x", {"plugins": []})


class TestParseCatalog:
    def test_is_read_only(self) -> None:
        catalog = parse_catalog({"x": {"message": "X", "options": {"p": {"a": 1}}}})
        with pytest.raises(TypeError):
            catalog["y"] = CatalogEntry(message="Y")  # type: ignore[index]
        with pytest.raises(TypeError):
            catalog["x"].options["p"]["a"] = 2  # type: ignore[index]

    def test_none_key_is_reserved(self) -> None:
        with pytest.raises(CatalogError, match="reserved"):
            parse_catalog({"none": {"message": "Nothing"}})

    def test_preserves_insertion_order(self) -> None:
        catalog = parse_catalog({"b": {"message": "B"}, "a": {"message": "A"}})
        assert list(catalog) == ["b", "a"]


class TestBundledData:
    def test_catalogs_load(self) -> None:
        catalogs = load_catalogs()
        assert "gatsby-source-contentful" in catalogs.cms
        assert "gatsby-plugin-sass" in catalogs.styling
        assert "gatsby-plugin-image" in catalogs.features

    def test_composite_options_match_declared_plugins(self) -> None:
        catalogs = load_catalogs()
        for catalog in (catalogs.cms, catalogs.styling, catalogs.features):
            for key, entry in catalog.items():
                for identifier in entry.options:
                    assert identifier == key or identifier in entry.plugins

    def test_schemas_load(self) -> None:
        schemas = load_plugin_schemas()
        assert schemas["gatsby-source-contentful"]["spaceId"]["required"] is True
