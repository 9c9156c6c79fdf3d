"""Tests for the selection aggregator (core/aggregator.py).

Uses the small catalogs from ``conftest.py`` so every expectation can
be read off the fixture directly.
"""

from __future__ import annotations

import pytest

from create_site.core.aggregator import aggregate, installable_packages, plugin_name
from create_site.core.catalog import parse_catalog
from create_site.core.models import AggregationResult, Catalogs, Selection


# ---------------------------------------------------------------------------
# Empty / sentinel selections
# ---------------------------------------------------------------------------

class TestEmptySelection:
    def test_nothing_selected(self, catalogs: Catalogs) -> None:
        result = aggregate(Selection(), catalogs)
        assert result == AggregationResult()
        assert result.plugin_config == {}
        assert result.messages == ()

    def test_none_sentinel_is_skipped(self, catalogs: Catalogs) -> None:
        result = aggregate(Selection(cms="none", styling="none"), catalogs)
        assert result.plugins == ()
        assert result.packages == ()
        assert result.messages == ()


# ---------------------------------------------------------------------------
# Single catalogs
# ---------------------------------------------------------------------------

class TestCms:
    def test_key_then_extra_plugins(self, catalogs: Catalogs) -> None:
        result = aggregate(Selection(cms="gatsby-source-wordpress"), catalogs)
        assert result.plugins == (
            "gatsby-source-wordpress",
            "gatsby-plugin-image",
            "gatsby-plugin-sharp",
        )
        assert result.packages == result.plugins
        assert len(result.messages) == 1
        assert "WordPress" in result.messages[0]


class TestStyling:
    def test_key_dependencies_then_plugins(self, catalogs: Catalogs) -> None:
        result = aggregate(Selection(styling="gatsby-plugin-emotion"), catalogs)
        assert result.plugins == ("gatsby-plugin-emotion",)
        assert result.packages == (
            "gatsby-plugin-emotion",
            "@emotion/react",
            "@emotion/styled",
        )
        assert result.plugin_config == {"shared": {"from": "styling"}}
        assert "Emotion" in result.messages[0]


class TestFeatures:
    def test_feature_keys_first_then_flattened_dependencies(self, catalogs: Catalogs) -> None:
        result = aggregate(
            Selection(features=("gatsby-plugin-react-helmet", "gatsby-plugin-image")),
            catalogs,
        )
        assert result.packages == (
            "gatsby-plugin-react-helmet",
            "gatsby-plugin-image",
            "react-helmet",
            "gatsby-plugin-sharp",
            "gatsby-transformer-sharp",
            "gatsby-source-filesystem:images",
        )
        assert result.plugins == (
            "gatsby-plugin-react-helmet",
            "gatsby-plugin-image",
            "gatsby-plugin-sharp",
            "gatsby-transformer-sharp",
            "gatsby-source-filesystem:images",
        )

    def test_single_message_lists_features(self, catalogs: Catalogs) -> None:
        result = aggregate(
            Selection(features=("gatsby-plugin-sitemap", "gatsby-plugin-image")),
            catalogs,
        )
        assert result.messages == ("Install gatsby-plugin-sitemap, gatsby-plugin-image",)

    def test_composite_options_copied(self, catalogs: Catalogs) -> None:
        result = aggregate(Selection(features=("gatsby-plugin-image",)), catalogs)
        assert result.plugin_config == {
            "gatsby-source-filesystem:images": {"name": "images", "path": "./src/images/"},
        }


# ---------------------------------------------------------------------------
# Ordering and merging across catalogs
# ---------------------------------------------------------------------------

class TestFoldOrder:
    def test_cms_before_styling_before_features(self, catalogs: Catalogs) -> None:
        result = aggregate(
            Selection(
                cms="gatsby-source-contentful",
                styling="gatsby-plugin-sass",
                features=("gatsby-plugin-sitemap",),
            ),
            catalogs,
        )
        assert result.plugins == (
            "gatsby-source-contentful",
            "gatsby-plugin-image",
            "gatsby-plugin-sass",
            "gatsby-plugin-sitemap",
        )
        assert result.packages == (
            "gatsby-source-contentful",
            "gatsby-plugin-image",
            "gatsby-plugin-sass",
            "sass",
            "gatsby-plugin-sitemap",
        )
        assert len(result.messages) == 3

    def test_duplicate_plugins_are_preserved(self, catalogs: Catalogs) -> None:
        result = aggregate(
            Selection(cms="gatsby-source-wordpress", features=("gatsby-plugin-image",)),
            catalogs,
        )
        assert result.plugins.count("gatsby-plugin-image") == 2
        assert result.plugins.count("gatsby-plugin-sharp") == 2


class TestConfigMerge:
    def test_later_fragment_replaces_whole_fragment(self, catalogs: Catalogs) -> None:
        result = aggregate(
            Selection(cms="gatsby-source-contentful", features=("gatsby-plugin-sitemap",)),
            catalogs,
        )
        assert result.plugin_config["shared"] == {"x": 2}

    def test_styling_overwrites_cms(self, catalogs: Catalogs) -> None:
        result = aggregate(
            Selection(cms="gatsby-source-contentful", styling="gatsby-plugin-emotion"),
            catalogs,
        )
        assert result.plugin_config == {"shared": {"from": "styling"}}

    def test_feature_selection_order_decides_winner(self) -> None:
        catalogs = Catalogs(
            cms=parse_catalog({}),
            styling=parse_catalog({}),
            features=parse_catalog(
                {
                    "a": {"message": "A", "options": {"p": {"v": "a"}}},
                    "b": {"message": "B", "options": {"p": {"v": "b"}}},
                }
            ),
        )
        assert aggregate(Selection(features=("a", "b")), catalogs).plugin_config == {"p": {"v": "b"}}
        assert aggregate(Selection(features=("b", "a")), catalogs).plugin_config == {"p": {"v": "a"}}

    def test_result_does_not_alias_catalog(self, catalogs: Catalogs) -> None:
        result = aggregate(Selection(cms="gatsby-source-contentful"), catalogs)
        result.plugin_config["shared"]["x"] = 99
        assert catalogs.cms["gatsby-source-contentful"].options["shared"]["x"] == 1


class TestCallerErrors:
    def test_unknown_key_raises_key_error(self, catalogs: Catalogs) -> None:
        with pytest.raises(KeyError):
            aggregate(Selection(cms="gatsby-source-nope"), catalogs)


# ---------------------------------------------------------------------------
# Identifier helpers
# ---------------------------------------------------------------------------

class TestPluginName:
    @pytest.mark.parametrize(
        ("identifier", "expected"),
        [
            ("gatsby-source-filesystem:images", "gatsby-source-filesystem"),
            ("gatsby-plugin-image", "gatsby-plugin-image"),
            ("a:b:c", "a"),
        ],
    )
    def test_strips_suffix(self, identifier: str, expected: str) -> None:
        assert plugin_name(identifier) == expected

    def test_installable_packages(self) -> None:
        assert installable_packages(("x", "y:pages", "y:images")) == ["x", "y", "y"]
