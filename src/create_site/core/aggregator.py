"""Turns a :class:`Selection` into install and configure instructions.

The fold always runs CMS, then styling, then features in selection
order.  Plugin configuration is merged shallowly: when two entries
configure the same plugin identifier the later fragment replaces the
earlier one entirely.

Duplicate plugin identifiers are kept as-is (e.g. a CMS and a feature
that both pull in ``gatsby-plugin-image``); consumers that need one
entry per identifier de-duplicate themselves.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from create_site.core.models import (
    NONE_KEY,
    AggregationResult,
    CatalogEntry,
    Catalogs,
    PluginConfigMap,
    Selection,
)


def _merge_options(
    config: PluginConfigMap,
    options: Mapping[str, Mapping[str, Any]],
) -> PluginConfigMap:
    """Return *config* with *options* laid on top (whole-fragment replace)."""
    return {**config, **{plugin: dict(fragment) for plugin, fragment in options.items()}}


def _is_selected(key: str | None) -> bool:
    return bool(key) and key != NONE_KEY


def aggregate(selection: Selection, catalogs: Catalogs) -> AggregationResult:
    """Resolve *selection* against *catalogs*.

    Raises
    ------
    KeyError
        If a selected key is absent from its catalog.
    """
    plugins: list[str] = []
    packages: list[str] = []
    plugin_config: PluginConfigMap = {}
    messages: list[str] = []

    def fold_single(key: str, entry: CatalogEntry) -> None:
        nonlocal plugin_config
        plugins.extend((key, *entry.plugins))
        packages.extend((key, *entry.dependencies, *entry.plugins))
        plugin_config = _merge_options(plugin_config, entry.options)

    if _is_selected(selection.cms):
        entry = catalogs.cms[selection.cms]
        messages.append(f"Install and configure the plugin for {entry.message}")
        fold_single(selection.cms, entry)

    if _is_selected(selection.styling):
        entry = catalogs.styling[selection.styling]
        messages.append(f"Get you set up to use {entry.message} for styling your site")
        fold_single(selection.styling, entry)

    if selection.features:
        messages.append(f"Install {', '.join(selection.features)}")
        plugins.extend(selection.features)
        feature_dependencies: list[str] = []
        for key in selection.features:
            entry = catalogs.features[key]
            plugins.extend(entry.plugins)
            feature_dependencies.extend((*entry.dependencies, *entry.plugins))
        packages.extend((*selection.features, *feature_dependencies))
        for key in selection.features:
            plugin_config = _merge_options(plugin_config, catalogs.features[key].options)

    return AggregationResult(
        plugins=tuple(plugins),
        packages=tuple(packages),
        plugin_config=plugin_config,
        messages=tuple(messages),
    )


def plugin_name(identifier: str) -> str:
    """Strip the ``:key`` suffix from a plugin identifier."""
    return identifier.split(":", 1)[0]


def installable_packages(packages: tuple[str, ...]) -> list[str]:
    """Package names as handed to the package manager (suffixes stripped)."""
    return [plugin_name(package) for package in packages]
