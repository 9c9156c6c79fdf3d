"""Catalog loader — builds the read-only CMS, styling and feature tables.

The JSON files shipped in :mod:`create_site.data` are parsed once into
:class:`~create_site.core.models.CatalogEntry` values and wrapped in
:class:`types.MappingProxyType` so nothing downstream can mutate them.
Callers construct the tables at startup and pass them explicitly.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from importlib import resources
from types import MappingProxyType
from typing import Any

from create_site.core.models import NONE_KEY, CatalogEntry, Catalogs
from create_site.exceptions import CatalogError

_DATA_PACKAGE = "create_site.data"

PluginSchemas = Mapping[str, Mapping[str, Mapping[str, Any]]]
"""Plugin name → field name → field descriptor."""


def _read_json(filename: str) -> dict[str, Any]:
    """Read a bundled JSON object, mapping failures to :class:`CatalogError`."""
    try:
        text = resources.files(_DATA_PACKAGE).joinpath(filename).read_text(encoding="utf-8")
        raw = json.loads(text)
    except (OSError, json.JSONDecodeError) as exc:
        raise CatalogError(f"Unable to read bundled catalog {filename}: {exc}") from exc
    if not isinstance(raw, dict):
        raise CatalogError(f"Catalog {filename} must contain a JSON object.")
    return raw


def parse_entry(key: str, raw: Mapping[str, Any]) -> CatalogEntry:
    """Convert one raw catalog dict into a :class:`CatalogEntry`."""
    message = raw.get("message")
    if not isinstance(message, str):
        raise CatalogError(f"Catalog entry {key!r} is missing a message.")
    options = {
        plugin: MappingProxyType(dict(fragment))
        for plugin, fragment in (raw.get("options") or {}).items()
    }
    return CatalogEntry(
        message=message,
        dependencies=tuple(raw.get("dependencies") or ()),
        plugins=tuple(raw.get("plugins") or ()),
        options=MappingProxyType(options),
    )


def parse_catalog(raw: Mapping[str, Any]) -> Mapping[str, CatalogEntry]:
    """Build one read-only table.  The reserved ``"none"`` key is rejected."""
    if NONE_KEY in raw:
        raise CatalogError(f"{NONE_KEY!r} is reserved and cannot be a catalog key.")
    return MappingProxyType({key: parse_entry(key, entry) for key, entry in raw.items()})


def load_catalogs() -> Catalogs:
    """Load the bundled CMS, styling and feature catalogs."""
    return Catalogs(
        cms=parse_catalog(_read_json("cmses.json")),
        styling=parse_catalog(_read_json("styles.json")),
        features=parse_catalog(_read_json("features.json")),
    )


def load_plugin_schemas() -> PluginSchemas:
    """Load the option schemas used to build per-plugin option forms."""
    raw = _read_json("plugin_schemas.json")
    return MappingProxyType(
        {
            plugin: MappingProxyType({name: MappingProxyType(dict(spec)) for name, spec in fields.items()})
            for plugin, fields in raw.items()
        }
    )
