"""Infrastructure: the generated ``site-config.json`` file.

The file holds the site metadata and one entry per configured plugin::

    {
      "siteMetadata": {"title": "My Site"},
      "plugins": [
        {"resolve": "gatsby-source-filesystem",
         "options": {"name": "images", "path": "./src/images/", "__key": "images"}}
      ]
    }

Composite ``plugin:key`` identifiers are written with the key stored as
``__key`` in the options, which is how two instances of the same plugin
are told apart.  Writes are read-modify-write so the plugin installer
and the metadata writer can run in either order.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from create_site.core.models import PluginConfigMap
from create_site.exceptions import CreateSiteError, PluginInstallError, SiteMetadataError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "site-config.json"


def _config_path(root_path: Path) -> Path:
    return Path(root_path) / CONFIG_FILENAME


def read_config(root_path: Path, *, error: type[CreateSiteError] = PluginInstallError) -> dict[str, Any]:
    """Return the current config, or an empty skeleton when absent."""
    path = _config_path(root_path)
    if not path.exists():
        return {"siteMetadata": {}, "plugins": []}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise error(f"Unable to read {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise error(f"{path} must contain a JSON object.")
    data.setdefault("siteMetadata", {})
    data.setdefault("plugins", [])
    return data


def write_config(root_path: Path, data: dict[str, Any], *, error: type[CreateSiteError] = PluginInstallError) -> None:
    path = _config_path(root_path)
    try:
        path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        raise error(f"Unable to write {path}: {exc}") from exc
    logger.debug("Wrote %s", path)


def plugin_entry(identifier: str, options: dict[str, Any] | None) -> dict[str, Any]:
    """Build the config entry for one plugin identifier."""
    name, _, key = identifier.partition(":")
    entry_options = dict(options or {})
    if key:
        entry_options["__key"] = key
    entry: dict[str, Any] = {"resolve": name}
    if entry_options:
        entry["options"] = entry_options
    return entry


def _entry_identity(entry: dict[str, Any]) -> tuple[str, str | None]:
    options = entry.get("options") or {}
    return entry.get("resolve", ""), options.get("__key")


def install_plugins(
    plugins: Sequence[str],
    plugin_config: PluginConfigMap,
    root_path: Path,
    extra_args: Sequence[str],
) -> None:
    """Register *plugins* with their options in the site config.

    Each identifier is written once; an existing entry with the same
    plugin name and key is replaced in place.

    Raises
    ------
    PluginInstallError
        When the config file cannot be read or written.
    """
    if extra_args:
        logger.debug("Ignoring extra plugin arguments: %s", " ".join(extra_args))

    data = read_config(root_path)
    entries: list[dict[str, Any]] = list(data["plugins"])

    for identifier in dict.fromkeys(plugins):
        entry = plugin_entry(identifier, plugin_config.get(identifier))
        identity = _entry_identity(entry)
        for index, existing in enumerate(entries):
            if isinstance(existing, dict) and _entry_identity(existing) == identity:
                entries[index] = entry
                break
        else:
            entries.append(entry)
        logger.info("Configured plugin %s", identifier)

    data["plugins"] = entries
    write_config(root_path, data)


def set_site_metadata(root_path: Path, key: str, value: Any) -> None:
    """Set ``siteMetadata[key] = value`` in the site config.

    Raises
    ------
    SiteMetadataError
        When the config file cannot be read or written.
    """
    data = read_config(root_path, error=SiteMetadataError)
    if not isinstance(data["siteMetadata"], dict):
        raise SiteMetadataError(f"siteMetadata in {_config_path(root_path)} must be an object.")
    data["siteMetadata"][key] = value
    write_config(root_path, data, error=SiteMetadataError)
