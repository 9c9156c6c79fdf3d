"""Domain models for create-site.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O, zero dependencies on
external packages, and must remain pure across the entire lifecycle.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

PluginConfigMap = dict[str, dict[str, Any]]
"""Plugin identifier → configuration fragment."""

NONE_KEY: str = "none"
"""Reserved CMS / styling key meaning "no selection"."""


# ---------------------------------------------------------------------------
# Command-line arguments
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Flags:
    """Boolean switches recognised on the command line."""

    yes: bool = False
    """``-y`` — skip interactive prompts where possible."""

    ts: bool = False
    """``-tsc`` — prefer the TypeScript starter."""


@dataclass(frozen=True, slots=True)
class ParsedArguments:
    """Result of parsing the raw command-line tokens."""

    flags: Flags = field(default_factory=Flags)
    site_directory: str = ""
    """Target folder, or ``""`` when no positional token was given."""


# ---------------------------------------------------------------------------
# Catalogs
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CatalogEntry:
    """Descriptor for one selectable CMS, styling system or feature.

    Items of :attr:`plugins` are either a plugin name or a
    ``"plugin:key"`` composite, which allows the same plugin to be
    configured more than once (e.g. two filesystem sources).
    """

    message: str
    """Label displayed in the menu."""

    dependencies: tuple[str, ...] = ()
    """Extra packages to install."""

    plugins: tuple[str, ...] = ()
    """Extra plugins to install and configure."""

    options: Mapping[str, Mapping[str, Any]] = field(
        default_factory=lambda: MappingProxyType({}),
    )
    """Default configuration keyed by plugin identifier."""


@dataclass(frozen=True, slots=True)
class Catalogs:
    """The three read-only lookup tables consulted during aggregation."""

    cms: Mapping[str, CatalogEntry]
    styling: Mapping[str, CatalogEntry]
    features: Mapping[str, CatalogEntry]


# ---------------------------------------------------------------------------
# Selection / aggregation
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Selection:
    """Keys chosen by the user for one run."""

    cms: str | None = None
    styling: str | None = None
    features: tuple[str, ...] = ()
    """Unique feature keys in selection order."""


@dataclass(frozen=True, slots=True)
class AggregationResult:
    """Install and configure instructions produced from a :class:`Selection`."""

    plugins: tuple[str, ...] = ()
    """Plugin identifiers to configure.  May contain duplicates."""

    packages: tuple[str, ...] = ()
    """Package identifiers to install, ``:key`` suffixes not yet stripped."""

    plugin_config: PluginConfigMap = field(default_factory=dict)

    messages: tuple[str, ...] = ()
    """Human-readable plan lines shown before confirmation."""


# ---------------------------------------------------------------------------
# Questions
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Choice:
    """One option of a ``select`` or ``multiselect`` question."""

    name: str
    """Value returned when chosen."""

    message: str
    """Label displayed to the user."""


@dataclass(frozen=True, slots=True)
class FormField:
    """One input of a ``form`` question."""

    name: str
    message: str
    required: bool = False
    default: Any = None


@dataclass(frozen=True, slots=True)
class Question:
    """Renderer-agnostic description of a single prompt.

    The prompter collaborator consumes these and returns answers keyed
    by :attr:`name`.  ``form`` questions answer with a mapping of
    :attr:`fields` names to values.
    """

    type: str
    """One of ``text``, ``select``, ``multiselect``, ``confirm``, ``form``."""

    name: str
    message: str
    default: Any = None
    choices: tuple[Choice, ...] = ()
    fields: tuple[FormField, ...] = ()
    hint: str | None = None
    validate: Callable[[str], bool | str] | None = None
