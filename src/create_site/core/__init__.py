"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No network I/O and no filesystem writes.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from create_site.core.aggregator import aggregate, installable_packages, plugin_name
from create_site.core.catalog import load_catalogs, load_plugin_schemas
from create_site.core.models import (
    AggregationResult,
    CatalogEntry,
    Catalogs,
    Choice,
    Flags,
    FormField,
    ParsedArguments,
    Question,
    Selection,
)
from create_site.core.plugin_options import make_plugin_config_questions

__all__: list[str] = [
    "AggregationResult",
    "CatalogEntry",
    "Catalogs",
    "Choice",
    "Flags",
    "FormField",
    "ParsedArguments",
    "Question",
    "Selection",
    "aggregate",
    "installable_packages",
    "load_catalogs",
    "load_plugin_schemas",
    "make_plugin_config_questions",
    "plugin_name",
]
