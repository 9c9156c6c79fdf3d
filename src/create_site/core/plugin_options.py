"""Per-plugin option forms.

Some plugins cannot work without a few settings (API tokens, endpoint
URLs).  For every selected plugin whose schema lists at least one
required field, a ``form`` question is produced; the answers are later
merged on top of the aggregated plugin configuration.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from create_site.core.catalog import PluginSchemas
from create_site.core.models import FormField, Question


def _field_message(name: str, spec: Mapping[str, Any]) -> str:
    description = spec.get("description")
    return f"{name}: {description}" if description else name


def _schema_fields(schema: Mapping[str, Mapping[str, Any]]) -> tuple[FormField, ...]:
    """Required fields first, then optional ones, each in schema order."""
    required = [name for name, spec in schema.items() if spec.get("required")]
    optional = [name for name, spec in schema.items() if not spec.get("required")]
    return tuple(
        FormField(
            name=name,
            message=_field_message(name, schema[name]),
            required=bool(schema[name].get("required")),
            default=schema[name].get("default"),
        )
        for name in (*required, *optional)
    )


def make_plugin_config_questions(
    plugins: Iterable[str],
    schemas: PluginSchemas,
) -> list[Question]:
    """Build one ``form`` question per plugin that needs configuring.

    Identifiers are visited once each, in first-seen order.  Plugins
    without a schema, or whose schema has no required field, are
    skipped.
    """
    questions: list[Question] = []
    seen: set[str] = set()
    for identifier in plugins:
        if identifier in seen:
            continue
        seen.add(identifier)
        schema = schemas.get(identifier)
        if not schema or not any(spec.get("required") for spec in schema.values()):
            continue
        questions.append(
            Question(
                type="form",
                name=identifier,
                message=f"Configure the {identifier} plugin.",
                fields=_schema_fields(schema),
                hint="Fields marked with * are required",
            )
        )
    return questions


def clean_form_answer(fields: Iterable[FormField], answer: Mapping[str, Any]) -> dict[str, Any]:
    """Drop empty optional values from a submitted form."""
    cleaned: dict[str, Any] = {}
    for form_field in fields:
        value = answer.get(form_field.name)
        if value in (None, "") and not form_field.required:
            continue
        cleaned[form_field.name] = value
    return cleaned
