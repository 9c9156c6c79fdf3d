"""Interactive prompt rendering for the CLI layer.

This module is responsible for:

* Mapping renderer-agnostic :class:`~create_site.core.models.Question`
  descriptors onto questionary prompts.
* Returning the answers keyed by question name.

All terminal interaction lives here; the orchestrator only ever sees
plain answer dicts.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from create_site.core.models import FormField, Question
from create_site.core.plugin_options import clean_form_answer
from create_site.exceptions import EnvironmentError, PromptAbortedError


def _import_questionary() -> Any:
    """Import questionary lazily for interactive prompts."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def _require_value(value: str) -> bool | str:
    return True if value.strip() else "This field is required."


def _field_label(form_field: FormField) -> str:
    return f"{form_field.message} *" if form_field.required else form_field.message


class QuestionaryPrompter:
    """:class:`~create_site.core.protocols.Prompter` backed by questionary."""

    def prompt(self, questions: Sequence[Question]) -> dict[str, Any]:
        """Ask every question in order.

        Raises
        ------
        PromptAbortedError
            If the user cancels a prompt (Ctrl+C / Esc → ``None``).
        """
        questionary = _import_questionary()
        answers: dict[str, Any] = {}
        for question in questions:
            answers[question.name] = self._ask(questionary, question)
        return answers

    # ------------------------------------------------------------------
    # Per-type rendering
    # ------------------------------------------------------------------

    def _ask(self, questionary: Any, question: Question) -> Any:
        if question.type == "form":
            return self._ask_form(questionary, question)
        return self._checked(self._build(questionary, question).ask())

    @staticmethod
    def _checked(answer: Any) -> Any:
        # questionary returns None on Ctrl+C / Esc.
        if answer is None:
            raise PromptAbortedError(
                "Prompt cancelled.",
                hint="Run the command again to start over.",
            )
        return answer

    @staticmethod
    def _build(questionary: Any, question: Question) -> Any:
        if question.type == "text":
            return questionary.text(
                question.message,
                default="" if question.default is None else str(question.default),
                validate=question.validate,
            )
        if question.type == "confirm":
            return questionary.confirm(question.message, default=bool(question.default))

        choices = [
            questionary.Choice(title=choice.message, value=choice.name)
            for choice in question.choices
        ]
        if question.type == "select":
            return questionary.select(
                question.message,
                choices=choices,
                default=question.default,
                instruction=question.hint,
            )
        if question.type == "multiselect":
            return questionary.checkbox(
                question.message,
                choices=choices,
                instruction=question.hint,
            )
        raise ValueError(f"Unsupported question type: {question.type!r}")

    def _ask_form(self, questionary: Any, question: Question) -> dict[str, Any]:
        questionary.print(question.message, style="bold")
        raw: dict[str, Any] = {}
        for form_field in question.fields:
            raw[form_field.name] = self._checked(
                questionary.text(
                    _field_label(form_field),
                    default="" if form_field.default is None else str(form_field.default),
                    validate=_require_value if form_field.required else None,
                ).ask()
            )
        return clean_form_answer(question.fields, raw)
