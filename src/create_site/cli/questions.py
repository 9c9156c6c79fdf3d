"""The setup questionnaire and project-folder validation."""

from __future__ import annotations

import re
import sys
from collections.abc import Mapping
from pathlib import Path

from create_site.config import LANGUAGES
from create_site.core.models import NONE_KEY, CatalogEntry, Catalogs, Choice, Question

INVALID_FILENAMES = re.compile(r'[<>:"/\\|?*\u0000-\u001F]')
INVALID_WINDOWS = re.compile(r"^(con|prn|aux|nul|com\d|lpt\d)$", re.IGNORECASE)

SINGLE_CHOICE_HINT = "(Single choice) Arrow keys to move, enter to confirm"
MULTIPLE_CHOICE_HINT = "(Multiple choice) Use arrow keys to move, spacebar to select, and confirm with enter"


def validate_project_name(value: str) -> bool | str:
    """Return ``True`` when *value* is usable as a new folder, else a message."""
    if not value:
        return (
            "You have not provided a directory name for your site. "
            "Please do so when running with the 'y' flag."
        )
    value = value.strip()
    if INVALID_FILENAMES.search(value):
        return (
            f'The destination "{value}" is not a valid filename. '
            "Please try again, avoiding special characters."
        )
    if sys.platform == "win32" and INVALID_WINDOWS.match(value):
        return f'The destination "{value}" is not a valid Windows filename. Please try another name'
    if Path(value).resolve().exists():
        return f'The destination "{value}" already exists. Please choose a different name'
    return True


def _catalog_choices(catalog: Mapping[str, CatalogEntry]) -> tuple[Choice, ...]:
    return tuple(Choice(name=key, message=entry.message) for key, entry in catalog.items())


def project_question(initial_folder: str) -> Question:
    return Question(
        type="text",
        name="project",
        message="What would you like to name the folder where your site will be created?",
        default=initial_folder,
        validate=validate_project_name,
    )


def language_question(*, ts: bool = False) -> Question:
    return Question(
        type="select",
        name="language",
        message="Will you be using JavaScript or TypeScript?",
        hint=SINGLE_CHOICE_HINT,
        choices=tuple(Choice(name=key, message=label) for key, label in LANGUAGES.items()),
        default="ts" if ts else "js",
    )


def selection_questions(catalogs: Catalogs) -> list[Question]:
    """CMS, styling and feature questions, in that order."""
    return [
        Question(
            type="select",
            name="cms",
            message="Will you be using a CMS?",
            hint=SINGLE_CHOICE_HINT,
            choices=(
                *_catalog_choices(catalogs.cms),
                Choice(name=NONE_KEY, message="No (or I'll add it later)"),
            ),
            default=NONE_KEY,
        ),
        Question(
            type="select",
            name="styling",
            message="Would you like to install a styling system?",
            hint=SINGLE_CHOICE_HINT,
            choices=(
                *_catalog_choices(catalogs.styling),
                Choice(name=NONE_KEY, message="No (or I'll add it later)"),
            ),
            default=NONE_KEY,
        ),
        Question(
            type="multiselect",
            name="features",
            message="Would you like to install additional features with other plugins?",
            hint=MULTIPLE_CHOICE_HINT,
            choices=_catalog_choices(catalogs.features),
        ),
    ]


def generate_questions(initial_folder: str, catalogs: Catalogs, *, ts: bool = False) -> list[Question]:
    """The full questionnaire shown when running interactively."""
    return [
        project_question(initial_folder),
        language_question(ts=ts),
        *selection_questions(catalogs),
    ]
