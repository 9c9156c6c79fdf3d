"""CLI application entry point and orchestration for create-site.

This module is the **sole error boundary** for the entire application.
It catches :class:`~create_site.exceptions.CreateSiteError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* Answer resolution lives in ``core``; cloning, installing and git live
  in ``infra``.  :func:`run` only sequences them.
* Every collaborator is injected through :class:`Collaborators` so the
  whole flow can be exercised without a terminal, network or git.
* A declined confirmation or an invalid ``-y`` directory is a normal
  early return, not an error.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from create_site.cli import exit_codes
from create_site.cli.args import parse_args
from create_site.cli.console import configure_logging, console, escape
from create_site.cli.questions import (
    generate_questions,
    language_question,
    selection_questions,
    validate_project_name,
)
from create_site.config import Settings, load_settings
from create_site.core.aggregator import aggregate, installable_packages
from create_site.core.catalog import PluginSchemas, load_catalogs, load_plugin_schemas
from create_site.core.models import Catalogs, Question, Selection
from create_site.core.plugin_options import make_plugin_config_questions
from create_site.core.protocols import (
    GitSetup,
    MetadataWriter,
    PackageManagerResolver,
    PluginInstaller,
    Prompter,
    Reporter,
    StarterInitializer,
)
from create_site.exceptions import CreateSiteError
from create_site.infra.git import git_setup
from create_site.infra.package_manager import get_package_manager, run_command
from create_site.infra.site_config import install_plugins, set_site_metadata
from create_site.infra.starter import init_starter
from create_site.utils.naming import make_npm_safe
from create_site.version import __version__

DEFAULT_SITE_NAME = "My Site"
DOCS_URL = "https://www.gatsbyjs.com/docs/gatsby-cli/"


@dataclass(frozen=True, slots=True)
class Collaborators:
    """Side-effecting operations invoked with the resolved answers."""

    init_starter: StarterInitializer = field(default=init_starter)
    install_plugins: PluginInstaller = field(default=install_plugins)
    set_site_metadata: MetadataWriter = field(default=set_site_metadata)
    git_setup: GitSetup = field(default=git_setup)
    get_package_manager: PackageManagerResolver = field(default=get_package_manager)


# ---------------------------------------------------------------------------
# Questionnaire
# ---------------------------------------------------------------------------

def _remaining_questions(catalogs: Catalogs, *, ts: bool) -> list[Question]:
    """Questions still asked under ``-y``: the language only without ``-tsc``."""
    questions = [] if ts else [language_question()]
    return [*questions, *selection_questions(catalogs)]


def _selection_from(answers: dict) -> Selection:
    features = answers.get("features") or ()
    return Selection(
        cms=answers.get("cms"),
        styling=answers.get("styling"),
        features=tuple(dict.fromkeys(features)),
    )


def _print_welcome(reporter: Reporter, *, interactive: bool) -> None:
    reporter.info(f"[grey50]create-site version {__version__}[/grey50]")
    reporter.info("\n\n[bold underline bright_blue]Welcome to create-site![/]\n\n")
    if interactive:
        reporter.info(
            f"This command will generate a new site for you in [bold]{escape(str(Path.cwd()))}[/bold] "
            "with the setup you select. [bold white]Let's answer some questions:[/]\n"
        )


def _print_next_steps(reporter: Reporter, site_name: str, project: str, full_path: Path, runner: str) -> None:
    reporter.info(
        f"Your new site [bold]{escape(site_name)}[/bold] has been successfully created\n"
        f"at [bold]{escape(str(full_path))}[/bold]."
    )
    reporter.info(f"Start by going to the directory with\n\n  [magenta]cd {escape(project)}[/magenta]\n")
    reporter.info(f"Start the local development server with\n\n  [magenta]{runner} develop[/magenta]\n")
    reporter.info(f"See all commands at\n\n  [bright_blue]{DOCS_URL}[/bright_blue]\n")


# ---------------------------------------------------------------------------
# Orchestration
# ---------------------------------------------------------------------------

def run(
    argv: Sequence[str],
    *,
    prompter: Prompter,
    reporter: Reporter,
    collaborators: Collaborators | None = None,
    settings: Settings | None = None,
    catalogs: Catalogs | None = None,
    schemas: PluginSchemas | None = None,
) -> int:
    """Drive one end-to-end site creation.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when the site was created or the run
        ended early on purpose (invalid ``-y`` directory, declined
        confirmation).

    Raises
    ------
    CreateSiteError
        Propagated unchanged from prompts and collaborators.
    """
    collaborators = collaborators or Collaborators()
    settings = settings or load_settings()
    catalogs = catalogs or load_catalogs()
    schemas = schemas if schemas is not None else load_plugin_schemas()

    parsed = parse_args(argv, reporter)
    flags = parsed.flags

    _print_welcome(reporter, interactive=not flags.yes)

    if not flags.yes:
        site_name = prompter.prompt(
            [Question(
                type="text",
                name="name",
                message="What would you like to call your site?",
                default=DEFAULT_SITE_NAME,
            )]
        )["name"]
        answers = prompter.prompt(generate_questions(make_npm_safe(site_name), catalogs, ts=flags.ts))
    else:
        warning = validate_project_name(parsed.site_directory)
        if isinstance(warning, str):
            reporter.warn(warning)
            return exit_codes.SUCCESS
        site_name = parsed.site_directory
        answers = {
            "project": parsed.site_directory,
            **prompter.prompt(_remaining_questions(catalogs, ts=flags.ts)),
        }

    project = str(answers["project"]).strip()
    language = answers.get("language") or ("ts" if flags.ts else "js")

    result = aggregate(_selection_from(answers), catalogs)
    plugin_config = result.plugin_config

    config_questions = make_plugin_config_questions(result.plugins, schemas)
    if config_questions:
        reporter.info(
            "\nGreat! A few of the selections you made need to be configured. "
            "Please fill in the options for each plugin now:\n"
        )
        plugin_config = {**plugin_config, **prompter.prompt(config_questions)}

    if not flags.yes:
        plan = [f"Create a new site in the folder [magenta]{escape(project)}[/magenta]", *result.messages]
        reporter.info("\n[bold]Thanks! Here's what we'll now do:[/bold]\n")
        reporter.info("\n".join(f"    {line}" for line in plan) + "\n")

        confirmed = prompter.prompt(
            [Question(type="confirm", name="confirm", message="Shall we do this?", default=True)]
        )["confirm"]
        if not confirmed:
            reporter.info("OK, bye!")
            return exit_codes.SUCCESS

    package_manager = settings.package_manager or collaborators.get_package_manager()

    collaborators.init_starter(
        settings.starter_for(language),
        project,
        installable_packages(result.packages),
        site_name,
        package_manager=package_manager,
    )
    reporter.success(f"Created site in [green]{escape(project)}[/green]")

    full_path = Path(project).resolve()

    if result.plugins:
        reporter.info("Setting-up plugins...")
        collaborators.install_plugins(list(result.plugins), plugin_config, full_path, [])
    collaborators.set_site_metadata(full_path, "title", site_name)

    collaborators.git_setup(project)

    _print_next_steps(reporter, site_name, project, full_path, run_command(package_manager))
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the create-site CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    from create_site.cli.prompter import QuestionaryPrompter
    from create_site.cli.reporter import reporter

    settings = load_settings()
    configure_logging(settings.log_level)

    return run(
        sys.argv[1:] if argv is None else argv,
        prompter=QuestionaryPrompter(),
        reporter=reporter,
        settings=settings,
    )


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except CreateSiteError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
