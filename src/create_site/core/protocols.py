"""Protocols (interfaces) consumed by the core and orchestration layers.

These define the contracts that reporters, prompt renderers and
infrastructure adapters must satisfy.  Consumers depend ONLY on these
protocols — never on concrete implementations — so tests can swap in
plain mocks.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, Protocol

from create_site.core.models import PluginConfigMap, Question


class Reporter(Protocol):
    """Sink for every user-facing line of output."""

    def info(self, text: str) -> None:
        ...  # pragma: no cover

    def warn(self, text: str) -> None:
        ...  # pragma: no cover

    def success(self, text: str) -> None:
        ...  # pragma: no cover


class Prompter(Protocol):
    """Renders :class:`Question` descriptors and collects the answers."""

    def prompt(self, questions: Sequence[Question]) -> dict[str, Any]:
        """Ask every question in order and return answers keyed by name.

        Raises
        ------
        PromptAbortedError
            When the user dismisses a prompt without answering.
        """
        ...  # pragma: no cover


class StarterInitializer(Protocol):
    """Clones a starter and installs its packages."""

    def __call__(
        self,
        starter_url: str,
        root_path: str,
        packages: Sequence[str],
        site_name: str,
        *,
        package_manager: str | None = None,
    ) -> None:
        ...  # pragma: no cover


class PluginInstaller(Protocol):
    """Registers plugins and their options in the generated config file."""

    def __call__(
        self,
        plugins: Sequence[str],
        plugin_config: PluginConfigMap,
        root_path: Path,
        extra_args: Sequence[str],
    ) -> None:
        ...  # pragma: no cover


class MetadataWriter(Protocol):
    """Writes one ``siteMetadata`` key into the generated config file."""

    def __call__(self, root_path: Path, key: str, value: Any) -> None:
        ...  # pragma: no cover


class GitSetup(Protocol):
    """Creates the initial git repository and commit."""

    def __call__(self, root_path: str) -> None:
        ...  # pragma: no cover


class PackageManagerResolver(Protocol):
    """Returns ``"npm"`` or ``"yarn"``."""

    def __call__(self, environ: Mapping[str, str] | None = None) -> str:
        ...  # pragma: no cover
