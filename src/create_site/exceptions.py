"""Custom exception hierarchy for create-site.

All exceptions that cross layer boundaries must inherit from
:class:`CreateSiteError`.  Raw ``subprocess`` and ``OSError`` failures
must NEVER propagate beyond the infrastructure layer — they are caught
and re-raised as a typed subclass defined here.

Hierarchy
---------
CreateSiteError
├── CatalogError
├── PromptAbortedError
├── StarterInitError
├── PluginInstallError
├── SiteMetadataError
├── GitSetupError
└── EnvironmentError
"""

from __future__ import annotations


class CreateSiteError(Exception):
    """Base exception for all create-site errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Static data -----------------------------------------------------------

class CatalogError(CreateSiteError):
    """Raised when bundled catalog data cannot be read or is malformed."""


# --- Interaction -----------------------------------------------------------

class PromptAbortedError(CreateSiteError):
    """Raised when the user dismisses a prompt without answering."""


# --- Project bootstrap -----------------------------------------------------

class StarterInitError(CreateSiteError):
    """Raised when the starter cannot be cloned or its packages installed."""


class PluginInstallError(CreateSiteError):
    """Raised when plugin configuration cannot be written."""


class SiteMetadataError(CreateSiteError):
    """Raised when site metadata cannot be written."""


class GitSetupError(CreateSiteError):
    """Raised when the initial git repository cannot be created."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(CreateSiteError):
    """Raised when a required runtime dependency is not available."""


def append_git_install_suggestion(hint: str) -> str:
    """Append git installation guidance to an existing hint text.

    The suggestion is appended only once and preserves the original
    hint content verbatim.
    """
    marker = "Make sure git is installed:"
    if marker in hint:
        return hint
    return "\n".join(
        (
            hint,
            marker,
            "    https://git-scm.com/downloads",
        )
    )
