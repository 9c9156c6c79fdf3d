"""Runtime settings read from the environment.

Every knob has a sensible default so the CLI works with no
configuration at all.  ``load_settings`` accepts an explicit mapping
so tests never touch the real process environment.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_STARTERS: dict[str, str] = {
    "js": "https://github.com/gatsbyjs/gatsby-starter-minimal.git",
    "ts": "https://github.com/gatsbyjs/gatsby-starter-minimal-ts.git",
}

LANGUAGES: dict[str, str] = {
    "js": "JavaScript",
    "ts": "TypeScript",
}

PACKAGE_MANAGERS: tuple[str, ...] = ("npm", "yarn")


@dataclass(frozen=True, slots=True)
class Settings:
    """Resolved configuration for one invocation."""

    starters: Mapping[str, str]
    """Language key → starter repository URL."""

    package_manager: str | None = None
    """Forced package manager, or ``None`` to auto-detect."""

    log_level: str = "WARNING"

    def starter_for(self, language: str | None) -> str:
        """Return the starter URL for *language*, falling back to JavaScript."""
        return self.starters.get(language or "js", self.starters["js"])


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build :class:`Settings` from ``CREATE_SITE_*`` environment variables."""
    env = os.environ if environ is None else environ

    starters = {
        "js": env.get("CREATE_SITE_JS_STARTER") or DEFAULT_STARTERS["js"],
        "ts": env.get("CREATE_SITE_TS_STARTER") or DEFAULT_STARTERS["ts"],
    }

    package_manager = (env.get("CREATE_SITE_PACKAGE_MANAGER") or "").strip().lower()
    if package_manager not in PACKAGE_MANAGERS:
        package_manager = ""

    log_level = (env.get("CREATE_SITE_LOG_LEVEL") or "WARNING").strip().upper()

    return Settings(
        starters=starters,
        package_manager=package_manager or None,
        log_level=log_level,
    )
