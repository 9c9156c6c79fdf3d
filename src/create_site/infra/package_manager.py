"""Infrastructure: package manager detection and command construction.

Rules
-----
* Detection reads the environment only, no subprocess.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence

from create_site.config import PACKAGE_MANAGERS


def get_package_manager(environ: Mapping[str, str] | None = None) -> str:
    """Return ``"yarn"`` or ``"npm"``.

    An explicit ``CREATE_SITE_PACKAGE_MANAGER`` wins; otherwise the
    user agent set by ``npm init`` / ``yarn create`` decides.
    """
    env = os.environ if environ is None else environ

    forced = (env.get("CREATE_SITE_PACKAGE_MANAGER") or "").strip().lower()
    if forced in PACKAGE_MANAGERS:
        return forced

    if (env.get("npm_config_user_agent") or "").startswith("yarn"):
        return "yarn"
    return "npm"


def install_command(package_manager: str) -> list[str]:
    """Command that installs the dependencies already in ``package.json``."""
    if package_manager == "yarn":
        return ["yarn", "--silent"]
    return ["npm", "install", "--loglevel", "error", "--no-audit", "--no-fund"]


def add_command(package_manager: str, packages: Sequence[str]) -> list[str]:
    """Command that adds *packages* as dependencies."""
    if package_manager == "yarn":
        return ["yarn", "add", "--silent", *packages]
    return ["npm", "install", "--loglevel", "error", "--no-audit", "--no-fund", *packages]


def run_command(package_manager: str) -> str:
    """Prefix used to run package scripts (``npm run develop``, ``yarn develop``)."""
    return "yarn" if package_manager == "yarn" else "npm run"
