"""Infrastructure: clone a starter and install its packages.

This module is the **only** place that clones starters or invokes the
package manager.  Raw ``subprocess`` and ``OSError`` failures are
caught here and re-raised as
:class:`~create_site.exceptions.StarterInitError`.
"""

from __future__ import annotations

import json
import logging
import shutil
import subprocess
from collections.abc import Sequence
from pathlib import Path

from create_site.exceptions import StarterInitError, append_git_install_suggestion
from create_site.infra.package_manager import add_command, get_package_manager, install_command
from create_site.utils.naming import make_npm_safe

logger = logging.getLogger(__name__)


def _run(command: list[str], cwd: Path | None = None) -> None:
    logger.debug("Running %s (cwd=%s)", " ".join(command), cwd)
    subprocess.run(command, cwd=cwd, check=True, capture_output=True, text=True)


def clone(starter_url: str, root_path: Path) -> None:
    """Shallow-clone *starter_url* into *root_path* and drop its history."""
    try:
        _run(["git", "clone", starter_url, str(root_path), "--recursive", "--depth=1", "--quiet"])
    except FileNotFoundError as exc:
        raise StarterInitError(
            "git is not installed or not on PATH.",
            hint=append_git_install_suggestion("The starter is cloned with git."),
        ) from exc
    except subprocess.CalledProcessError as exc:
        raise StarterInitError(
            f"Failed to clone {starter_url}: {(exc.stderr or '').strip() or exc}",
            hint="Check your network connection and the starter URL.",
        ) from exc

    shutil.rmtree(root_path / ".git", ignore_errors=True)
    logger.info("Cloned %s into %s", starter_url, root_path)


def set_name_in_package(root_path: Path, site_name: str) -> None:
    """Rename the cloned ``package.json`` after the site."""
    package_json = root_path / "package.json"
    try:
        data = json.loads(package_json.read_text(encoding="utf-8"))
    except FileNotFoundError:
        logger.warning("No package.json in %s, skipping rename", root_path)
        return
    except (OSError, json.JSONDecodeError) as exc:
        raise StarterInitError(f"Unable to read {package_json}: {exc}") from exc

    data["name"] = make_npm_safe(site_name)
    data["description"] = site_name
    data.pop("license", None)
    package_json.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")


def install(root_path: Path, packages: Sequence[str], package_manager: str | None = None) -> None:
    """Install the starter's dependencies, then *packages*."""
    manager = package_manager or get_package_manager()
    try:
        _run(install_command(manager), cwd=root_path)
        if packages:
            _run(add_command(manager, packages), cwd=root_path)
    except FileNotFoundError as exc:
        raise StarterInitError(
            f"{manager} is not installed or not on PATH.",
            hint="Install Node.js from https://nodejs.org/ and try again.",
        ) from exc
    except subprocess.CalledProcessError as exc:
        raise StarterInitError(
            f"Installing packages with {manager} failed: {(exc.stderr or '').strip() or exc}",
            hint=f"Run `{manager} install` inside {root_path} to see the full output.",
        ) from exc


def init_starter(
    starter_url: str,
    root_path: str,
    packages: Sequence[str],
    site_name: str,
    *,
    package_manager: str | None = None,
) -> None:
    """Create a new site at *root_path* from *starter_url*.

    *package_manager* is detected from the environment when omitted.

    Raises
    ------
    StarterInitError
        When the destination exists or any clone / install step fails.
    """
    destination = Path(root_path)
    if destination.exists():
        raise StarterInitError(
            f'The destination "{root_path}" already exists.',
            hint="Choose a different folder name.",
        )

    clone(starter_url, destination)
    set_name_in_package(destination, site_name)
    install(destination, packages, package_manager)
