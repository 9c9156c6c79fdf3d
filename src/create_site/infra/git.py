"""Infrastructure: initial git repository for a freshly created site.

Rules
-----
* Skips ``git init`` when the site already lives inside a work tree.
* A failed initial commit (e.g. no ``user.email`` configured) removes
  the new ``.git`` directory instead of leaving a half-set-up repo.
* Raw ``subprocess`` failures are re-raised as
  :class:`~create_site.exceptions.GitSetupError`.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path

from create_site.exceptions import GitSetupError, append_git_install_suggestion

logger = logging.getLogger(__name__)

COMMIT_MESSAGE = "Initial commit from create-site"

GITIGNORE = "\n".join(
    (
        "node_modules/",
        ".cache/",
        "public",
        ".env*",
        "",
    )
)


def _git(args: list[str], cwd: Path) -> subprocess.CompletedProcess[str]:
    logger.debug("Running git %s (cwd=%s)", " ".join(args), cwd)
    return subprocess.run(["git", *args], cwd=cwd, check=True, capture_output=True, text=True)


def is_already_git_repository(root_path: Path) -> bool:
    """Return ``True`` when *root_path* is inside an existing work tree."""
    try:
        result = _git(["rev-parse", "--is-inside-work-tree"], root_path)
    except (subprocess.CalledProcessError, OSError):
        return False
    return result.stdout.strip() == "true"


def maybe_create_gitignore(root_path: Path) -> None:
    """Write a default ``.gitignore`` unless the starter ships one."""
    path = root_path / ".gitignore"
    if path.exists():
        return
    path.write_text(GITIGNORE, encoding="utf-8")


def git_setup(root_path: str) -> None:
    """Initialise git in *root_path* and record the first commit.

    Raises
    ------
    GitSetupError
        When git is missing or ``git init`` / ``git add`` fail.
    """
    path = Path(root_path)
    if is_already_git_repository(path):
        logger.info("%s is already inside a git repository, skipping init", path)
        return

    try:
        _git(["init"], path)
        maybe_create_gitignore(path)
        _git(["add", "-A"], path)
    except FileNotFoundError as exc:
        raise GitSetupError(
            "git is not installed or not on PATH.",
            hint=append_git_install_suggestion("The site was created but is not under version control."),
        ) from exc
    except subprocess.CalledProcessError as exc:
        raise GitSetupError(
            f"git setup failed: {(exc.stderr or '').strip() or exc}",
        ) from exc

    try:
        _git(["commit", "-m", COMMIT_MESSAGE], path)
    except subprocess.CalledProcessError as exc:
        logger.warning("Initial commit failed, removing .git: %s", (exc.stderr or "").strip())
        shutil.rmtree(path / ".git", ignore_errors=True)
