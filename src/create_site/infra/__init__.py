"""Infrastructure layer — external system integration.

This layer wraps all interaction with git, the Node package manager
and the filesystem.  Every raw ``subprocess`` / ``OSError`` failure must
be caught here and re-raised as a
:class:`~create_site.exceptions.CreateSiteError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the CLI layer.
"""

from create_site.infra.git import git_setup
from create_site.infra.package_manager import get_package_manager
from create_site.infra.site_config import install_plugins, set_site_metadata
from create_site.infra.starter import init_starter

__all__: list[str] = [
    "get_package_manager",
    "git_setup",
    "init_starter",
    "install_plugins",
    "set_site_metadata",
]
