"""create-site — interactive scaffolding for new static sites.

Asks a handful of questions, resolves the answers into packages and
plugin configuration, and bootstraps the project from a starter.
"""

from create_site.version import __version__

__all__: list[str] = ["__version__"]
