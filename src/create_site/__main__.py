"""Allow ``python -m create_site`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m create_site`` behaves identically to the
``create-site`` console script.
"""

from __future__ import annotations

from create_site.cli.app import cli

if __name__ == "__main__":
    cli()
