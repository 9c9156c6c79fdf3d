"""Position-independent command-line parsing.

``create-site hello-world -y`` and ``create-site -y hello-world`` must
behave the same, which ``argparse`` does not guarantee for unknown
single-dash tokens such as ``-tsc``.  Tokens are therefore folded left
to right over an immutable :class:`ParsedArguments`.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace
from functools import reduce

from create_site.core.models import ParsedArguments
from create_site.core.protocols import Reporter


def _fold(reporter: Reporter):
    def step(parsed: ParsedArguments, token: str) -> ParsedArguments:
        if token == "-y":
            return replace(parsed, flags=replace(parsed.flags, yes=True))
        if token == "-tsc":
            return replace(parsed, flags=replace(parsed.flags, ts=True))
        if token.startswith("-"):
            reporter.warn(f'Found unknown argument "{token}", ignoring.')
            return parsed
        return replace(parsed, site_directory=token)

    return step


def parse_args(tokens: Sequence[str], reporter: Reporter) -> ParsedArguments:
    """Parse *tokens* (program path excluded) into flags and a directory.

    The last positional token wins.  Unknown ``-`` tokens are reported
    through *reporter* and otherwise ignored.  Never raises.
    """
    return reduce(_fold(reporter), tokens, ParsedArguments())
