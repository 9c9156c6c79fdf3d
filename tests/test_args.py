"""Tests for position-independent argument parsing (cli/args.py)."""

from __future__ import annotations

import random
import string
from unittest.mock import MagicMock

import pytest

from create_site.cli.args import parse_args
from create_site.cli.reporter import ConsoleReporter
from create_site.core.models import Flags, ParsedArguments


class TestDefaults:
    def test_no_flags_and_no_dir(self, reporter: MagicMock) -> None:
        parsed = parse_args([], reporter)
        assert parsed.flags.yes is False
        assert parsed.flags.ts is False
        assert parsed.site_directory == ""
        reporter.warn.assert_not_called()

    def test_dir_without_flags(self, reporter: MagicMock) -> None:
        parsed = parse_args(["hello-world"], reporter)
        assert parsed == ParsedArguments(flags=Flags(), site_directory="hello-world")


class TestOrderIndependence:
    @pytest.mark.parametrize(
        "tokens",
        [
            ["-y", "-tsc", "hello-world"],
            ["hello-world", "-y", "-tsc"],
            ["-y", "hello-world", "-tsc"],
        ],
        ids=["flags-before", "flags-after", "flags-around"],
    )
    def test_flags_and_dir_in_any_order(self, tokens: list[str], reporter: MagicMock) -> None:
        parsed = parse_args(tokens, reporter)
        assert parsed.flags == Flags(yes=True, ts=True)
        assert parsed.site_directory == "hello-world"

    def test_last_positional_wins(self, reporter: MagicMock) -> None:
        assert parse_args(["a", "b"], reporter).site_directory == "b"

    def test_repeated_flag_is_idempotent(self, reporter: MagicMock) -> None:
        assert parse_args(["-y", "-y"], reporter).flags == Flags(yes=True)


class TestUnknownArguments:
    def test_warns_once_and_ignores(self, reporter: MagicMock) -> None:
        parsed = parse_args(["hello-world", "-unknown"], reporter)
        reporter.warn.assert_called_once()
        assert 'Found unknown argument "-unknown", ignoring.' in reporter.warn.call_args[0][0]
        assert parsed.flags == Flags()
        assert parsed.site_directory == "hello-world"

    def test_long_options_are_unknown(self, reporter: MagicMock) -> None:
        parse_args(["--yes", "--ts"], reporter)
        assert reporter.warn.call_count == 2

    @pytest.mark.parametrize("token", ["-[/]", "-[bold]", "-[/yellow]x"])
    def test_markup_like_token_is_printed_literally(
        self, token: str, capsys: pytest.CaptureFixture[str],
    ) -> None:
        parsed = parse_args([token, "site"], ConsoleReporter())
        assert parsed.site_directory == "site"
        assert f'Found unknown argument "{token}", ignoring.' in capsys.readouterr().out


class TestNeverRaises:
    @pytest.mark.parametrize("seed", range(25))
    def test_arbitrary_tokens(self, seed: int, reporter: MagicMock) -> None:
        rng = random.Random(seed)
        alphabet = string.printable + "äß€🙂\x00"
        tokens = [
            "".join(rng.choice(alphabet) for _ in range(rng.randint(0, 12)))
            for _ in range(rng.randint(0, 10))
        ]
        parsed = parse_args(tokens, reporter)
        assert isinstance(parsed, ParsedArguments)
        positional = [token for token in tokens if not token.startswith("-")]
        assert parsed.site_directory == (positional[-1] if positional else "")

    @pytest.mark.parametrize("seed", range(10))
    def test_arbitrary_tokens_with_console_reporter(self, seed: int) -> None:
        rng = random.Random(seed)
        alphabet = "[]/\\-ab "
        tokens = ["-" + "".join(rng.choice(alphabet) for _ in range(rng.randint(0, 8))) for _ in range(5)]
        assert parse_args(tokens, ConsoleReporter()).flags == Flags()

    def test_result_is_immutable(self, reporter: MagicMock) -> None:
        parsed = parse_args(["-y"], reporter)
        with pytest.raises(AttributeError):
            parsed.flags.yes = False  # type: ignore[misc]
