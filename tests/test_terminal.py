"""Unit tests for kok_setup.terminal."""

import io

import pytest

from kok_setup.constants import GREEN, RESET
from kok_setup.terminal import Terminal, supports_color


class _TtyStream(io.StringIO):
    def isatty(self) -> bool:
        return True


class TestSupportsColor:
    def test_tty_supports_color(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setenv("TERM", "xterm-256color")
        assert supports_color(_TtyStream()) is True

    def test_non_tty_has_no_color(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        assert supports_color(io.StringIO()) is False

    def test_no_color_env_disables_color(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "")
        assert supports_color(_TtyStream()) is False

    def test_dumb_terminal_disables_color(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setenv("TERM", "dumb")
        assert supports_color(_TtyStream()) is False


class TestTerminal:
    def test_log_wraps_message_in_color(self):
        out = io.StringIO()
        Terminal(stdin=io.StringIO(), stdout=out, color=True).log("done", "green")
        assert out.getvalue() == f"{GREEN}done{RESET}\n"

    def test_log_without_color_is_plain(self):
        out = io.StringIO()
        Terminal(stdin=io.StringIO(), stdout=out, color=False).log("done", "green")
        assert out.getvalue() == "done\n"

    def test_ask_prints_question_and_strips_answer(self):
        out = io.StringIO()
        terminal = Terminal(stdin=io.StringIO("  hello  \n"), stdout=out, color=False)

        assert terminal.ask("Name? ") == "hello"
        assert out.getvalue() == "Name? "

    def test_ask_reads_one_line_at_a_time(self):
        terminal = Terminal(stdin=io.StringIO("a\nb\n"), stdout=io.StringIO(), color=False)
        assert terminal.ask("") == "a"
        assert terminal.ask("") == "b"

    def test_ask_raises_on_closed_input(self):
        terminal = Terminal(stdin=io.StringIO(""), stdout=io.StringIO(), color=False)
        with pytest.raises(EOFError):
            terminal.ask("Name? ")

    @pytest.mark.parametrize("answer, expected", [
        ("y", True),
        ("YES", True),
        (" Yes ", True),
        ("n", False),
        ("", False),
        ("yep", False),
    ])
    def test_confirm(self, answer, expected):
        terminal = Terminal(stdin=io.StringIO(f"{answer}\n"), stdout=io.StringIO(), color=False)
        assert terminal.confirm("Continue? ") is expected
