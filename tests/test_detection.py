"""Unit tests for kok_setup.shell.detection."""

from pathlib import Path

import pytest

from kok_setup.models import ShellKind
from kok_setup.shell.detection import detect_shell, get_shell_config_file


class TestDetectShell:
    def test_zsh(self):
        assert detect_shell({"SHELL": "/bin/zsh"}) is ShellKind.ZSH

    def test_bash(self):
        assert detect_shell({"SHELL": "/usr/local/bin/bash"}) is ShellKind.BASH

    def test_fish(self):
        assert detect_shell({"SHELL": "/opt/homebrew/bin/fish"}) is ShellKind.FISH

    def test_unmatched_shell_is_unknown(self):
        assert detect_shell({"SHELL": "/usr/bin/env"}) is ShellKind.UNKNOWN

    def test_missing_shell_variable_is_unknown(self):
        assert detect_shell({}) is ShellKind.UNKNOWN

    def test_zsh_takes_priority_over_bash(self):
        assert detect_shell({"SHELL": "/home/me/zsh-builds/bash"}) is ShellKind.ZSH

    def test_bash_takes_priority_over_fish(self):
        assert detect_shell({"SHELL": "/home/fish/bin/bash"}) is ShellKind.BASH


class TestGetShellConfigFile:
    @pytest.mark.parametrize(
        "shell, relative",
        [
            (ShellKind.ZSH, ".zshrc"),
            (ShellKind.BASH, ".bashrc"),
            (ShellKind.FISH, ".config/fish/config.fish"),
            (ShellKind.UNKNOWN, ".profile"),
        ],
    )
    def test_maps_shell_to_startup_file(self, shell, relative):
        home = Path("/home/alice")
        assert get_shell_config_file(shell, home) == home / relative

    def test_detected_zsh_points_at_zshrc(self):
        path = get_shell_config_file(detect_shell({"SHELL": "/bin/zsh"}), Path("/home/alice"))
        assert path.name == ".zshrc"

    def test_unmatched_shell_points_at_profile(self):
        path = get_shell_config_file(detect_shell({"SHELL": "/usr/bin/env"}), Path("/home/alice"))
        assert path.name == ".profile"
