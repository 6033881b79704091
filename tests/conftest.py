import io
from pathlib import Path

import pytest

from kok_setup.context import SetupContext
from kok_setup.terminal import Terminal


@pytest.fixture
def make_ctx(tmp_path: Path):
    """Return a factory building a SetupContext rooted in tmp_path.

    Answers are fed to the terminal one per line. Output goes to sys.stdout,
    so tests read it back with capsys.
    """

    def _make(*answers: str, shell: str = "/bin/zsh", with_binary: bool = True) -> SetupContext:
        cwd = tmp_path / "project"
        home = tmp_path / "home"
        cwd.mkdir(exist_ok=True)
        home.mkdir(exist_ok=True)
        if with_binary:
            binary = cwd / "dist" / "kok-cli"
            binary.parent.mkdir(parents=True, exist_ok=True)
            binary.write_bytes(b"\x7fELF")

        stdin = io.StringIO("".join(f"{answer}\n" for answer in answers))
        return SetupContext(
            terminal=Terminal(stdin=stdin, color=False),
            cwd=cwd,
            home=home,
            config_dir=tmp_path / "config" / "kok",
            install_dir=tmp_path / "bin",
            env={"SHELL": shell},
        )

    return _make
