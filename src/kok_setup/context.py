"""Runtime context shared by every setup step."""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from kok_setup.config import CONFIG_DIR
from kok_setup.constants import BINARY_INSTALL_DIR, CONFIG_FILENAME
from kok_setup.terminal import Terminal


@dataclass
class SetupContext:
    """Paths, environment and terminal used by a single setup run."""

    terminal: Terminal
    cwd: Path
    home: Path
    config_dir: Path = CONFIG_DIR
    install_dir: Path = Path(BINARY_INSTALL_DIR)
    env: Mapping[str, str] = field(default_factory=dict)

    @property
    def config_file(self) -> Path:
        return self.config_dir / CONFIG_FILENAME

    @classmethod
    def from_environment(cls, terminal: Terminal | None = None) -> "SetupContext":
        """Build a context from the current process."""
        return cls(
            terminal=terminal if terminal is not None else Terminal(),
            cwd=Path.cwd(),
            home=Path.home(),
            env=dict(os.environ),
        )
