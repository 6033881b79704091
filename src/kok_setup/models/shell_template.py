"""Shell kinds and the integration templates keyed by them."""

import shlex
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

CONFIG_PATH_PLACEHOLDER = "@KOK_CONFIG_PATH@"


class ShellKind(str, Enum):
    """Shells the installer knows how to integrate with."""

    ZSH = "zsh"
    BASH = "bash"
    FISH = "fish"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ShellTemplate:
    """Shell function definitions for one shell dialect."""

    dialect: str
    body: str
    functions: tuple[str, ...]

    def render(self, config_path: Path) -> str:
        """Return the template text with the fallback config path filled in."""
        return self.body.replace(CONFIG_PATH_PLACEHOLDER, shlex.quote(str(config_path)))
