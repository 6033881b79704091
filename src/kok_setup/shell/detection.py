"""Shell detection and startup-file lookup."""

from collections.abc import Mapping
from pathlib import Path

from kok_setup.models import ShellKind

# Checked in order; the first name found anywhere in $SHELL wins.
_DETECTION_ORDER = (ShellKind.ZSH, ShellKind.BASH, ShellKind.FISH)

SHELL_CONFIG_FILES: dict[ShellKind, str] = {
    ShellKind.ZSH: ".zshrc",
    ShellKind.BASH: ".bashrc",
    ShellKind.FISH: ".config/fish/config.fish",
    ShellKind.UNKNOWN: ".profile",
}


def detect_shell(env: Mapping[str, str]) -> ShellKind:
    """Classify the user's login shell from the SHELL environment variable."""
    shell = env.get("SHELL", "")
    for kind in _DETECTION_ORDER:
        if kind.value in shell:
            return kind
    return ShellKind.UNKNOWN


def get_shell_config_file(shell: ShellKind, home: Path) -> Path:
    """Return the startup file that shell reads for interactive sessions."""
    return home / SHELL_CONFIG_FILES[shell]
