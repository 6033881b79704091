"""Shell detection and kok shell integration."""

from kok_setup.shell.detection import detect_shell, get_shell_config_file
from kok_setup.shell.integration import setup_shell_integration
from kok_setup.shell.templates import SHELL_TEMPLATES, generate_shell_functions

__all__ = [
    "SHELL_TEMPLATES",
    "detect_shell",
    "generate_shell_functions",
    "get_shell_config_file",
    "setup_shell_integration",
]
