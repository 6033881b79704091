"""Append kok shell functions to the user's startup file."""

import logging
from pathlib import Path

from kok_setup.context import SetupContext
from kok_setup.models import ShellKind
from kok_setup.shell.detection import detect_shell, get_shell_config_file
from kok_setup.shell.templates import generate_shell_functions

log = logging.getLogger(__name__)


def append_shell_functions(shell: ShellKind, rc_file: Path, config_path: Path) -> None:
    """Append the function block for shell to rc_file."""
    functions = generate_shell_functions(shell, config_path)
    # fish's config dir is usually missing on a fresh account.
    rc_file.parent.mkdir(parents=True, exist_ok=True)
    with open(rc_file, "a", encoding="utf-8") as f:
        f.write(functions)
    log.debug("appended %d chars to %s", len(functions), rc_file)


def setup_shell_integration(ctx: SetupContext) -> bool:
    """Offer to install the kok functions; return whether they were written."""
    terminal = ctx.terminal
    terminal.log("\nSetting up shell integration...", "cyan")

    shell = detect_shell(ctx.env)
    rc_file = get_shell_config_file(shell, ctx.home)
    log.debug("shell=%s rc_file=%s", shell.value, rc_file)

    terminal.log(f"Detected shell: {shell.value}", "yellow")
    terminal.log(f"Config file: {rc_file}", "yellow")

    if not terminal.confirm("Add kok functions to your shell config? (y/n): "):
        return False

    try:
        append_shell_functions(shell, rc_file, ctx.config_file)
    except OSError as e:
        log.debug("append to %s failed: %s", rc_file, e)
        terminal.log(f"Failed to write to {rc_file}: {e}", "red")
        terminal.log("You can manually add the functions shown in the README", "yellow")
        return False

    terminal.log("Shell functions added successfully!", "green")
    terminal.log(f"Please run: source {rc_file}", "yellow")
    return True
