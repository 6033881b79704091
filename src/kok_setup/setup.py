"""Core setup sequence for kok."""

import logging

from kok_setup.binary import check_binary, install_binary
from kok_setup.constants import BINARY_NAME, BUILD_COMMAND
from kok_setup.context import SetupContext
from kok_setup.shell import detect_shell, get_shell_config_file, setup_shell_integration
from kok_setup.wizard import create_config

log = logging.getLogger("kok_setup")


def print_next_steps(ctx: SetupContext) -> None:
    terminal = ctx.terminal
    rc_file = get_shell_config_file(detect_shell(ctx.env), ctx.home)

    terminal.log("\nSetup complete!", "green")
    terminal.log("\nNext steps:", "bright")
    terminal.log(f"1. Restart your terminal or run: source {rc_file}", "yellow")
    terminal.log('2. Test with: kok "list files in current directory"', "yellow")
    terminal.log("3. Check status with: kok_status", "yellow")

    if (ctx.cwd / "README.md").exists():
        terminal.log("\nFor more information, see README.md", "cyan")


def run_setup(ctx: SetupContext) -> int:
    """Run every setup step in order and return the process exit code.

    Only a missing binary stops the run early. Every other step reports its
    own failures and lets the next step run.
    """
    terminal = ctx.terminal
    terminal.log("Welcome to kok setup!", "bright")
    terminal.log("This will help you configure kok for natural language shell commands.\n", "cyan")

    if not check_binary(ctx):
        terminal.log(f"Please build the project first with: {BUILD_COMMAND}", "yellow")
        return 0

    if terminal.confirm(f"Install {BINARY_NAME} to {ctx.install_dir}? (y/n): "):
        install_binary(ctx)
    else:
        log.debug("binary install skipped")

    create_config(ctx)
    setup_shell_integration(ctx)
    print_next_steps(ctx)
    return 0
