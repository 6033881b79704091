"""Locate the prebuilt kok-cli binary and install it system-wide."""

import logging
import subprocess
from pathlib import Path

from kok_setup.constants import BINARY_BUILD_DIR, BINARY_NAME, BUILD_COMMAND
from kok_setup.context import SetupContext

log = logging.getLogger(__name__)


def binary_path(ctx: SetupContext) -> Path:
    """Return where the build drops kok-cli, relative to the working directory."""
    return ctx.cwd / BINARY_BUILD_DIR / BINARY_NAME


def install_target(ctx: SetupContext) -> Path:
    return ctx.install_dir / BINARY_NAME


def check_binary(ctx: SetupContext) -> bool:
    """Return whether the built binary exists."""
    path = binary_path(ctx)
    if not path.exists():
        log.debug("binary missing at %s", path)
        ctx.terminal.log(f"Binary not found. Please run: {BUILD_COMMAND}", "red")
        return False
    return True


def _run(argv: list[str]) -> None:
    log.debug("running %s", argv)
    result = subprocess.run(argv, capture_output=True, text=True)
    if result.returncode != 0:
        raise subprocess.CalledProcessError(
            result.returncode, argv, output=result.stdout, stderr=result.stderr
        )


def _describe_failure(error: Exception) -> str:
    if isinstance(error, subprocess.CalledProcessError):
        detail = (error.stderr or "").strip()
        cmd = " ".join(str(part) for part in error.cmd)
        message = f"Command failed: {cmd} (exit {error.returncode})"
        return f"{message}: {detail}" if detail else message
    return str(error)


def install_binary(ctx: SetupContext) -> bool:
    """Make the binary executable and copy it to the install directory with sudo.

    Failures are reported on the terminal and never raised. A failed copy after
    a successful chmod is left as is.
    """
    ctx.terminal.log(f"\nInstalling {BINARY_NAME} binary...", "cyan")

    source = binary_path(ctx)
    target = install_target(ctx)

    try:
        _run(["chmod", "+x", str(source)])
        _run(["sudo", "cp", str(source), str(target)])
    except (subprocess.CalledProcessError, OSError) as e:
        log.debug("binary install failed: %s", e)
        ctx.terminal.log(f"Failed to install binary: {_describe_failure(e)}", "red")
        ctx.terminal.log("You may need to run with sudo or install manually", "yellow")
        return False

    ctx.terminal.log("Binary installed successfully!", "green")
    return True
