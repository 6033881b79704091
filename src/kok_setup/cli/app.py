"""Top-level CLI for kok-setup."""

import argparse
import logging
import sys

from kok_setup import __version__
from kok_setup.context import SetupContext
from kok_setup.setup import run_setup

log = logging.getLogger("kok_setup")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kok-setup",
        description="Install kok-cli, choose an AI provider and add kok to your shell",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the interactive setup."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )

    ctx = SetupContext.from_environment()
    log.debug("cwd=%s config_dir=%s", ctx.cwd, ctx.config_dir)

    try:
        return run_setup(ctx)
    except KeyboardInterrupt:
        print("\nSetup cancelled.", file=sys.stderr)
        return 130
    except EOFError:
        print("\nSetup cancelled: no more input.", file=sys.stderr)
        return 1
    except Exception as e:
        log.debug("setup failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


def entrypoint() -> None:
    """Console script entrypoint."""
    raise SystemExit(main())
