"""Command-line interface for kok-setup."""

from kok_setup.cli.app import entrypoint, main

__all__ = [
    "entrypoint",
    "main",
]
