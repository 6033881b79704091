"""Shared constants for kok-setup."""

RESET = "\033[0m"
BOLD = "\033[1m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
MAGENTA = "\033[35m"
CYAN = "\033[36m"

COLORS = {
    "reset": RESET,
    "bright": BOLD,
    "red": RED,
    "green": GREEN,
    "yellow": YELLOW,
    "blue": BLUE,
    "magenta": MAGENTA,
    "cyan": CYAN,
}

APP_NAME = "kok"
CONFIG_FILENAME = "config.json"

BINARY_NAME = "kok-cli"
BINARY_BUILD_DIR = "dist"
BINARY_INSTALL_DIR = "/usr/local/bin"
BUILD_COMMAND = "bun run build"

LOCAL_SERVER_PROCESS = "llama-server"
