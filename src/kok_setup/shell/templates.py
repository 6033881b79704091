"""Shell function definitions appended to the user's startup file.

Each template defines three functions:

``kok``
    Runs kok-cli with the given words, shows the generated command and
    evaluates it after confirmation.
``kok_stop``
    Stops the local llama-server.
``kok_status``
    Prints the provider and model from the config file. The values are pulled
    out with grep rather than a JSON parser so the function needs nothing
    beyond coreutils.
"""

from pathlib import Path

from kok_setup.constants import BINARY_NAME, LOCAL_SERVER_PROCESS
from kok_setup.models import ShellKind, ShellTemplate
from kok_setup.models.shell_template import CONFIG_PATH_PLACEHOLDER

FUNCTION_NAMES = ("kok", "kok_stop", "kok_status")

POSIX_TEMPLATE = ShellTemplate(
    dialect="posix",
    functions=FUNCTION_NAMES,
    body=(
        "\n"
        "# kok - Natural language to shell commands\n"
        "kok() {\n"
        "  local cmd confirm\n"
        f'  cmd="$({BINARY_NAME} "$@")" || return\n'
        '  echo "Generated: $cmd"\n'
        '  printf "Execute? [y/N] "\n'
        "  read -r confirm\n"
        '  case "$confirm" in\n'
        '    y|Y|yes|YES) eval "$cmd" ;;\n'
        "  esac\n"
        "}\n"
        "\n"
        "kok_stop() {\n"
        f'  pkill {LOCAL_SERVER_PROCESS} && echo "🛑 Local AI server stopped"\n'
        "}\n"
        "\n"
        "kok_status() {\n"
        '  echo "🤖 kok Configuration:"\n'
        "  local config_path\n"
        f'  config_path="$({BINARY_NAME} --config-path 2>/dev/null || echo {CONFIG_PATH_PLACEHOLDER})"\n'
        '  if [ -f "$config_path" ]; then\n'
        "    echo \"   Provider: $(grep -o '\"type\": *\"[^\"]*\"' \"$config_path\" | cut -d'\"' -f4)\"\n"
        "    echo \"   Model: $(grep -o '\"model\": *\"[^\"]*\"' \"$config_path\" | cut -d'\"' -f4)\"\n"
        "  else\n"
        '    echo "   Status: Not configured"\n'
        "  fi\n"
        "}\n"
    ),
)

FISH_TEMPLATE = ShellTemplate(
    dialect="fish",
    functions=FUNCTION_NAMES,
    body=(
        "\n"
        "# kok - Natural language to shell commands\n"
        "function kok\n"
        f"    set -l cmd ({BINARY_NAME} $argv)\n"
        "    or return\n"
        '    echo "Generated: $cmd"\n'
        '    read -l -P "Execute? [y/N] " confirm\n'
        '    if test "$confirm" = "y" -o "$confirm" = "yes"\n'
        "        eval $cmd\n"
        "    end\n"
        "end\n"
        "\n"
        "function kok_stop\n"
        f'    pkill {LOCAL_SERVER_PROCESS}; and echo "🛑 Local AI server stopped"\n'
        "end\n"
        "\n"
        "function kok_status\n"
        '    echo "🤖 kok Configuration:"\n'
        f"    set -l config_path ({BINARY_NAME} --config-path 2>/dev/null; or echo {CONFIG_PATH_PLACEHOLDER})\n"
        '    if test -f "$config_path"\n'
        "        echo \"   Provider: \"(grep -o '\"type\": *\"[^\"]*\"' $config_path | cut -d'\"' -f4)\n"
        "        echo \"   Model: \"(grep -o '\"model\": *\"[^\"]*\"' $config_path | cut -d'\"' -f4)\n"
        "    else\n"
        '        echo "   Status: Not configured"\n'
        "    end\n"
        "end\n"
    ),
)

SHELL_TEMPLATES: dict[ShellKind, ShellTemplate] = {
    ShellKind.ZSH: POSIX_TEMPLATE,
    ShellKind.BASH: POSIX_TEMPLATE,
    ShellKind.UNKNOWN: POSIX_TEMPLATE,
    ShellKind.FISH: FISH_TEMPLATE,
}


def generate_shell_functions(shell: ShellKind, config_path: Path) -> str:
    """Return the function block for shell, pointing kok_status at config_path."""
    return SHELL_TEMPLATES[shell].render(config_path)
