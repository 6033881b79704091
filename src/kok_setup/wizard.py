"""Interactive provider wizard and the configuration step built on it."""

import logging
from collections.abc import Callable

from kok_setup.config import load_config, write_config
from kok_setup.context import SetupContext
from kok_setup.models import (
    DEFAULT_LOCAL_MODEL,
    ClaudeConfig,
    CustomConfig,
    GeminiConfig,
    KokConfig,
    LlamaCppConfig,
    OpenAIConfig,
)
from kok_setup.terminal import Terminal

log = logging.getLogger(__name__)

PROVIDER_MENU = (
    "1. OpenAI (GPT-4, requires API key)",
    "2. Claude (Anthropic, requires API key)",
    "3. Gemini (Google, requires API key)",
    "4. Local models (llama.cpp, no API key needed)",
    "5. Custom (Ollama, etc.)",
)

LOCAL_MODEL_MENU = (
    "1. gemma-3-4b (Recommended, 4B parameters)",
    "2. smollm3-3b (Balanced, 3B parameters)",
    "3. tinyllama-1.1b (Fastest, 1.1B parameters)",
)

LOCAL_MODELS = {
    "1": "gemma-3-4b",
    "2": "smollm3-3b",
    "3": "tinyllama-1.1b",
}

LLAMA_CPP_STEPS = (
    "1. Install llama.cpp: git clone https://github.com/ggerganov/llama.cpp.git",
    "2. Build it: cd llama.cpp && make llama-server",
    "3. Set LLAMA_DIR: export LLAMA_DIR=/path/to/llama.cpp",
)


def _ask_openai(terminal: Terminal) -> KokConfig:
    api_key = terminal.ask(
        "Enter your OpenAI API key (or press Enter to use OPENAI_API_KEY env var): "
    )
    return OpenAIConfig(api_key=api_key)


def _ask_claude(terminal: Terminal) -> KokConfig:
    return ClaudeConfig(api_key=terminal.ask("Enter your Anthropic API key: "))


def _ask_gemini(terminal: Terminal) -> KokConfig:
    return GeminiConfig(api_key=terminal.ask("Enter your Google API key: "))


def _ask_local(terminal: Terminal) -> KokConfig:
    terminal.log("\nChoose a local model:", "bright")
    for line in LOCAL_MODEL_MENU:
        terminal.log(line)
    choice = terminal.ask("Enter your choice (1-3): ")
    # Unknown answers quietly pick the recommended model.
    model = LOCAL_MODELS.get(choice, DEFAULT_LOCAL_MODEL)

    terminal.log("\nFor local models, make sure to:", "yellow")
    for line in LLAMA_CPP_STEPS:
        terminal.log(line)
    return LlamaCppConfig(model=model)


def _ask_custom(terminal: Terminal) -> KokConfig:
    base_url = terminal.ask("Enter base URL (e.g., http://localhost:11434/v1): ")
    model = terminal.ask("Enter model name (e.g., llama3.1): ")
    api_key = terminal.ask('Enter API key (or "ollama" for Ollama): ')
    return CustomConfig(base_url=base_url, model=model, api_key=api_key)


PROVIDER_PROMPTS: dict[str, Callable[[Terminal], KokConfig]] = {
    "1": _ask_openai,
    "2": _ask_claude,
    "3": _ask_gemini,
    "4": _ask_local,
    "5": _ask_custom,
}


def run_wizard(ctx: SetupContext) -> KokConfig:
    """Ask for a provider and its settings and return the resulting record."""
    terminal = ctx.terminal
    terminal.log("\nChoose your AI provider:", "bright")
    for line in PROVIDER_MENU:
        terminal.log(line)

    choice = terminal.ask("\nEnter your choice (1-5): ")
    prompt = PROVIDER_PROMPTS.get(choice)
    if prompt is None:
        log.debug("unrecognised provider choice %r", choice)
        terminal.log("Invalid choice, using default OpenAI config", "yellow")
        return OpenAIConfig()

    config = prompt(terminal)
    log.debug("provider=%s model=%s", config.type, config.model)
    return config


def create_config(ctx: SetupContext) -> bool:
    """Run the wizard and save its result; return whether a file was written.

    An existing config is only replaced after the user confirms. Declining,
    or a failed write, ends this step without affecting the rest of setup.
    """
    terminal = ctx.terminal
    terminal.log("\nSetting up configuration...", "cyan")

    path = ctx.config_file
    if path.exists():
        terminal.log("Configuration already exists!", "yellow")
        existing = load_config(path)
        if existing is not None:
            terminal.log(f"Current provider: {existing.type} ({existing.model})", "yellow")
        if not terminal.confirm("Overwrite existing config? (y/n): "):
            return False

    config = run_wizard(ctx)

    try:
        write_config(config, path)
    except OSError as e:
        log.debug("config write to %s failed: %s", path, e)
        terminal.log(f"Failed to save configuration: {e}", "red")
        return False

    terminal.log(f"Configuration saved to: {path}", "green")
    return True
