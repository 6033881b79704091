"""Model package for kok-setup."""

from kok_setup.models.kok_config import (
    DEFAULT_LOCAL_MODEL,
    DEFAULT_OPENAI_MODEL,
    ClaudeConfig,
    CustomConfig,
    GeminiConfig,
    KokConfig,
    LlamaCppConfig,
    OpenAIConfig,
)
from kok_setup.models.shell_template import ShellKind, ShellTemplate

__all__ = [
    "ClaudeConfig",
    "CustomConfig",
    "DEFAULT_LOCAL_MODEL",
    "DEFAULT_OPENAI_MODEL",
    "GeminiConfig",
    "KokConfig",
    "LlamaCppConfig",
    "OpenAIConfig",
    "ShellKind",
    "ShellTemplate",
]
