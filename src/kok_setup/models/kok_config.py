"""Configuration records written to the kok config file."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_OPENAI_MODEL = "gpt-4o"
DEFAULT_CLAUDE_MODEL = "claude-3-5-sonnet-20241022"
DEFAULT_GEMINI_MODEL = "gemini-1.5-pro"
DEFAULT_LOCAL_MODEL = "gemma-3-4b"
DEFAULT_CONTEXT_SIZE = 2048
DEFAULT_TEMPERATURE = 0.1
DEFAULT_MAX_TOKENS = 150
DEFAULT_LOCAL_PORT = 8080


class _ProviderConfig(BaseModel):
    # kok-cli reads camelCase keys; Python code uses the field names.
    model_config = ConfigDict(populate_by_name=True, protected_namespaces=())


class OpenAIConfig(_ProviderConfig):
    """OpenAI provider settings."""

    type: Literal["OpenAI"] = "OpenAI"
    api_key: str = Field(
        default="",
        alias="apiKey",
        description="OpenAI API key. Empty means kok-cli falls back to OPENAI_API_KEY.",
    )
    model: str = Field(default=DEFAULT_OPENAI_MODEL, description="OpenAI model name.")


class ClaudeConfig(_ProviderConfig):
    """Anthropic Claude provider settings."""

    type: Literal["Claude"] = "Claude"
    api_key: str = Field(default="", alias="apiKey", description="Anthropic API key.")
    model: str = Field(default=DEFAULT_CLAUDE_MODEL, description="Claude model name.")


class GeminiConfig(_ProviderConfig):
    """Google Gemini provider settings."""

    type: Literal["Gemini"] = "Gemini"
    api_key: str = Field(default="", alias="apiKey", description="Google API key.")
    model: str = Field(default=DEFAULT_GEMINI_MODEL, description="Gemini model name.")


class LlamaCppConfig(_ProviderConfig):
    """Local llama.cpp server settings."""

    type: Literal["LlamaCpp"] = "LlamaCpp"
    model: str = Field(
        default=DEFAULT_LOCAL_MODEL,
        description="Local model name (gemma-3-4b, smollm3-3b or tinyllama-1.1b).",
    )
    context_size: int = Field(
        default=DEFAULT_CONTEXT_SIZE,
        alias="contextSize",
        description="Context window passed to llama-server.",
    )
    temperature: float = Field(default=DEFAULT_TEMPERATURE, description="Sampling temperature.")
    max_tokens: int = Field(
        default=DEFAULT_MAX_TOKENS,
        alias="maxTokens",
        description="Maximum tokens generated per command.",
    )
    port: int = Field(default=DEFAULT_LOCAL_PORT, description="Port llama-server listens on.")


class CustomConfig(_ProviderConfig):
    """Any OpenAI-compatible endpoint (Ollama, vLLM, ...)."""

    type: Literal["Custom"] = "Custom"
    base_url: str = Field(
        alias="baseURL",
        description="Endpoint base URL (e.g. 'http://localhost:11434/v1').",
    )
    model: str = Field(description="Model name served by the endpoint.")
    api_key: str = Field(alias="apiKey", description="API key, or 'ollama' for Ollama.")


KokConfig = Annotated[
    Union[OpenAIConfig, ClaudeConfig, GeminiConfig, LlamaCppConfig, CustomConfig],
    Field(discriminator="type"),
]
