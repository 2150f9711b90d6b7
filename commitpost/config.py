"""Configuration for commitpost.

Values come from CLI options, GitHub Actions inputs (INPUT_* environment
variables), an optional YAML file, and the defaults below, in that order of
precedence. load_settings() validates the merged values once, before any git
or network access.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from commitpost.prompt import DEFAULT_SYSTEM_PROMPT, normalize_hashtags


class ConfigError(Exception):
    """Base exception for configuration errors."""

    pass


class ConfigValidationError(ConfigError):
    """Raised when a configuration value fails its type or range check."""

    def __init__(self, name: str, value: Any, requirement: str):
        self.name = name
        self.value = value
        super().__init__(f'"{name}" must be {requirement}. Received "{value}".')


class MissingCredentialError(ConfigError):
    """Raised when a required credential is not in the environment."""

    def __init__(self, env_var: str, purpose: str):
        self.env_var = env_var
        super().__init__(f"{env_var} environment variable is required to {purpose}.")


class LLMProvider(Enum):
    """Supported OpenAI-compatible completion endpoints."""

    GITHUB_MODELS = "github-models"
    OPENAI = "openai"
    OPENROUTER = "openrouter"


# ============================================================
# DEFAULT VALUES
# ============================================================

DEFAULT_PROVIDER = LLMProvider.GITHUB_MODELS
DEFAULT_MODEL = "openai/gpt-4o-mini"
DEFAULT_TO_REF = "HEAD"
DEFAULT_MAX_DIFF_CHARS = 2000
DEFAULT_MAX_OUTPUT_TOKENS = 400
DEFAULT_TEMPERATURE = 0.2
MAX_TEMPERATURE = 2.0

# ============================================================
# PROVIDER ENDPOINTS AND CREDENTIALS
# ============================================================

PROVIDER_BASE_URLS = {
    LLMProvider.GITHUB_MODELS: "https://models.github.ai/inference",
    LLMProvider.OPENAI: None,
    LLMProvider.OPENROUTER: "https://openrouter.ai/api/v1",
}

API_KEY_ENV_VARS = {
    LLMProvider.GITHUB_MODELS: "GITHUB_TOKEN",
    LLMProvider.OPENAI: "OPENAI_API_KEY",
    LLMProvider.OPENROUTER: "OPENROUTER_API_KEY",
}

X_BEARER_TOKEN_ENV_VAR = "X_BEARER_TOKEN"

_TRUE_VALUES = {"true", "yes", "1", "on", "y"}
_FALSE_VALUES = {"false", "no", "0", "off", "n", ""}


def get_api_key_env_var(provider: LLMProvider) -> str:
    """Get the environment variable name holding the provider's API key."""
    return API_KEY_ENV_VARS[provider]


@dataclass(frozen=True)
class Settings:
    """Validated settings for one pipeline run."""

    from_ref: str
    llm_api_key: str
    x_bearer_token: str
    to_ref: str = DEFAULT_TO_REF
    include_start_commit: bool = False
    paths: tuple[str, ...] = field(default_factory=tuple)
    max_diff_chars: int = DEFAULT_MAX_DIFF_CHARS
    max_output_tokens: int = DEFAULT_MAX_OUTPUT_TOKENS
    temperature: float = DEFAULT_TEMPERATURE
    provider: LLMProvider = DEFAULT_PROVIDER
    model: str = DEFAULT_MODEL
    system_prompt: str = DEFAULT_SYSTEM_PROMPT
    extra_instructions: str = ""
    prompt_override: str = ""
    tone: str = ""
    call_to_action: str = ""
    community: str = ""
    hashtags: tuple[str, ...] = field(default_factory=tuple)


def load_config_file(path: Path) -> dict[str, Any]:
    """Load settings from a YAML file.

    Keys use the input names (``from``, ``max_diff_chars``, ...).

    Raises:
        ConfigError: If the file cannot be read or is not a mapping.
    """
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to load config from {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping of settings.")
    return data


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def parse_bool(name: str, value: Any) -> bool:
    """Parse a boolean input the way workflow inputs are usually written."""
    if isinstance(value, bool):
        return value
    text = _text(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ConfigValidationError(name, value, "a boolean (true or false)")


def parse_paths(value: Any) -> tuple[str, ...]:
    """Parse a path filter given as a list or as newline/comma separated text."""
    if not value:
        return ()
    if isinstance(value, str):
        items = value.replace(",", "\n").split("\n")
    else:
        items = [_text(item) for item in value]
    return tuple(item.strip() for item in items if item.strip())


def parse_non_negative_int(name: str, value: Any) -> int:
    try:
        number = int(_text(value).strip())
    except ValueError:
        raise ConfigValidationError(name, value, "a non-negative integer") from None
    if number < 0:
        raise ConfigValidationError(name, value, "a non-negative integer")
    return number


def parse_positive_int(name: str, value: Any) -> int:
    try:
        number = int(_text(value).strip())
    except ValueError:
        raise ConfigValidationError(name, value, "a positive integer") from None
    if number <= 0:
        raise ConfigValidationError(name, value, "a positive integer")
    return number


def parse_temperature(name: str, value: Any) -> float:
    requirement = f"a number between 0 and {MAX_TEMPERATURE:g}"
    try:
        number = float(_text(value).strip())
    except ValueError:
        raise ConfigValidationError(name, value, requirement) from None
    if math.isnan(number) or number < 0 or number > MAX_TEMPERATURE:
        raise ConfigValidationError(name, value, requirement)
    return number


def parse_provider(value: Any) -> LLMProvider:
    if not value:
        return DEFAULT_PROVIDER
    if isinstance(value, LLMProvider):
        return value
    try:
        return LLMProvider(_text(value).strip().lower())
    except ValueError:
        valid = ", ".join(p.value for p in LLMProvider)
        raise ConfigValidationError("provider", value, f"one of: {valid}") from None


def _pick(values: Mapping[str, Any], name: str, default: Any = None) -> Any:
    value = values.get(name)
    if value is None or (isinstance(value, str) and value == ""):
        return default
    return value


def load_settings(values: Mapping[str, Any], environ: Mapping[str, str]) -> Settings:
    """Validate raw settings and credentials into a Settings object.

    Args:
        values: Raw values keyed by input name. Missing or empty entries fall
            back to defaults.
        environ: Environment to read credentials from.

    Returns:
        The validated Settings.

    Raises:
        ConfigValidationError: If a value fails its check.
        MissingCredentialError: If a credential is missing.
    """
    from_ref = _text(values.get("from")).strip()
    if not from_ref:
        raise ConfigValidationError("from", values.get("from", ""), "a commit reference")

    provider = parse_provider(values.get("provider"))

    api_key_env_var = get_api_key_env_var(provider)
    llm_api_key = environ.get(api_key_env_var)
    if not llm_api_key:
        raise MissingCredentialError(api_key_env_var, f"call the {provider.value} API")

    x_bearer_token = environ.get(X_BEARER_TOKEN_ENV_VAR)
    if not x_bearer_token:
        raise MissingCredentialError(X_BEARER_TOKEN_ENV_VAR, "post to X")

    return Settings(
        from_ref=from_ref,
        to_ref=_text(values.get("to")).strip() or DEFAULT_TO_REF,
        include_start_commit=parse_bool(
            "include_start_commit", _pick(values, "include_start_commit", False)
        ),
        paths=parse_paths(values.get("paths")),
        max_diff_chars=parse_non_negative_int(
            "max_diff_chars", _pick(values, "max_diff_chars", DEFAULT_MAX_DIFF_CHARS)
        ),
        max_output_tokens=parse_positive_int(
            "max_output_tokens", _pick(values, "max_output_tokens", DEFAULT_MAX_OUTPUT_TOKENS)
        ),
        temperature=parse_temperature(
            "temperature", _pick(values, "temperature", DEFAULT_TEMPERATURE)
        ),
        provider=provider,
        model=_text(_pick(values, "model", DEFAULT_MODEL)),
        system_prompt=_text(_pick(values, "system_prompt", DEFAULT_SYSTEM_PROMPT)),
        extra_instructions=_text(values.get("extra_instructions")),
        prompt_override=_text(values.get("prompt")),
        tone=_text(values.get("tone")),
        call_to_action=_text(values.get("call_to_action")),
        community=_text(values.get("community")).strip(),
        hashtags=tuple(normalize_hashtags(values.get("hashtags"))),
        llm_api_key=llm_api_key,
        x_bearer_token=x_bearer_token,
    )
