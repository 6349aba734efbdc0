import math
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from domain.description.prompt_builder import DEFAULT_OUTPUT_LANGUAGE
from domain.errors import ConfigurationError, MissingCredentialError
from infrastructure.ai.gemini.adapter import (
    DEFAULT_MAX_RETRIES,
    DEFAULT_MODEL,
    DEFAULT_RETRY_BACKOFF_SECONDS,
    DEFAULT_TIMEOUT_SECONDS,
)


TOOL_DIRECTORY = Path(__file__).resolve().parents[2]
DEFAULT_TARGET_BRANCH = "develop"
DEFAULT_EDITOR = "vim"
DEFAULT_REMOTE = "origin"


def load_environment(tool_directory: Path = TOOL_DIRECTORY) -> None:
    # Variaveis ja exportadas no shell sempre vencem o arquivo .env.
    load_dotenv(tool_directory / ".env", override=False)
    load_dotenv(find_dotenv(usecwd=True), override=False)


def _required_env(name: str) -> str:
    value = os.getenv(name)
    if not value:
        raise MissingCredentialError(
            f"{name} not found. Please set it in the .env file or your shell environment."
        )
    return value


def _env_or_default(name: str, default: str) -> str:
    value = os.getenv(name, "").strip()
    return value or default


def _float_env(name: str, default: float, *, allow_zero: bool = False) -> float:
    raw_value = _env_or_default(name, str(default))
    try:
        value = float(raw_value)
    except ValueError as error:
        raise ConfigurationError(f"Invalid {name} '{raw_value}': expected a number") from error
    # float() aceita "nan" e "inf"; requests e time.sleep nao.
    if not math.isfinite(value) or value < 0 or (value == 0 and not allow_zero):
        expected = "a finite number >= 0" if allow_zero else "a finite number > 0"
        raise ConfigurationError(f"Invalid {name} '{raw_value}': expected {expected}")
    return value


def _int_env(name: str, default: int) -> int:
    raw_value = _env_or_default(name, str(default))
    try:
        value = int(raw_value)
    except ValueError as error:
        raise ConfigurationError(f"Invalid {name} '{raw_value}': expected an integer") from error
    if value < 0:
        raise ConfigurationError(f"Invalid {name} '{raw_value}': must not be negative")
    return value


@dataclass(frozen=True)
class Settings:
    gemini_api_key: str = field(repr=False)
    gemini_model: str = DEFAULT_MODEL
    gemini_timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    gemini_max_retries: int = DEFAULT_MAX_RETRIES
    gemini_retry_backoff_seconds: float = DEFAULT_RETRY_BACKOFF_SECONDS
    editor: str = DEFAULT_EDITOR
    description_language: str = DEFAULT_OUTPUT_LANGUAGE
    remote: str = DEFAULT_REMOTE

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            gemini_api_key=_required_env("GEMINI_API_KEY"),
            gemini_model=_env_or_default("GEMINI_MODEL", DEFAULT_MODEL),
            gemini_timeout_seconds=_float_env("GEMINI_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS),
            gemini_max_retries=_int_env("GEMINI_MAX_RETRIES", DEFAULT_MAX_RETRIES),
            gemini_retry_backoff_seconds=_float_env(
                "GEMINI_RETRY_BACKOFF_SECONDS",
                DEFAULT_RETRY_BACKOFF_SECONDS,
                allow_zero=True,
            ),
            editor=_env_or_default("EDITOR", DEFAULT_EDITOR),
            description_language=_env_or_default("PR_DESCRIPTION_LANGUAGE", DEFAULT_OUTPUT_LANGUAGE),
            remote=_env_or_default("GIT_REMOTE", DEFAULT_REMOTE),
        )
