import logging
import os
import re
import sys
from typing import Any

from infrastructure.observability.context import get_run_id


REDACTED = "[REDACTED]"
LOG_FORMAT = "%(asctime)s %(levelname)s [run_id=%(run_id)s] %(name)s - %(message)s"

# (padrao, substituicao): o prefixo capturado fica, o segredo sai.
_REDACTION_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"([?&]key=)[^&\s\"']+", re.IGNORECASE), rf"\1{REDACTED}"),
    (re.compile(r"(Bearer\s+)[A-Za-z0-9_\-.]+", re.IGNORECASE), rf"\1{REDACTED}"),
    (re.compile(r"\b(?:gh[pousr]|github_pat)_[A-Za-z0-9_]+\b"), REDACTED),
)
_registered_secrets: set[str] = set()


def register_sensitive_values(*values: str) -> None:
    _registered_secrets.update(value for value in values if value)


def redact_secrets(text: str) -> str:
    # Mais longos primeiro, para um segredo que contem outro nao vazar pela metade.
    for secret in sorted(_registered_secrets, key=len, reverse=True):
        text = text.replace(secret, REDACTED)
    for pattern, replacement in _REDACTION_RULES:
        text = pattern.sub(replacement, text)
    return text


def safe_message(message: str) -> str:
    return redact_secrets(message)


class RunIdFilter(logging.Filter):
    """Stamps every record that reaches a handler with the current run id."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.run_id = get_run_id()
        return True


def resolve_log_level(level_name: str | None = None) -> int:
    name = (level_name or os.getenv("LOG_LEVEL") or "INFO").strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(level_name: str | None = None) -> None:
    """Sends records to stderr with the run id; safe to call more than once."""
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(
            level=resolve_log_level(level_name),
            format=LOG_FORMAT,
            stream=sys.stderr,
        )

    for handler in root_logger.handlers:
        if not any(isinstance(existing, RunIdFilter) for existing in handler.filters):
            handler.addFilter(RunIdFilter())


def _render_value(value: Any) -> str:
    if isinstance(value, bool):
        rendered = str(value).lower()
    elif isinstance(value, (int, float)):
        rendered = str(value)
    else:
        rendered = safe_message(value if isinstance(value, str) else repr(value))
    # Uma linha por evento: quebras de linha viram \n literal.
    return (
        rendered.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\r", "\\r")
        .replace("\n", "\\n")
    )


def structured_message(event: str, **fields: Any) -> str:
    rendered_fields = (
        f'{name}="{_render_value(value)}"'
        for name, value in fields.items()
        if value is not None
    )
    return " ".join([f"event={safe_message(event)}", *rendered_fields])


def log_event(logger: logging.Logger, level: int, event: str, **fields: Any) -> None:
    if logger.isEnabledFor(level):
        logger.log(level, structured_message(event, **fields))
