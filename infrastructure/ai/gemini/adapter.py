import logging
import time
from dataclasses import dataclass, field
from typing import Any

import requests

from application.ports import AIProvider
from domain.errors import GenerationTransportError
from infrastructure.observability.logging_utils import log_event, safe_message


logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.5-flash-lite"
DEFAULT_TIMEOUT_SECONDS = 60.0
DEFAULT_MAX_RETRIES = 1
DEFAULT_RETRY_BACKOFF_SECONDS = 2.0

_API_URL_TEMPLATE = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"
_RETRYABLE_STATUS_CODES = {429, 500, 502, 503, 504}


class _RetryableResponseError(Exception):
    def __init__(self, status_code: int, details: str) -> None:
        super().__init__(f"HTTP {status_code}: {details}")
        self.status_code = status_code


def extract_generated_text(payload: Any) -> str:
    # Equivalente a candidates?.[0]?.content?.parts?.[0]?.text || ""
    try:
        text = payload["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return ""
    return text if isinstance(text, str) else ""


@dataclass(frozen=True)
class GeminiProvider(AIProvider):
    api_key: str = field(repr=False)
    model: str = DEFAULT_MODEL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    max_retries: int = DEFAULT_MAX_RETRIES
    retry_backoff_seconds: float = DEFAULT_RETRY_BACKOFF_SECONDS
    session: requests.Session = field(default_factory=requests.Session, repr=False)

    @property
    def endpoint(self) -> str:
        return _API_URL_TEMPLATE.format(model=self.model)

    def generate_text(self, prompt: str) -> str:
        request_body = {"contents": [{"parts": [{"text": prompt}]}]}

        attempts = self.max_retries + 1
        last_error: Exception | None = None
        for attempt in range(1, attempts + 1):
            log_event(
                logger,
                logging.INFO,
                "gemini.request.start",
                model=self.model,
                attempt=attempt,
                prompt_chars=len(prompt),
            )
            try:
                return self._request(request_body)
            except (requests.Timeout, requests.ConnectionError, _RetryableResponseError) as error:
                last_error = error
                log_event(
                    logger,
                    logging.WARNING,
                    "gemini.request.retryable_failure",
                    attempt=attempt,
                    error=str(error),
                )

            if attempt < attempts:
                time.sleep(self.retry_backoff_seconds * attempt)

        error_message = safe_message(str(last_error)) if last_error else "unknown Gemini transport error"
        raise GenerationTransportError(
            f"Failed to get response from Gemini after {attempts} attempts: {error_message}"
        )

    def _request(self, request_body: dict[str, Any]) -> str:
        try:
            response = self.session.post(
                self.endpoint,
                params={"key": self.api_key},
                json=request_body,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout_seconds,
            )
        except (requests.Timeout, requests.ConnectionError):
            raise
        except requests.RequestException as error:
            raise GenerationTransportError(
                safe_message(f"Gemini request failed: {error}")
            ) from error

        if response.status_code >= 400:
            details = safe_message(response.text[:500])
            log_event(
                logger,
                logging.ERROR,
                "gemini.request.http_error",
                status_code=response.status_code,
                details=details,
            )
            if response.status_code in _RETRYABLE_STATUS_CODES:
                raise _RetryableResponseError(response.status_code, details)
            raise GenerationTransportError(
                f"Gemini request failed ({response.status_code}): {details}"
            )

        try:
            payload = response.json()
        except ValueError as error:
            # JSON malformado: registra e devolve texto vazio (o fluxo trata como falha).
            log_event(logger, logging.ERROR, "gemini.response.malformed", error=str(error))
            return ""

        generated_text = extract_generated_text(payload)
        log_event(logger, logging.INFO, "gemini.response.received", text_chars=len(generated_text))
        return generated_text
