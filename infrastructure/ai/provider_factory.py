from dataclasses import dataclass, field

from application.ports import AIProvider
from infrastructure.ai.gemini import GeminiProvider
from infrastructure.config.settings import Settings


_PROVIDER_NAME = "gemini"


@dataclass(frozen=True)
class AIProviderRuntime:
    provider: str
    model: str
    api_key: str = field(repr=False)
    adapter: AIProvider = field(repr=False)


def build_ai_provider_runtime(settings: Settings) -> AIProviderRuntime:
    adapter = GeminiProvider(
        api_key=settings.gemini_api_key,
        model=settings.gemini_model,
        timeout_seconds=settings.gemini_timeout_seconds,
        max_retries=settings.gemini_max_retries,
        retry_backoff_seconds=settings.gemini_retry_backoff_seconds,
    )
    return AIProviderRuntime(
        provider=_PROVIDER_NAME,
        model=adapter.model,
        api_key=settings.gemini_api_key,
        adapter=adapter,
    )
