from typing import Protocol


class AIProvider(Protocol):
    def generate_text(self, prompt: str) -> str:
        """Return the raw text generated for ``prompt`` (empty when nothing usable came back)."""
