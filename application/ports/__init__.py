from application.ports.ai_provider import AIProvider

__all__ = ["AIProvider"]
