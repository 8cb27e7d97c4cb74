"""Clients for external collaborators."""

from farmbooks.clients.gemini import GeminiAdviceClient

__all__ = ["GeminiAdviceClient"]
