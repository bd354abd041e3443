"""
AI provider clients.

Exports:
  - WhisperClient: Speech recognition (OpenAI)
  - GoogleTranslateClient: Machine translation (Google Translate v2)
  - ElevenLabsClient: Speech synthesis (ElevenLabs)
  - RetryPolicy: Bounded retry settings shared by all clients
"""

from video_translator.boundary.providers.base import ProviderClient, RetryPolicy
from video_translator.boundary.providers.elevenlabs_client import ElevenLabsClient
from video_translator.boundary.providers.google_translate_client import GoogleTranslateClient
from video_translator.boundary.providers.whisper_client import TranscriptionResult, WhisperClient

__all__ = [
    "ProviderClient",
    "RetryPolicy",
    "ElevenLabsClient",
    "GoogleTranslateClient",
    "TranscriptionResult",
    "WhisperClient",
]
