"""
Video translator service.

Accepts uploaded videos, drives each through extraction, transcription,
translation and speech synthesis, and serves the translated audio track.
"""
