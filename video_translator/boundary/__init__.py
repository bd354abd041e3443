"""Boundary adapters: database, object storage and AI provider clients."""
