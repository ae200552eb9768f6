"""Configuration module."""

from api_envelope.config.settings import EnvelopeSettings

__all__ = ["EnvelopeSettings"]
