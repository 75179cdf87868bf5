"""Data providers for market rate configuration."""

from src.data.provider_factory import create_provider

__all__ = ["create_provider"]
