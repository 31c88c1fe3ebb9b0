"""Static URL routing for the Gemini REST API."""

from .urls import MODEL_PLACEHOLDER, VERSION_PLACEHOLDER, ProviderModel, UrlModel, get_url

__all__ = ["ProviderModel", "UrlModel", "VERSION_PLACEHOLDER", "MODEL_PLACEHOLDER", "get_url"]
