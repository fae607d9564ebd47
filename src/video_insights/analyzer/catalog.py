"""Gemini model catalog with a static fallback."""

import logging
from dataclasses import dataclass, field

import requests

from ..config import settings
from ..preferences import Preferences
from .exceptions import ConfigurationError, NetworkError

logger = logging.getLogger(__name__)

MISSING_KEY_MESSAGE = "Please enter your Gemini API key to fetch available models"


@dataclass(frozen=True)
class ModelDescriptor:
    """A selectable Gemini model."""

    id: str
    name: str
    description: str


FALLBACK_MODELS: tuple[ModelDescriptor, ...] = (
    ModelDescriptor("gemini-1.5-pro", "Gemini 1.5 Pro", "Most capable model for highly complex tasks"),
    ModelDescriptor("gemini-1.5-flash", "Gemini 1.5 Flash", "Faster responses with slightly lower quality"),
    ModelDescriptor("gemini-1.0-pro", "Gemini 1.0 Pro", "Previous generation pro model"),
    ModelDescriptor("gemini-1.0-pro-vision", "Gemini 1.0 Pro Vision", "Specialized for vision tasks"),
)

# Order matters: first matching substring wins
DESCRIPTION_RULES: tuple[tuple[str, str], ...] = (
    ("pro", "Advanced model for complex tasks"),
    ("flash", "Optimized for speed and efficiency"),
    ("vision", "Specialized for vision and multimodal tasks"),
)
DEFAULT_DESCRIPTION = "General purpose AI model"


@dataclass
class ModelCatalog:
    """Catalog fetch result, flagged when the static fallback was served."""

    models: list[ModelDescriptor]
    is_fallback: bool = False
    error: str | None = None

    def __iter__(self):
        return iter(self.models)

    def __len__(self) -> int:
        return len(self.models)

    def __getitem__(self, index: int) -> ModelDescriptor:
        return self.models[index]

    def find(self, model_id: str) -> ModelDescriptor | None:
        return next((m for m in self.models if m.id == model_id), None)


def describe_model(model_id: str) -> str:
    """Heuristic description for a model the API did not describe."""
    for keyword, description in DESCRIPTION_RULES:
        if keyword in model_id:
            return description
    return DEFAULT_DESCRIPTION


def display_name(model_id: str) -> str:
    """'gemini-1.5-flash' -> 'Gemini 1.5 flash'."""
    label = model_id.replace("-", " ")
    return label[:1].upper() + label[1:]


def descriptor_from_api(entry: dict) -> ModelDescriptor:
    """Build a descriptor from one entry of the models.list payload."""
    model_id = entry["name"].split("/")[-1]
    return ModelDescriptor(
        id=model_id,
        name=display_name(model_id),
        description=entry.get("displayName") or entry.get("description") or describe_model(model_id),
    )


def _list_models(api_key: str) -> list[ModelDescriptor]:
    response = requests.get(
        settings.models_endpoint,
        params={"key": api_key},
        timeout=settings.request_timeout,
    )
    if not response.ok:
        raise NetworkError(response.status_code)

    data = response.json()
    return [
        descriptor_from_api(entry)
        for entry in data["models"]
        if "gemini" in entry["name"]
    ]


def fetch_model_catalog(preferences: Preferences) -> ModelCatalog:
    """Fetch the Gemini models available to the stored API key.

    Any failure after the key check degrades to FALLBACK_MODELS with
    ``is_fallback`` set.

    Raises:
        ConfigurationError: If no API key is stored.
    """
    api_key = preferences.get_key()
    if not api_key:
        raise ConfigurationError(MISSING_KEY_MESSAGE)

    try:
        models = _list_models(api_key)
    except (NetworkError, requests.RequestException, ValueError, KeyError, TypeError, AttributeError) as e:
        logger.error("Error fetching models from API: %s", e)
        return ModelCatalog(models=list(FALLBACK_MODELS), is_fallback=True, error=str(e))

    logger.debug("Fetched %d Gemini models", len(models))
    return ModelCatalog(models=models)


def fetch_available_models(preferences: Preferences) -> list[ModelDescriptor]:
    """Fetch the model list; the static fallback is indistinguishable here."""
    return fetch_model_catalog(preferences).models
