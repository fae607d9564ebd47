"""Credential and model preference access on top of a PreferenceStore."""

from .config import settings
from .interfaces import PreferenceStore

API_KEY_PREF = "geminiApiKey"
MODEL_PREF = "selectedGeminiModel"


class Preferences:
    """Reads and writes the Gemini API key and the selected model id."""

    def __init__(self, store: PreferenceStore, default_model: str | None = None):
        self.store = store
        self.default_model = default_model or settings.default_model

    def get_key(self) -> str:
        """Stored API key, or an empty string if none is set."""
        return self.store.get(API_KEY_PREF) or ""

    def set_key(self, key: str) -> None:
        self.store.set(API_KEY_PREF, key)

    def get_model(self) -> str:
        """Selected model id, falling back to the default model."""
        return self.store.get(MODEL_PREF) or self.default_model

    def set_model(self, model_id: str) -> None:
        # Not checked against the catalog; a stale id goes to the API as-is
        self.store.set(MODEL_PREF, model_id)
