"""Interfaces (Protocols) for dependency injection and testing."""

from typing import Protocol


class PreferenceStore(Protocol):
    """Durable string key/value store for credentials and preferences."""

    def get(self, key: str) -> str | None:
        """Return the stored value, or None if the key is unset."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store a value, replacing any previous one."""
        ...


class GenerativeClient(Protocol):
    """Protocol for a text generation client bound to one model."""

    def generate(self, prompt: str) -> str:
        """Submit a prompt and return the model's text reply."""
        ...
