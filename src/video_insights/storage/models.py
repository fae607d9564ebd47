"""SQLModel data models for video insights."""

from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


def utc_now() -> datetime:
    """Timezone-aware current time in UTC."""
    return datetime.now(timezone.utc)


class Preference(SQLModel, table=True):
    """A persisted credential or user preference."""

    key: str = Field(primary_key=True)  # e.g. geminiApiKey, selectedGeminiModel
    value: str
    updated_at: datetime = Field(default_factory=utc_now)
