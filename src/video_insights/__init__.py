"""Video Insights - video summaries, key points and topics from Gemini AI."""

__version__ = "0.1.0"

from .analyzer import AnalysisOutcome, AnalysisResult, ModelCatalog, ModelDescriptor
from .analyzer.exceptions import (
    ConfigurationError,
    NetworkError,
    RemoteError,
    StorageError,
    VideoInsightsError,
)
from .interfaces import PreferenceStore
from .preferences import Preferences
from .service import InvalidApiKeyError, VideoInsightsService

__all__ = [
    "AnalysisOutcome",
    "AnalysisResult",
    "ConfigurationError",
    "InvalidApiKeyError",
    "ModelCatalog",
    "ModelDescriptor",
    "NetworkError",
    "PreferenceStore",
    "Preferences",
    "RemoteError",
    "StorageError",
    "VideoInsightsError",
    "VideoInsightsService",
]
