"""Video Insights Service - entry points used by the CLI and the API."""

from .analyzer.analysis import (
    AnalysisOutcome,
    ClientFactory,
    analyze_video,
    request_analysis,
    video_reference,
)
from .analyzer.catalog import ModelCatalog, ModelDescriptor, fetch_available_models, fetch_model_catalog
from .analyzer.gemini import GeminiClient
from .analyzer.parsing import AnalysisResult
from .interfaces import PreferenceStore
from .preferences import Preferences


class InvalidApiKeyError(ValueError):
    """Raised when a blank API key is submitted."""

    def __init__(self):
        super().__init__("Please enter a valid API key")


class VideoInsightsService:
    """Service layer over the preference store, catalog and analyzer."""

    def __init__(
        self,
        store: PreferenceStore,
        client_factory: ClientFactory = GeminiClient,
    ):
        self.preferences = Preferences(store)
        self.client_factory = client_factory

    def set_key(self, key: str) -> None:
        """Store the API key, trimmed.

        Raises:
            InvalidApiKeyError: If the key is blank.
        """
        key = key.strip()
        if not key:
            raise InvalidApiKeyError()
        self.preferences.set_key(key)

    def has_key(self) -> bool:
        return bool(self.preferences.get_key())

    def masked_key(self) -> str:
        key = self.preferences.get_key()
        return "***" + key[-4:] if key else "Not set"

    def get_model(self) -> str:
        return self.preferences.get_model()

    def set_model(self, model_id: str) -> None:
        self.preferences.set_model(model_id.strip())

    def fetch_available_models(self) -> list[ModelDescriptor]:
        return fetch_available_models(self.preferences)

    def fetch_model_catalog(self) -> ModelCatalog:
        return fetch_model_catalog(self.preferences)

    def analyze_video(self, source: str) -> AnalysisResult:
        return analyze_video(self.preferences, video_reference(source), self.client_factory)

    def request_analysis(self, source: str, resolve_local_files: bool = True) -> AnalysisOutcome:
        """Analyze a local file (by name) or a URL, keeping the parse status.

        With ``resolve_local_files=False`` the source is never looked up on
        the local filesystem and goes to the model unchanged.
        """
        video_info = video_reference(source) if resolve_local_files else source
        return request_analysis(self.preferences, video_info, self.client_factory)
