class VideoInsightsError(Exception):
    """Base class for video insights errors."""

    pass


class ConfigurationError(VideoInsightsError):
    """Raised when a required setting (the API key) is missing."""

    pass


class NetworkError(VideoInsightsError):
    """Raised when the Gemini REST API answers with a non-success status."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"API error: {status_code}")


class RemoteError(VideoInsightsError):
    """Raised when the analysis request to Gemini fails."""

    pass


class StorageError(VideoInsightsError):
    """Raised when the preference store cannot be read or written."""

    pass
