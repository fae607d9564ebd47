"""Video analysis requests against the selected Gemini model."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Literal

from ..interfaces import GenerativeClient
from ..preferences import Preferences
from .exceptions import ConfigurationError
from .gemini import GeminiClient
from .parsing import AnalysisResult, MalformedResponse, decode_analysis, parse_failure_result
from .prompts import video_analysis

logger = logging.getLogger(__name__)

MISSING_KEY_MESSAGE = "Please enter your Gemini API key to analyze videos"

ClientFactory = Callable[[str, str], GenerativeClient]


@dataclass
class AnalysisOutcome:
    """Analysis result plus whether it came from a well-formed reply."""

    result: AnalysisResult
    status: Literal["ok", "malformed"]
    model: str
    raw_text: str

    @property
    def degraded(self) -> bool:
        return self.status == "malformed"


def video_reference(source: str) -> str:
    """What the model is told about the video.

    Local files are referred to by file name only; anything else (a URL)
    is passed through verbatim.
    """
    path = Path(source).expanduser()
    try:
        if path.is_file():
            return path.name
    except OSError:
        pass
    return source


def request_analysis(
    preferences: Preferences,
    video_info: str,
    client_factory: ClientFactory = GeminiClient,
) -> AnalysisOutcome:
    """Ask the selected model to analyze a video by name or URL.

    Raises:
        ConfigurationError: If no API key is stored.
        RemoteError: If the Gemini request fails.
    """
    api_key = preferences.get_key()
    if not api_key:
        raise ConfigurationError(MISSING_KEY_MESSAGE)

    model = preferences.get_model()
    client = client_factory(api_key, model)

    logger.info("Analyzing %r with %s", video_info, model)
    text = client.generate(video_analysis(video_info))

    decoded = decode_analysis(text)
    if isinstance(decoded, MalformedResponse):
        logger.error("Error parsing Gemini response: %s", decoded.reason)
        return AnalysisOutcome(
            result=parse_failure_result(decoded.raw_text),
            status="malformed",
            model=model,
            raw_text=text,
        )

    return AnalysisOutcome(result=decoded.result, status="ok", model=model, raw_text=text)


def analyze_video(
    preferences: Preferences,
    video_info: str,
    client_factory: ClientFactory = GeminiClient,
) -> AnalysisResult:
    """Analyze a video; unparseable replies come back as a diagnostic result."""
    return request_analysis(preferences, video_info, client_factory).result
