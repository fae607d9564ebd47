"""Schema-validated decoding of the model's analysis reply."""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, ValidationError

RAW_PREVIEW_CHARS = 100

PARSE_FAILURE_KEY_POINTS = [
    "API returned non-JSON response",
    "Check your prompt formatting",
    "Try a different video",
    "Ensure API key is valid",
    "Contact support if issue persists",
]
PARSE_FAILURE_SENTIMENT = "Unable to determine sentiment from non-JSON response"
PARSE_FAILURE_TOPICS = ["API Error", "Parsing Issue"]


class AnalysisResult(BaseModel):
    """Summary, key points, sentiment and topics of one video."""

    model_config = ConfigDict(populate_by_name=True, strict=True)

    summary: str
    key_points: list[str] = Field(alias="keyPoints")
    sentiment: str
    topics: list[str]

    def to_dict(self) -> dict:
        """Serialize with the wire key names (``keyPoints``)."""
        return self.model_dump(by_alias=True)


@dataclass(frozen=True)
class ParsedAnalysis:
    """Reply decoded into a valid AnalysisResult."""

    result: AnalysisResult


@dataclass(frozen=True)
class MalformedResponse:
    """Reply that is not JSON or does not match the AnalysisResult schema."""

    raw_text: str
    reason: str


def decode_analysis(text: str) -> ParsedAnalysis | MalformedResponse:
    """Decode the model's text reply without raising."""
    try:
        return ParsedAnalysis(AnalysisResult.model_validate_json(text))
    except ValidationError as e:
        return MalformedResponse(raw_text=text, reason=str(e))


def parse_failure_result(raw_text: str) -> AnalysisResult:
    """Diagnostic result shown in place of an unparseable reply."""
    return AnalysisResult(
        summary=(
            "The API response couldn't be parsed as JSON. Here's the raw text: "
            + raw_text[:RAW_PREVIEW_CHARS]
            + "..."
        ),
        key_points=list(PARSE_FAILURE_KEY_POINTS),
        sentiment=PARSE_FAILURE_SENTIMENT,
        topics=list(PARSE_FAILURE_TOPICS),
    )
