"""Plain-text rendering of analysis sections."""

from .analyzer.parsing import AnalysisResult

SECTIONS = ("summary", "keyPoints", "sentiment", "topics")


def format_section(result: AnalysisResult, section: str) -> str:
    """Render one section as copyable text."""
    if section == "summary":
        return result.summary
    if section == "keyPoints":
        return "\n".join(f"• {point}" for point in result.key_points)
    if section == "sentiment":
        return result.sentiment
    if section == "topics":
        return ", ".join(result.topics)
    raise ValueError(f"Unknown section: {section} (expected one of {', '.join(SECTIONS)})")
