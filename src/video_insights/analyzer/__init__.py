"""Analyzer module for Gemini model catalog and video analysis."""

from .analysis import AnalysisOutcome, analyze_video, request_analysis, video_reference
from .catalog import ModelCatalog, ModelDescriptor, fetch_available_models, fetch_model_catalog
from .parsing import AnalysisResult, decode_analysis

__all__ = [
    "AnalysisOutcome",
    "AnalysisResult",
    "ModelCatalog",
    "ModelDescriptor",
    "analyze_video",
    "decode_analysis",
    "fetch_available_models",
    "fetch_model_catalog",
    "request_analysis",
    "video_reference",
]
