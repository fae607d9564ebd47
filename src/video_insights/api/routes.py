"""FastAPI routes for video insights API."""

import logging

from fastapi import FastAPI, HTTPException

from video_insights import __version__
from video_insights.api.schemas import (
    AnalysisResultResponse,
    AnalyzeRequest,
    AnalyzeResponse,
    ApiKeyRequest,
    ModelDescriptorResponse,
    ModelListResponse,
    ModelRequest,
    ModelResponse,
)

from ..analyzer.exceptions import ConfigurationError, RemoteError, StorageError
from ..logger import configure_logging
from ..service import InvalidApiKeyError, VideoInsightsService
from ..storage.database import DatabasePreferenceStore

logger = logging.getLogger(__name__)

configure_logging()

app = FastAPI(
    title="Video Insights API",
    description="Video summaries, key points and topics using Gemini AI",
    version=__version__,
)


def _create_service() -> VideoInsightsService:
    """Create a VideoInsightsService over the persistent preference store."""
    try:
        return VideoInsightsService(DatabasePreferenceStore())
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/")
async def root():
    """API root endpoint."""
    return {"message": "Video Insights API", "version": __version__}


@app.put("/key", status_code=204)
async def set_key(request: ApiKeyRequest):
    """Save the Gemini API key."""
    service = _create_service()
    try:
        service.set_key(request.api_key)
    except InvalidApiKeyError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/model", response_model=ModelResponse)
async def get_model():
    """Get the selected model id."""
    service = _create_service()
    try:
        return ModelResponse(model=service.get_model())
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))


@app.put("/model", response_model=ModelResponse)
async def set_model(request: ModelRequest):
    """Select the model used for analysis."""
    service = _create_service()
    try:
        service.set_model(request.model)
        return ModelResponse(model=service.get_model())
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/models", response_model=ModelListResponse)
async def list_models():
    """List available Gemini models."""
    service = _create_service()
    try:
        catalog = service.fetch_model_catalog()
    except ConfigurationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return ModelListResponse(
        models=[
            ModelDescriptorResponse(id=m.id, name=m.name, description=m.description)
            for m in catalog
        ],
        is_fallback=catalog.is_fallback,
    )


@app.post("/analyze", response_model=AnalyzeResponse)
async def analyze_video(request: AnalyzeRequest):
    """Analyze a video by file name or URL; the source is sent to the model as given."""
    service = _create_service()

    try:
        outcome = service.request_analysis(request.source, resolve_local_files=False)
    except ConfigurationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except RemoteError as e:
        raise HTTPException(status_code=502, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return AnalyzeResponse(
        result=AnalysisResultResponse(**outcome.result.to_dict()),
        status=outcome.status,
        degraded=outcome.degraded,
        model=outcome.model,
    )
