from pydantic import BaseModel


class ApiKeyRequest(BaseModel):
    api_key: str


class ModelRequest(BaseModel):
    model: str


class ModelResponse(BaseModel):
    model: str


class ModelDescriptorResponse(BaseModel):
    id: str
    name: str
    description: str


class ModelListResponse(BaseModel):
    models: list[ModelDescriptorResponse]
    is_fallback: bool


class AnalyzeRequest(BaseModel):
    source: str


class AnalysisResultResponse(BaseModel):
    summary: str
    keyPoints: list[str]
    sentiment: str
    topics: list[str]


class AnalyzeResponse(BaseModel):
    result: AnalysisResultResponse
    status: str
    degraded: bool
    model: str
