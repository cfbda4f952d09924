from __future__ import annotations

from typing import Dict, Type

from pydantic import BaseModel

from src.specs.common.error_response_spec import ErrorResponse
from src.specs.db.creative_usage import CostRecord, UsageEvent
from src.specs.http.generate_creative import (
    GenerateCreativeRequest,
    GenerateCreativeResponse,
    ImageOptions,
    ImageResult,
    VideoOptions,
    VideoResult,
)
from src.specs.http.video_status import TaskStatusResponse


# Registry mapping output schema filenames to models for generation
SCHEMA_MODELS: Dict[str, Type[BaseModel]] = {
    "generate_creative.request.schema.json": GenerateCreativeRequest,
    "generate_creative.response.schema.json": GenerateCreativeResponse,
    "image.options.schema.json": ImageOptions,
    "image.result.schema.json": ImageResult,
    "video.options.schema.json": VideoOptions,
    "video.result.schema.json": VideoResult,
    "video_status.response.schema.json": TaskStatusResponse,
    "usage.event.schema.json": UsageEvent,
    "cost.record.schema.json": CostRecord,
    "error.response.schema.json": ErrorResponse,
}

__all__ = [
    "GenerateCreativeRequest",
    "GenerateCreativeResponse",
    "ImageOptions",
    "ImageResult",
    "VideoOptions",
    "VideoResult",
    "TaskStatusResponse",
    "UsageEvent",
    "CostRecord",
    "ErrorResponse",
    "SCHEMA_MODELS",
]
