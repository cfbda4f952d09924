import json
import uuid
from time import perf_counter
from typing import Any, Dict, Optional, Tuple, Union

import azure.functions as func
from pydantic import BaseModel, ValidationError

from src.media.image_generator import generate_image
from src.media.video_generator import generate_video
from src.shared.config import FunctionSettings
from src.shared.http_utils import cors_headers, error_response, json_response, preflight_response
from src.shared.logging_utils import info as log_info, error as log_error
from src.shared.pricing import estimate_cost
from src.shared.usage_logger import build_usage_event, log_usage
from src.specs.common.enums import GenerationType
from src.specs.common.errors import InvalidRequest, MethodNotAllowed
from src.specs.db.creative_usage import CostRecord
from src.specs.http.generate_creative import (
    GenerateCreativeRequest,
    GenerateCreativeResponse,
    ImageOptions,
    VideoOptions,
)

HEADERS = cors_headers("POST")


def _validation_message(exc: ValidationError) -> str:
    parts = []
    for e in exc.errors():
        loc = ".".join(str(p) for p in e.get("loc", ()))
        parts.append(f"{loc}: {e.get('msg')}" if loc else str(e.get("msg")))
    return "; ".join(parts)


def parse_request(req: func.HttpRequest) -> GenerateCreativeRequest:
    try:
        data = req.get_json()
    except ValueError as exc:
        raise InvalidRequest("Invalid JSON body") from exc
    if not isinstance(data, dict):
        raise InvalidRequest("Request body must be a JSON object")

    try:
        parsed = GenerateCreativeRequest(**data)
    except ValidationError as exc:
        raise InvalidRequest(f"Invalid request: {_validation_message(exc)}") from exc

    if not parsed.type or not parsed.prompt:
        raise InvalidRequest("Missing required fields: type, prompt")
    return parsed


def resolve_type(value: Any) -> GenerationType:
    try:
        return GenerationType(value)
    except ValueError:
        raise InvalidRequest(f'Unknown type: {value}. Use "image" or "video"') from None


def resolve_options(gen_type: GenerationType, options: Dict[str, Any]) -> Union[ImageOptions, VideoOptions]:
    # null values fall back to the documented defaults
    provided = {k: v for k, v in options.items() if v is not None}
    model = ImageOptions if gen_type == GenerationType.IMAGE else VideoOptions
    try:
        return model(**provided)
    except ValidationError as exc:
        raise InvalidRequest(f"Invalid options: {_validation_message(exc)}") from exc


def generate(
    parsed: GenerateCreativeRequest,
    settings: FunctionSettings,
    *,
    session: Optional[Any] = None,
) -> Tuple[GenerationType, BaseModel, CostRecord]:
    gen_type = resolve_type(parsed.type)
    options = resolve_options(gen_type, parsed.options or {})
    if gen_type == GenerationType.IMAGE:
        result: BaseModel = generate_image(parsed.prompt, options, settings, session=session)
    else:
        result = generate_video(parsed.prompt, options, settings, session=session)
    return gen_type, result, estimate_cost(gen_type, options)


def handle_generate_creative(
    req: func.HttpRequest,
    settings: FunctionSettings,
    *,
    session: Optional[Any] = None,
) -> func.HttpResponse:
    """POST /generate-creative -> image URL or video task handle plus cost."""
    start = perf_counter()
    request_id = uuid.uuid4().hex
    method = (req.method or "").upper()
    if method == "OPTIONS":
        return preflight_response(HEADERS)

    try:
        if method != "POST":
            raise MethodNotAllowed(method)
        parsed = parse_request(req)
        log_info(request_id, "generate:request", type=parsed.type, customerId=parsed.customer_id)
        gen_type, result, cost = generate(parsed, settings, session=session)
    except Exception as exc:
        log_error(request_id, "generate:error", exc, method=method)
        return error_response(
            exc,
            HEADERS,
            include_trace=settings.development_mode,
            fallback_message="Generation failed",
        )

    if parsed.customer_id and settings.usage_logging_enabled:
        event = build_usage_event(parsed.customer_id, gen_type.value, cost)
        log_usage(event, settings, session=session, request_id=request_id)

    envelope = GenerateCreativeResponse(type=gen_type.value, cost=cost.cost).model_dump()
    envelope.update(result.model_dump())
    duration_ms = int((perf_counter() - start) * 1000)
    log_info(request_id, "generate:done", type=gen_type.value, costKey=cost.cost_key, durationMs=duration_ms)
    return json_response(json.dumps(envelope), HEADERS)
