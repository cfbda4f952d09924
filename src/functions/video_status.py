import uuid
from typing import Any, Optional

import azure.functions as func

from src.media.video_generator import get_task_status
from src.shared.config import FunctionSettings
from src.shared.http_utils import cors_headers, error_response, json_response, preflight_response
from src.shared.logging_utils import info as log_info, error as log_error
from src.specs.common.errors import CreativeFunctionsError, InvalidRequest, MethodNotAllowed

HEADERS = cors_headers("GET")


def handle_video_status(
    req: func.HttpRequest,
    settings: FunctionSettings,
    *,
    session: Optional[Any] = None,
) -> func.HttpResponse:
    """GET /video-status?task_id=... -> normalized Runway task status."""
    request_id = uuid.uuid4().hex
    method = (req.method or "").upper()
    if method == "OPTIONS":
        return preflight_response(HEADERS)

    try:
        if method != "GET":
            raise MethodNotAllowed(method)
        task_id = (req.params.get("task_id") or "").strip()
        if not task_id:
            raise InvalidRequest("Missing task_id parameter")
    except CreativeFunctionsError as exc:
        log_error(request_id, "video_status:rejected", exc, method=method)
        return error_response(exc, HEADERS)

    log_info(request_id, "video_status:request", taskId=task_id)
    try:
        status = get_task_status(task_id, settings, session=session)
    except Exception as exc:
        log_error(request_id, "video_status:error", exc, taskId=task_id)
        return error_response(exc, HEADERS, fallback_message="Status check failed")

    log_info(request_id, "video_status:done", taskId=task_id, status=status.status, rawStatus=status.raw_status)
    return json_response(status.to_json(), HEADERS)
