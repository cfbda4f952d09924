import traceback
from typing import Dict, Optional

import azure.functions as func

from src.specs.common.error_response_spec import ErrorResponse
from src.specs.common.errors import CreativeFunctionsError


# Every verb is routed to the handlers so they answer 405 themselves
ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]


def cors_headers(*methods: str) -> Dict[str, str]:
    allowed = ", ".join(list(methods) + ["OPTIONS"])
    return {
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Allow-Headers": "Content-Type, Authorization",
        "Access-Control-Allow-Methods": allowed,
        "Content-Type": "application/json",
    }


def json_response(body: str, headers: Dict[str, str], status_code: int = 200) -> func.HttpResponse:
    return func.HttpResponse(
        body=body,
        status_code=status_code,
        headers=dict(headers),
        mimetype="application/json",
    )


def preflight_response(headers: Dict[str, str]) -> func.HttpResponse:
    return json_response("", headers, status_code=200)


def error_response(
    exc: Exception,
    headers: Dict[str, str],
    *,
    include_trace: bool = False,
    fallback_message: str = "Internal error",
) -> func.HttpResponse:
    """Render any exception as `{error: message}` with the matching status.

    Application errors keep their own status; anything else is a 500.
    """
    if isinstance(exc, CreativeFunctionsError):
        status_code = exc.status_code
        message = exc.message or fallback_message
    else:
        status_code = 500
        message = str(exc) or fallback_message
    details: Optional[str] = None
    if include_trace and status_code >= 500:
        details = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    err = ErrorResponse(error=message, details=details)
    return json_response(err.model_dump_json(exclude_none=True), headers, status_code=status_code)
