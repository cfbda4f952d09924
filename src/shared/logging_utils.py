import logging
from typing import Any, Dict, Optional

from src.specs.common.errors import CreativeFunctionsError


_LOGGER = logging.getLogger("creative")


def error_dimensions(exc: Exception) -> Dict[str, Any]:
    """Flatten an exception into custom dimensions (code, vendor, status...)."""
    if isinstance(exc, CreativeFunctionsError):
        dims: Dict[str, Any] = dict(exc.details)
        dims.update({"error": exc.message, "code": exc.code, "statusCode": exc.status_code})
        return dims
    return {"error": str(exc), "code": type(exc).__name__, "statusCode": 500}


def log(level: int, request_id: Optional[str], message: str, **dimensions: Any) -> None:
    dims: Dict[str, Any] = {"requestId": request_id} if request_id else {}
    dims.update(dimensions)
    try:
        _LOGGER.log(level, message, extra={"custom_dimensions": dims})
    except Exception:
        # Fallback if extra/custom_dimensions not supported in the environment
        _LOGGER.log(level, f"{message} | {dims}")


def info(request_id: Optional[str], message: str, **dimensions: Any) -> None:
    log(logging.INFO, request_id, message, **dimensions)


def warning(request_id: Optional[str], message: str, **dimensions: Any) -> None:
    log(logging.WARNING, request_id, message, **dimensions)


def error(request_id: Optional[str], message: str, exc: Optional[Exception] = None, **dimensions: Any) -> None:
    dims: Dict[str, Any] = error_dimensions(exc) if exc is not None else {}
    dims.update(dimensions)
    log(logging.ERROR, request_id, message, **dims)
