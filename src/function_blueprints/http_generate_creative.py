import azure.functions as func

from src.functions.generate_creative import HEADERS, handle_generate_creative
from src.shared.config import FunctionSettings
from src.shared.http_utils import ALL_METHODS, error_response, preflight_response
from src.shared.logging_utils import error as log_error
from src.specs.common.errors import ConfigurationError


bp = func.Blueprint()


@bp.function_name(name="generate_creative")
@bp.route(route="generate-creative", methods=ALL_METHODS, auth_level=func.AuthLevel.ANONYMOUS)
def generate_creative(req: func.HttpRequest) -> func.HttpResponse:
    # Preflight never depends on configuration
    if (req.method or "").upper() == "OPTIONS":
        return preflight_response(HEADERS)
    try:
        settings = FunctionSettings.from_env()
    except ConfigurationError as exc:
        log_error(None, "generate:bad_config", exc)
        return error_response(exc, HEADERS)
    return handle_generate_creative(req, settings)
