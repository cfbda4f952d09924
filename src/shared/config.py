import os
from typing import Mapping, Optional

from pydantic import BaseModel

from src.specs.common.errors import ConfigurationError


def _env(environ: Mapping[str, str], name: str, default: Optional[str] = None) -> Optional[str]:
    v = environ.get(name)
    if v is None or v.strip() == "":
        return default
    return v.strip()


class FunctionSettings(BaseModel):
    """Process configuration consumed by the HTTP handlers.

    Built per invocation with `from_env()` and passed into each handler, so
    nothing is cached between requests and tests can supply values directly.
    """

    openai_api_key: Optional[str] = None
    openai_base_url: str = "https://api.openai.com/v1"
    runway_api_key: Optional[str] = None
    runway_base_url: str = "https://api.dev.runwayml.com/v1"
    runway_api_version: str = "2024-11-06"
    supabase_url: Optional[str] = None
    supabase_service_role_key: Optional[str] = None
    development_mode: bool = False
    http_timeout_seconds: Optional[float] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "FunctionSettings":
        env = os.environ if environ is None else environ
        timeout = _env(env, "HTTP_TIMEOUT_SECONDS")
        try:
            timeout_value = float(timeout) if timeout else None
        except ValueError as exc:
            raise ConfigurationError(f"HTTP_TIMEOUT_SECONDS is not a number: {timeout}") from exc
        if timeout_value is not None and timeout_value <= 0:
            raise ConfigurationError(f"HTTP_TIMEOUT_SECONDS must be positive: {timeout}")
        return cls(
            openai_api_key=_env(env, "OPENAI_API_KEY"),
            openai_base_url=_env(env, "OPENAI_BASE_URL", "https://api.openai.com/v1").rstrip("/"),
            runway_api_key=_env(env, "RUNWAY_API_KEY"),
            runway_base_url=_env(env, "RUNWAY_BASE_URL", "https://api.dev.runwayml.com/v1").rstrip("/"),
            runway_api_version=_env(env, "RUNWAY_API_VERSION", "2024-11-06"),
            supabase_url=(_env(env, "SUPABASE_URL") or "").rstrip("/") or None,
            supabase_service_role_key=_env(env, "SUPABASE_SERVICE_ROLE_KEY"),
            development_mode=(_env(env, "AZURE_FUNCTIONS_ENVIRONMENT", "") or "").lower() == "development",
            http_timeout_seconds=timeout_value,
        )

    def require_openai_key(self) -> str:
        if not self.openai_api_key:
            raise ConfigurationError("OPENAI_API_KEY not configured")
        return self.openai_api_key

    def require_runway_key(self) -> str:
        if not self.runway_api_key:
            raise ConfigurationError("RUNWAY_API_KEY not configured")
        return self.runway_api_key

    @property
    def usage_logging_enabled(self) -> bool:
        return bool(self.supabase_url)
