"""
Common exception classes for the application
"""
from typing import Optional, Dict, Any

class CreativeFunctionsError(Exception):
    """Base exception class for Creative Functions errors"""
    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}


class InvalidRequest(CreativeFunctionsError):
    """Raised when client-supplied data fails validation"""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="INVALID_REQUEST", status_code=400, details=details)

class MethodNotAllowed(CreativeFunctionsError):
    """Raised when a handler is called with an unsupported HTTP verb"""
    def __init__(self, method: str):
        super().__init__("Method not allowed", code="METHOD_NOT_ALLOWED", status_code=405, details={"method": method})

class ConfigurationError(CreativeFunctionsError):
    """Raised when there's an error in configuration or environment variables"""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="CONFIGURATION_ERROR", status_code=500, details=details)

class UpstreamError(CreativeFunctionsError):
    """Raised when a vendor call fails, reports an error, or returns an unreadable body"""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="UPSTREAM_ERROR", status_code=500, details=details)
