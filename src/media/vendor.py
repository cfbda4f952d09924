from typing import Any, Dict, Optional

import requests

from src.specs.common.errors import UpstreamError


def vendor_error_message(err: Any) -> str:
    # OpenAI nests {"error": {"message": ...}}; Runway sends a plain string
    if isinstance(err, dict):
        return str(err.get("message") or err)
    return str(err)


def call_vendor(
    http: Any,
    method: str,
    url: str,
    *,
    vendor: str,
    headers: Dict[str, str],
    json: Optional[Dict[str, Any]] = None,
    timeout: Optional[float] = None,
) -> Dict[str, Any]:
    """Send one request and return the decoded JSON object.

    Transport failures, unparseable bodies and an `error` field in the reply
    all raise UpstreamError. The HTTP status is not checked separately: the
    vendors report failures through the `error` field.
    """
    try:
        if method == "GET":
            resp = http.get(url, headers=headers, timeout=timeout)
        else:
            resp = http.post(url, headers=headers, json=json, timeout=timeout)
    except requests.RequestException as exc:
        raise UpstreamError(str(exc), details={"vendor": vendor}) from exc

    try:
        data = resp.json()
    except ValueError as exc:
        raise UpstreamError(
            f"{vendor} returned an invalid response: {exc}",
            details={"vendor": vendor, "httpStatus": getattr(resp, "status_code", None)},
        ) from exc

    if not isinstance(data, dict):
        raise UpstreamError(f"{vendor} returned an unexpected response", details={"vendor": vendor})
    if data.get("error"):
        raise UpstreamError(vendor_error_message(data["error"]), details={"vendor": vendor})
    return data
