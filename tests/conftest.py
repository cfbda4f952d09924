from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Tuple

import azure.functions as func
import pytest
import requests

from src.shared.config import FunctionSettings


class FakeResponse:
    def __init__(self, payload: Any = None, *, status_code: int = 200, text: Optional[str] = None) -> None:
        self.payload = payload
        self.status_code = status_code
        self.text = text

    def json(self) -> Any:
        if self.text is not None:
            return json.loads(self.text)
        return self.payload

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")


class FakeSession:
    """Stands in for the `requests` module; routes by URL substring."""

    def __init__(self) -> None:
        self.routes: List[Tuple[str, str, Any]] = []
        self.calls: List[Dict[str, Any]] = []

    def add(self, method: str, url_part: str, reply: Any) -> "FakeSession":
        self.routes.append((method, url_part, reply))
        return self

    def _dispatch(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"method": method, "url": url, **kwargs})
        for m, part, reply in self.routes:
            if m == method and part in url:
                if isinstance(reply, Exception):
                    raise reply
                return reply
        raise AssertionError(f"unexpected {method} {url}")

    def get(self, url: str, **kwargs: Any) -> FakeResponse:
        return self._dispatch("GET", url, **kwargs)

    def post(self, url: str, **kwargs: Any) -> FakeResponse:
        return self._dispatch("POST", url, **kwargs)

    def calls_to(self, url_part: str) -> List[Dict[str, Any]]:
        return [c for c in self.calls if url_part in c["url"]]


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def settings() -> FunctionSettings:
    return FunctionSettings(
        openai_api_key="sk-test",
        runway_api_key="rw-test",
        supabase_url="https://db.example.supabase.co",
        supabase_service_role_key="service-key",
    )


def make_request(
    method: str,
    url: str,
    *,
    body: Any = None,
    raw_body: Optional[bytes] = None,
    params: Optional[Dict[str, str]] = None,
) -> func.HttpRequest:
    if raw_body is None:
        raw_body = b"" if body is None else json.dumps(body).encode("utf-8")
    return func.HttpRequest(
        method=method,
        url=url,
        headers={"Content-Type": "application/json"},
        params=params or {},
        body=raw_body,
    )


def body_of(resp: func.HttpResponse) -> Dict[str, Any]:
    return json.loads(resp.get_body().decode("utf-8"))
