from typing import Any, Dict, Optional

import requests

from src.media.vendor import call_vendor
from src.shared.config import FunctionSettings
from src.specs.common.errors import UpstreamError
from src.specs.http.generate_creative import ImageOptions, ImageResult


def generate_image(
    prompt: str,
    options: ImageOptions,
    settings: FunctionSettings,
    *,
    session: Optional[Any] = None,
) -> ImageResult:
    """Generate one image via the OpenAI Images API and return its URL.

    Raises ConfigurationError when OPENAI_API_KEY is missing and UpstreamError
    when the vendor call fails.
    """
    api_key = settings.require_openai_key()
    http = session or requests

    body = {
        "model": options.model,
        "prompt": prompt,
        "n": 1,
        "size": options.size,
        "quality": options.quality,
        "style": options.style,
        "response_format": "url",
    }
    data = call_vendor(
        http,
        "POST",
        f"{settings.openai_base_url}/images/generations",
        vendor="openai",
        headers={"Authorization": f"Bearer {api_key}", "Content-Type": "application/json"},
        json=body,
        timeout=settings.http_timeout_seconds,
    )

    images = data.get("data") or []
    if not images or not isinstance(images[0], dict):
        raise UpstreamError("openai returned no image data", details={"vendor": "openai"})
    first: Dict[str, Any] = images[0]
    return ImageResult(
        image_url=first.get("url"),
        revised_prompt=first.get("revised_prompt"),
        model=options.model,
        size=options.size,
        quality=options.quality,
    )
