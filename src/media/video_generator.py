from typing import Any, Dict, Optional
from urllib.parse import quote

import requests

from src.media.vendor import call_vendor
from src.shared.config import FunctionSettings
from src.specs.common.enums import RunwayTaskStatus, TaskState
from src.specs.common.errors import UpstreamError
from src.specs.http.generate_creative import VideoOptions, VideoResult
from src.specs.http.video_status import TaskStatusResponse

VIDEO_RATIO = "16:9"


def _runway_headers(settings: FunctionSettings, *, with_body: bool) -> Dict[str, str]:
    headers = {
        "Authorization": f"Bearer {settings.require_runway_key()}",
        "X-Runway-Version": settings.runway_api_version,
    }
    if with_body:
        headers["Content-Type"] = "application/json"
    return headers


def task_url(settings: FunctionSettings, task_id: str) -> str:
    return f"{settings.runway_base_url}/tasks/{quote(str(task_id), safe='')}"


def generate_video(
    prompt: str,
    options: VideoOptions,
    settings: FunctionSettings,
    *,
    session: Optional[Any] = None,
) -> VideoResult:
    """Start a Runway text-to-video task. Generation is asynchronous, so only
    the task handle and its poll URL are returned."""
    headers = _runway_headers(settings, with_body=True)
    http = session or requests

    body = {
        "model": options.model,
        "prompt_text": prompt,
        "duration": options.duration,
        "watermark": False,
        "ratio": VIDEO_RATIO,
    }
    data = call_vendor(
        http,
        "POST",
        f"{settings.runway_base_url}/text_to_video",
        vendor="runway",
        headers=headers,
        json=body,
        timeout=settings.http_timeout_seconds,
    )

    task_id = data.get("id")
    if not task_id:
        raise UpstreamError("runway returned no task id", details={"vendor": "runway"})
    return VideoResult(
        task_id=str(task_id),
        poll_url=task_url(settings, task_id),
        model=options.model,
        duration=options.duration,
    )


def normalize_task_status(task_id: str, data: Dict[str, Any]) -> TaskStatusResponse:
    raw_status = data.get("status")
    video_url = None
    if raw_status == RunwayTaskStatus.SUCCEEDED.value:
        status = TaskState.COMPLETED
        output = data.get("output") or []
        video_url = output[0] if isinstance(output, list) and output else None
    elif raw_status == RunwayTaskStatus.FAILED.value:
        status = TaskState.FAILED
    else:
        status = TaskState.PROCESSING
    return TaskStatusResponse(
        task_id=task_id,
        status=status.value,
        video_url=video_url,
        progress=data.get("progress"),
        raw_status=raw_status,
    )


def get_task_status(
    task_id: str,
    settings: FunctionSettings,
    *,
    session: Optional[Any] = None,
) -> TaskStatusResponse:
    headers = _runway_headers(settings, with_body=False)
    http = session or requests
    data = call_vendor(
        http,
        "GET",
        task_url(settings, task_id),
        vendor="runway",
        headers=headers,
        timeout=settings.http_timeout_seconds,
    )
    return normalize_task_status(task_id, data)
