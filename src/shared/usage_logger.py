from typing import Any, Optional

import requests

from src.shared.config import FunctionSettings
from src.shared.logging_utils import info as log_info, warning as log_warning, error as log_error
from src.specs.common.datetime_utils import utc_now_iso
from src.specs.db.creative_usage import CostRecord, UsageEvent

USAGE_TABLE = "creative_usage"


def build_usage_event(customer_id: str, gen_type: str, cost: CostRecord) -> UsageEvent:
    return UsageEvent(
        customer_id=customer_id,
        type=gen_type,
        cost=cost.cost,
        cost_key=cost.cost_key,
        created_at=utc_now_iso(),
    )


def log_usage(
    event: UsageEvent,
    settings: FunctionSettings,
    *,
    session: Optional[Any] = None,
    request_id: Optional[str] = None,
) -> bool:
    """Insert one row into the usage table via Supabase REST.

    Best-effort: returns False instead of raising when the store is not
    configured or the write fails, so billing rows can be lost.
    """
    if not settings.supabase_url or not settings.supabase_service_role_key:
        log_warning(request_id, "usage:not_configured", customerId=event.customer_id)
        return False

    http = session or requests
    key = settings.supabase_service_role_key
    try:
        resp = http.post(
            f"{settings.supabase_url}/rest/v1/{USAGE_TABLE}",
            headers={
                "apikey": key,
                "Authorization": f"Bearer {key}",
                "Content-Type": "application/json",
                "Prefer": "return=minimal",
            },
            json=event.model_dump(),
            timeout=settings.http_timeout_seconds,
        )
        resp.raise_for_status()
    except Exception as exc:
        # Usage tracking must never fail the generation response
        log_error(request_id, "usage:write_failed", exc, customerId=event.customer_id)
        return False

    log_info(request_id, "usage:logged", customerId=event.customer_id, costKey=event.cost_key)
    return True
