from datetime import datetime, timezone

ISO_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"

def format_iso_datetime(dt: datetime) -> str:
    """Millisecond precision, UTC, trailing Z (e.g. 2024-11-06T10:15:30.123Z)."""
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc)
    return dt.strftime(ISO_FORMAT)[:-4] + "Z"

def utc_now_iso() -> str:
    return format_iso_datetime(datetime.now(timezone.utc))
