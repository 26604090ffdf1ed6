from datetime import datetime, timezone

def now_ms() -> int:
    """Current UTC time as epoch milliseconds (the unit every record stores)."""
    return int(datetime.now(timezone.utc).timestamp() * 1000)
