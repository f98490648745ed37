from datetime import datetime, timezone


def utcnow() -> datetime:
    """Timezone-aware UTC clock for created_at/updated_at/deleted_at stamps."""
    return datetime.now(timezone.utc)
