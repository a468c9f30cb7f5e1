from __future__ import annotations

from gymdesk.core.clock import utcnow


def apply_changes(obj, changes: dict) -> None:
    """Copy a partial-update dict onto an ORM row and bump updated_at."""
    for field, value in changes.items():
        setattr(obj, field, value)
    obj.updated_at = utcnow()
