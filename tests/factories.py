"""Builders for optimization test data."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from itertools import count

from approach_engine.services.optimization.types import ApproachEvent

AS_OF = datetime(2026, 4, 6, 12, 0, 0, tzinfo=timezone.utc)

_ids = count(1)


def make_approach(
    *,
    target_id: str = "C1",
    target_type: str = "company",
    status: str = "sent",
    sent_at: datetime | str | None = None,
    days_ago: int | None = None,
    template_id: str | None = None,
    opened_at: datetime | str | None = None,
    replied_at: datetime | str | None = None,
    engineer_ids: tuple[str, ...] = (),
) -> ApproachEvent:
    """Build an ApproachEvent; days_ago is relative to AS_OF."""
    if sent_at is None:
        sent_at = AS_OF - timedelta(days=days_ago or 0)
    return ApproachEvent(
        id=f"A{next(_ids)}",
        target_type=target_type,
        target_id=target_id,
        template_id=template_id,
        status=status,
        sent_at=sent_at,
        opened_at=opened_at,
        replied_at=replied_at,
        engineer_ids=engineer_ids,
    )


def approach_json(**overrides: object) -> dict:
    """JSON body for an approach in API requests."""
    body = {
        "id": "A1",
        "target_type": "company",
        "target_id": "C1",
        "template_id": None,
        "status": "sent",
        "sent_at": "2026-04-01T10:00:00Z",
    }
    body.update(overrides)
    return body
