"""Publish-state policy — decides ``status`` and ``published_at`` on every write."""

from dataclasses import dataclass
from datetime import datetime

from cms.domain.entities.article import STATUS_DRAFT, STATUS_PUBLISHED

_KNOWN_STATUSES = {STATUS_DRAFT, STATUS_PUBLISHED}


@dataclass(frozen=True)
class PublishState:
    status: str
    published_at: datetime | None


def normalize_status(status: str) -> str:
    """Lower-case the recognised statuses; anything else is kept verbatim."""
    lowered = status.strip().lower()
    return lowered if lowered in _KNOWN_STATUSES else status


def resolve_publish_state(
    current_status: str | None,
    requested_status: str | None,
    existing_published_at: datetime | None,
    now: datetime,
) -> PublishState:
    """Compute the resulting status and publish timestamp.

    ``current_status`` is None for a new article, ``requested_status`` is None
    when the caller leaves the status unchanged. Entering the published state
    stamps ``now``; leaving it clears the stamp, so a later republish gets a
    fresh one.
    """
    if requested_status is not None:
        effective = normalize_status(requested_status)
    elif current_status is not None:
        effective = normalize_status(current_status)
    else:
        effective = STATUS_DRAFT

    published_at = existing_published_at
    if effective == STATUS_PUBLISHED:
        if published_at is None:
            published_at = now
    elif published_at is not None:
        published_at = None

    return PublishState(status=effective, published_at=published_at)
