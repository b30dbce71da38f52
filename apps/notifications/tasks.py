"""Celery tasks for notification fan-out."""

import logging
from celery import shared_task

logger = logging.getLogger("branchlink.notifications")


# No retries: a notification is delivered at most once.
@shared_task(ignore_result=True)
def deliver_event(payload: dict):
    """Write in-app notifications for one published event."""
    from apps.notifications.service import NotificationDispatcher

    try:
        return NotificationDispatcher().dispatch(payload)
    except Exception:
        logger.exception("Notification delivery failed for %s", payload.get("event"))
        return 0
