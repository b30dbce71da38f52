"""
Notification service.

EventPublisher is what the workflows call: it queues the event once the
surrounding transaction commits and never raises. The Celery worker hands the
event to NotificationDispatcher, which writes one in-app Notification per
admin / dispatcher of the addressed branch.
"""

import logging
import uuid

from django.conf import settings
from django.db import transaction

logger = logging.getLogger("branchlink.notifications")

MESSAGES = {
    "manifest_dispatched": "Manifest arriving from {from_branch} - {manifest_id}",
    "manifest_arrived":    "Manifest received at {to_branch} - {manifest_id}",
}


class _Blank(dict):
    def __missing__(self, key):
        return ""


def _plain(value):
    if isinstance(value, uuid.UUID):
        return str(value)
    return value


class EventPublisher:
    """Fire-and-forget. Fails silently: never blocks the main flow."""

    def publish(self, event: str, tenant_id, **fields) -> None:
        payload = {"event": event, "tenant_id": _plain(tenant_id)}
        payload.update({k: _plain(v) for k, v in fields.items()})
        transaction.on_commit(lambda: self._enqueue(payload))

    def _enqueue(self, payload: dict) -> None:
        from apps.notifications.tasks import deliver_event
        try:
            deliver_event.delay(payload)
        except Exception:
            logger.exception(
                "Could not queue %s notification for branch %s",
                payload.get("event"), payload.get("tenant_id"),
            )


class NotificationDispatcher:
    """Turns one event record into Notification rows for the addressed branch."""

    def recipients(self, branch_id):
        from apps.authentication.models import User
        return User.objects.filter(
            branch_id=branch_id,
            is_active=True,
            role__in=settings.NOTIFICATION_RECIPIENT_ROLES,
        )

    def dispatch(self, payload: dict) -> int:
        from apps.notifications.models import Notification

        event = payload.get("event")
        template = MESSAGES.get(event)
        if template is None:
            logger.warning("Unknown notification event: %s", event)
            return 0

        branch_id = payload.get("tenant_id")
        message = template.format_map(_Blank(payload))[:255]
        rows = [
            Notification(
                branch_id   = branch_id,
                user        = user,
                type        = event,
                manifest_id = payload.get("manifest_id"),
                shipment_id = payload.get("shipment_id"),
                tracking_id = payload.get("tracking_id") or payload.get("manifest_id") or "",
                message     = message,
            )
            for user in self.recipients(branch_id)
        ]
        Notification.objects.bulk_create(rows)
        logger.info("%s: %d notifications for branch %s", event, len(rows), branch_id)
        return len(rows)
