"""
Celery application.
Broker and result backend come from Django settings (CELERY_* keys).
Dev settings run tasks eagerly, so no Redis is needed locally.
"""

import os
from celery import Celery

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "branchlink.settings_dev")

app = Celery("branchlink")
app.config_from_object("django.conf:settings", namespace="CELERY")
app.autodiscover_tasks()
