"""
Celery configuration for the L-Mart backend.

Handles outbound email delivery and periodic housekeeping (expired
notification cleanup).
"""

import os

from celery import Celery

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "lmartBackend.settings")

app = Celery("lmartBackend")

# Read CELERY_* keys from Django settings.
app.config_from_object("django.conf:settings", namespace="CELERY")

app.autodiscover_tasks()

app.conf.beat_schedule = {
    "purge-expired-notifications": {
        "task": "notifications.tasks.purge_expired_notifications_task",
        "schedule": 60.0 * 60.0,  # hourly
        "options": {"expires": 15.0 * 60.0, "queue": "maintenance_tasks"},
    },
}

app.conf.update(
    task_routes={
        "notifications.tasks.send_email_task": {"queue": "email_tasks"},
        "notifications.tasks.purge_expired_notifications_task": {"queue": "maintenance_tasks"},
    },
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="UTC",
    enable_utc=True,
    result_expires=60 * 60 * 24,
    worker_max_tasks_per_child=1000,
    task_acks_late=True,
    task_reject_on_worker_lost=True,
    task_time_limit=5 * 60,
    task_soft_time_limit=4 * 60,
)
