"""Celery application for background tasks (e-mail, moderation sweep)."""
from celery import Celery

from folio.core.config import settings

celery_app = Celery(
    "folio",
    broker=settings.CELERY_BROKER_URL,
    include=["folio.workers.mail", "folio.workers.moderation"],
)
celery_app.conf.update(
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="UTC",
    enable_utc=True,
)

if settings.MODERATION_SWEEP_INTERVAL_MINUTES > 0:
    celery_app.conf.beat_schedule = {
        "moderation-sweep": {
            "task": "folio.workers.moderation.moderation_sweep",
            "schedule": settings.MODERATION_SWEEP_INTERVAL_MINUTES * 60.0,
        },
    }
