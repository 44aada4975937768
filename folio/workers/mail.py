"""Celery tasks for newsletter e-mail."""
from folio.core.celery_app import celery_app
from folio.services.email_service import send_email, unsubscribe_email_html, welcome_email_html


@celery_app.task
def send_welcome_email(email: str, token: str) -> bool:
    return send_email(email, "Welcome to My Newsletter! 🎉", welcome_email_html(email, token))


@celery_app.task
def send_unsubscribe_email(email: str) -> bool:
    return send_email(email, "You've been unsubscribed", unsubscribe_email_html())
