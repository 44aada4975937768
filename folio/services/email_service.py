"""Transactional e-mail over the Resend HTTP API."""
import logging
from html import escape
from urllib.parse import quote

import httpx

from folio.core.config import settings

logger = logging.getLogger("folio.email")


def welcome_email_html(email: str, token: str) -> str:
    website = escape(settings.BASE_URL)
    unsubscribe_url = escape(f"{settings.BASE_URL}/unsubscribe?email={quote(email)}&token={quote(token)}")
    return (
        "<!DOCTYPE html><html><body style=\"font-family: -apple-system, 'Segoe UI', Roboto, Arial, sans-serif;\">"
        "<h1>Welcome!</h1>"
        "<p>Thank you for subscribing to my newsletter. Here's what you can expect in your inbox:</p>"
        "<ul>"
        "<li>Weekly project updates and progress reports</li>"
        "<li>Behind-the-scenes insights into my work</li>"
        "<li>New tools, techniques, and industry insights</li>"
        "<li>Exclusive previews of work-in-progress projects</li>"
        "</ul>"
        "<p>I promise to keep things valuable and respect your inbox. No spam, ever.</p>"
        f"<p><a href=\"{website}\">Visit My Website</a></p>"
        f"<p style=\"font-size: 12px;\">Want to unsubscribe? <a href=\"{unsubscribe_url}\">Click here</a></p>"
        "</body></html>"
    )


def unsubscribe_email_html() -> str:
    website = escape(settings.BASE_URL)
    return (
        "<!DOCTYPE html><html><body style=\"font-family: -apple-system, 'Segoe UI', Roboto, Arial, sans-serif;\">"
        "<h1>You've been unsubscribed</h1>"
        "<p>You will no longer receive newsletter e-mails. Sorry to see you go!</p>"
        f"<p>Changed your mind? You can subscribe again any time on <a href=\"{website}\">my website</a>.</p>"
        "</body></html>"
    )


def send_email(recipient: str, subject: str, html_body: str, client: httpx.Client | None = None) -> bool:
    """Send one message. Returns False (and logs) instead of raising."""
    if not settings.RESEND_API_KEY:
        logger.warning("[Email] RESEND_API_KEY not set, skipping mail to %s", recipient)
        return False
    payload = {
        "from": f"{settings.EMAIL_FROM_NAME} <{settings.EMAIL_FROM}>",
        "to": [recipient],
        "subject": subject,
        "html": html_body,
    }
    headers = {"Authorization": f"Bearer {settings.RESEND_API_KEY}"}
    timeout = httpx.Timeout(10.0, connect=5.0)
    try:
        if client is not None:
            response = client.post(settings.RESEND_API_URL, json=payload, headers=headers)
        else:
            with httpx.Client(timeout=timeout) as c:
                response = c.post(settings.RESEND_API_URL, json=payload, headers=headers)
        response.raise_for_status()
    except httpx.HTTPError as e:
        logger.error("[Email] Failed to send '%s' to %s: %s", subject, recipient, e)
        return False
    logger.info("[Email] Sent '%s' to %s", subject, recipient)
    return True
