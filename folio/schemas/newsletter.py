"""Pydantic schemas for the newsletter."""
from pydantic import BaseModel


class SubscribeRequest(BaseModel):
    email: str = ""


class UnsubscribeRequest(BaseModel):
    email: str = ""
    token: str = ""


class NewsletterResponse(BaseModel):
    success: bool = True
    message: str
