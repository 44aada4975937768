"""Pydantic schemas for the admin session."""
from pydantic import BaseModel


class AdminLoginRequest(BaseModel):
    password: str = ""


class AdminLoginResponse(BaseModel):
    success: bool = True


class AdminMeResponse(BaseModel):
    logged_in: bool
