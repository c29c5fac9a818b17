from __future__ import annotations

from pydantic import BaseModel


class AdminLogin(BaseModel):
    username: str = ""
    password: str = ""


class LoginResult(BaseModel):
    message: str = "Login successful"
    token: str
