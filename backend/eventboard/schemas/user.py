"""Pydantic schemas for Users."""
from __future__ import annotations
from datetime import datetime
from typing import Optional
from pydantic import BaseModel


class UserCreate(BaseModel):
    username: str
    email: str
    first_name: str = ""
    last_name: str = ""


class UserOut(BaseModel):
    id: int
    username: str
    email: str
    first_name: str
    last_name: str
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
