"""Shared base for domain entities"""

import uuid
from datetime import datetime, timezone
from sqlmodel import SQLModel


class BaseModel(SQLModel):
    """Base class for all SQLModel table entities"""
    pass


def generate_uuid() -> str:
    return str(uuid.uuid4())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
