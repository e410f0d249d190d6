from datetime import datetime
from typing import Optional

from sqlmodel import Field, SQLModel

from skipsave.services.database.models.base import TIMESTAMP, new_id, utcnow


class User(SQLModel, table=True):
    id: str = Field(default_factory=new_id, primary_key=True)
    email: str = Field(index=True, nullable=False, unique=True)
    name: Optional[str] = None
    image: Optional[str] = None  # avatar url
    created_at: datetime = Field(default_factory=utcnow, sa_type=TIMESTAMP)
