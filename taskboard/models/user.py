from typing import Optional

from sqlmodel import SQLModel, Field


class User(SQLModel, table=True):
    """User document. Assigned task ids are derived from the tasks table on read."""
    __tablename__ = "users"

    id: Optional[str] = Field(default=None, primary_key=True)
    name: str
    email: str = Field(unique=True, index=True)
