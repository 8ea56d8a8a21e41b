"""Todo model for SQLModel."""
from sqlmodel import SQLModel, Field
from sqlalchemy import Column, Integer, String, Text
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional
from uuid import uuid4


def utc_now_iso() -> str:
    """Current UTC time as an ISO-8601 string, e.g. 2026-10-18T09:15:02.481Z."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class TodoStatus(str, Enum):
    """Todo status options"""
    NEW = "New"
    DONE = "Done"


class Todo(SQLModel, table=True):
    """A unit of trackable work.

    Column names keep the camelCase layout of the original todos table so
    existing databases stay readable; timestamps are stored as ISO text.
    """

    __tablename__ = "todos"

    id: str = Field(default_factory=lambda: str(uuid4()), primary_key=True)
    title: str = Field(sa_column=Column(Text, nullable=False))
    description: str = Field(sa_column=Column(Text, nullable=False))
    completed_at: Optional[str] = Field(default=None, sa_column=Column("completedAt", Text, nullable=True))
    created_at: str = Field(default_factory=utc_now_iso, sa_column=Column("createdAt", Text, nullable=False))
    updated_at: str = Field(default_factory=utc_now_iso, sa_column=Column("updatedAt", Text, nullable=False))
    file_path: Optional[str] = Field(default=None, sa_column=Column("filePath", Text, nullable=True, index=True))
    status: str = Field(
        default=TodoStatus.NEW.value,
        sa_column=Column(String(10), nullable=False, server_default=TodoStatus.NEW.value),
    )
    task_number: Optional[int] = Field(default=None, sa_column=Column("taskNumber", Integer, nullable=True, unique=True))

    @property
    def completed(self) -> bool:
        """A todo counts as completed once it has a completion timestamp."""
        return self.completed_at is not None

    def to_dict(self) -> Dict[str, Any]:
        """Wire representation used by every tool response."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "completedAt": self.completed_at,
            "completed": self.completed,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
            "filePath": self.file_path,
            "status": TodoStatus(self.status or TodoStatus.NEW.value).value,
            "taskNumber": self.task_number,
        }
