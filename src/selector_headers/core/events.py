"""Repository event schema.

Events are Pydantic models describing one change to a repository resource.
They are the input to the message factories.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from .enums import EventType
from .ids import new_id, utc_now


class RepositoryEvent(BaseModel):
    """A change to the resource at ``path``."""

    event_id: str = Field(default_factory=new_id)
    timestamp: datetime = Field(default_factory=utc_now)
    path: str
    event_types: list[EventType] = Field(default_factory=list)
    resource_types: list[str] = Field(default_factory=list)
    user_id: str = ""
    user_agent: str = ""
    base_url: str = ""

    @field_validator("path")
    @classmethod
    def _path_is_absolute(cls, v: str) -> str:
        if not v.startswith("/"):
            return "/" + v
        return v

    @property
    def resource_url(self) -> str:
        """Absolute URL of the resource, or the bare path without a base URL."""
        if not self.base_url:
            return self.path
        return self.base_url.rstrip("/") + self.path

    def event_type_uris(self) -> list[str]:
        return [t.value for t in self.event_types]
