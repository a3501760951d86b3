"""Employee search hits and local employee entities."""

from datetime import datetime
from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator


class EmployeeSearchHit(BaseModel):
    """Candidate employee returned by the search index."""

    id: Optional[Union[str, int]] = None
    name: Optional[str] = None
    email: str
    role: Optional[str] = None
    department: Optional[str] = None


class SearchResponse(BaseModel):
    """Search API response. Other Meilisearch keys (offset, limit, ...) are ignored."""

    hits: list[EmployeeSearchHit] = Field(default_factory=list)

    @field_validator("hits", mode="before")
    @classmethod
    def _null_hits(cls, value):
        return [] if value is None else value

    def first_hit(self) -> Optional[EmployeeSearchHit]:
        return self.hits[0] if self.hits else None


class EmployeeEntity(BaseModel):
    """Locally persisted employee, unique by email."""

    id: int
    employee_name: Optional[str] = None
    email: str
    job_title: Optional[str] = None
    department: Optional[str] = None
    created_at: Optional[datetime] = None
