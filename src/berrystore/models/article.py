"""
Insights article models.
"""

from datetime import datetime
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Article(BaseModel):
    """Common shape for every article shown on the insights page."""
    id: str
    slug: str  # routing key, may be a relative path such as "../investment/assam/guwahati"
    title: str
    excerpt: str
    date: str
    read_time: str
    category: str
    image: str
    tags: List[str] = Field(default_factory=list)
    source: Literal["static", "pseo"] = "static"

    model_config = ConfigDict(frozen=True)

    @property
    def href(self) -> str:
        return f"/insights/{self.slug}"

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match against title, excerpt or any tag."""
        q = query.lower()
        return (
            q in self.title.lower()
            or q in self.excerpt.lower()
            or any(q in tag.lower() for tag in self.tags)
        )


class SeoPage(BaseModel):
    """Location guide record as returned by the remote content API."""
    id: str
    state: str
    city: str
    meta_title: str = Field(alias="metaTitle")
    meta_description: str = Field(alias="metaDescription")
    created_at: datetime = Field(alias="createdAt")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v):
        return str(v)
