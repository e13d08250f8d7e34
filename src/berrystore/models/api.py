"""
API request/response models.
"""

from typing import List

from pydantic import BaseModel, Field

from .article import SeoPage


class SeoPagesResponse(BaseModel):
    """Response body of GET /api/seo/all-pages."""
    pages: List[SeoPage] = Field(default_factory=list)


class HealthResponse(BaseModel):
    status: str
    timestamp: str
