"""
Request/response models for the API service.

Generation endpoints take an ApplicationProfile body directly and return the
generation models from resume_builder.generation.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from resume_builder.generation.models import GeneratedContent
from resume_builder.profile.models import ApplicationProfile


class DownloadRequest(BaseModel):
    """
    Document download request.

    `type` is checked by the renderer so an absent or unknown kind answers
    400 like any other rejected value.
    """
    type: Optional[str] = Field(None, description="Document type: 'resume', 'cover-letter' or 'both'")
    data: ApplicationProfile = Field(default_factory=ApplicationProfile, description="Application profile")
    aiContent: Optional[GeneratedContent] = Field(None, description="Previously generated content")

    @field_validator("data", mode="before")
    @classmethod
    def null_data_is_empty_profile(cls, v):
        return {} if v is None else v


class PingResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = "healthy"
    timestamp: datetime
    version: str
