"""
Resume Builder API Service - FastAPI application for content generation
and document download.
"""

from resume_builder.version import __version__  # noqa: F401
