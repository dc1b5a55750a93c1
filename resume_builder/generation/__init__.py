"""Content generation: narrative backends and the generation service."""

from .models import (
    CoverLetterContent,
    CoverLetterGenerateResponse,
    EnhancedExperience,
    EnhancedProject,
    GeneratedContent,
    GenerateResponse,
    ResumeContent,
    ResumeGenerateResponse,
)
from .narrative import NarrativeGenerator, TemplateNarrativeGenerator, build_generated_content
from .service import ContentGenerationService

__all__ = [
    "CoverLetterContent",
    "CoverLetterGenerateResponse",
    "EnhancedExperience",
    "EnhancedProject",
    "GeneratedContent",
    "GenerateResponse",
    "ResumeContent",
    "ResumeGenerateResponse",
    "NarrativeGenerator",
    "TemplateNarrativeGenerator",
    "build_generated_content",
    "ContentGenerationService",
]
