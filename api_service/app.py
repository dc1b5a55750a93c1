"""
Resume Builder API - FastAPI application.

Provides endpoints for generating resume/cover-letter narrative from an
application profile and for downloading the rendered documents as HTML.
The service is stateless: every request carries the complete profile.
"""

import uuid
from datetime import datetime

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse

from resume_builder.common.error_handling import ProfileValidationError
from resume_builder.common.logger import get_logger, setup_logging
from resume_builder.generation import (
    ContentGenerationService,
    CoverLetterGenerateResponse,
    GenerateResponse,
    ResumeGenerateResponse,
)
from resume_builder.profile.models import ApplicationProfile
from resume_builder.rendering import document_filename, render

from . import __version__
from .config import get_settings, validate_config_on_startup
from .models import DownloadRequest, HealthResponse, PingResponse

# Configure logging from validated settings
settings = get_settings()
setup_logging(settings.log_level, settings.log_format)

validate_config_on_startup()

app = FastAPI(
    title="Resume Builder API",
    version=__version__,
    description="Resume and cover letter generation and download"
)

# Configure CORS using validated settings
if settings.cors_origins_list:
    allow_any = "*" in settings.cors_origins_list
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if allow_any else settings.cors_origins_list,
        allow_credentials=not allow_any,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def get_generation_service() -> ContentGenerationService:
    """Dependency: generation service using the configured simulated delay."""
    return ContentGenerationService(delay_seconds=get_settings().generation_delay_seconds)


def _new_request_id() -> str:
    return uuid.uuid4().hex


# ============================================================================
# Health Endpoints
# ============================================================================

@app.get("/api/ping", response_model=PingResponse)
async def ping() -> PingResponse:
    """Liveness probe; the message comes from PING_MESSAGE."""
    return PingResponse(message=get_settings().ping_message)


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint for container orchestration."""
    return HealthResponse(status="healthy", timestamp=datetime.utcnow(), version=__version__)


# ============================================================================
# Generation Endpoints
# ============================================================================

@app.post("/api/generate", response_model=GenerateResponse)
async def generate_content(
    profile: ApplicationProfile,
    service: ContentGenerationService = Depends(get_generation_service),
) -> GenerateResponse:
    """
    Generate resume and cover-letter content.

    Raises:
        HTTPException: 400 if fullName or jobRole.title is missing, 500 on failure
    """
    request_id = _new_request_id()
    log = get_logger(__name__, request_id=request_id, component="api")
    try:
        return await service.generate(profile, request_id=request_id)
    except ProfileValidationError as e:
        log.warning(f"Rejected generate request: {e.message}")
        raise HTTPException(status_code=400, detail=e.message)
    except Exception:
        log.exception("AI generation failed")
        raise HTTPException(status_code=500, detail="Failed to generate AI content. Please try again.")


@app.post("/api/generate/resume", response_model=ResumeGenerateResponse)
async def generate_resume(
    profile: ApplicationProfile,
    service: ContentGenerationService = Depends(get_generation_service),
) -> ResumeGenerateResponse:
    """
    Generate resume content only.

    Raises:
        HTTPException: 400 if fullName is missing, 500 on failure
    """
    request_id = _new_request_id()
    log = get_logger(__name__, request_id=request_id, component="api")
    try:
        return await service.generate_resume(profile, request_id=request_id)
    except ProfileValidationError as e:
        log.warning(f"Rejected resume request: {e.message}")
        raise HTTPException(status_code=400, detail=e.message)
    except Exception:
        log.exception("Resume generation failed")
        raise HTTPException(status_code=500, detail="Failed to generate resume content. Please try again.")


@app.post("/api/generate/cover-letter", response_model=CoverLetterGenerateResponse)
async def generate_cover_letter(
    profile: ApplicationProfile,
    service: ContentGenerationService = Depends(get_generation_service),
) -> CoverLetterGenerateResponse:
    """
    Generate cover-letter content only.

    Raises:
        HTTPException: 400 if fullName or jobRole.title is missing, 500 on failure
    """
    request_id = _new_request_id()
    log = get_logger(__name__, request_id=request_id, component="api")
    try:
        return await service.generate_cover_letter(profile, request_id=request_id)
    except ProfileValidationError as e:
        log.warning(f"Rejected cover letter request: {e.message}")
        raise HTTPException(status_code=400, detail=e.message)
    except Exception:
        log.exception("Cover letter generation failed")
        raise HTTPException(status_code=500, detail="Failed to generate cover letter content. Please try again.")


# ============================================================================
# Download Endpoint
# ============================================================================

@app.post("/api/download/pdf")
async def download_document(request: DownloadRequest) -> HTMLResponse:
    """
    Render a resume or cover letter for download.

    The document is returned as HTML (printable to PDF by the browser) with
    an attachment Content-Disposition.

    Raises:
        HTTPException: 400 for a missing fullName, a cover letter without a
                       target title, or an unknown type; 500 on failure
    """
    request_id = _new_request_id()
    log = get_logger(__name__, request_id=request_id, component="api")
    try:
        html = render(request.type, request.data, request.aiContent, request_id=request_id)
        filename = document_filename(request.type, request.data.personal.fullName)
    except ProfileValidationError as e:
        log.warning(f"Rejected download request: {e.message}")
        raise HTTPException(status_code=400, detail=e.message)
    except Exception:
        log.exception("Document generation failed")
        raise HTTPException(status_code=500, detail="Failed to generate PDF content. Please try again.")

    log.info(f"Serving {filename}")
    return HTMLResponse(
        content=html,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
