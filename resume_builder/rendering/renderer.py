"""
Document Renderer - entry point for producing downloadable documents.

render() validates the profile for the requested document kind and
dispatches to the resume or cover-letter template. "both" currently yields
the resume only; a combined artifact has not been defined.
"""

import re
import unicodedata
from datetime import date
from enum import Enum
from typing import Optional, Union

from ..common.error_handling import InvalidDocumentKindError, ProfileValidationError, require_fields
from ..common.logger import get_logger
from ..generation.models import GeneratedContent
from ..profile.models import ApplicationProfile
from .cover_letter import render_cover_letter
from .resume import render_resume


class DocumentKind(str, Enum):
    RESUME = "resume"
    COVER_LETTER = "cover-letter"
    BOTH = "both"


_FILENAME_SUFFIX = {
    DocumentKind.RESUME: "Resume",
    DocumentKind.COVER_LETTER: "Cover_Letter",
    # "both" downloads the resume
    DocumentKind.BOTH: "Resume",
}


def parse_document_kind(kind: Union[str, DocumentKind, None]) -> DocumentKind:
    """
    Raises:
        InvalidDocumentKindError: kind is not resume, cover-letter or both
    """
    if isinstance(kind, DocumentKind):
        return kind
    try:
        return DocumentKind(kind)
    except ValueError:
        raise InvalidDocumentKindError(kind)


def sanitize_for_path(text: str) -> str:
    """
    Sanitize text for use in a download filename.

    Drops characters other than word characters, whitespace and hyphens,
    folds accents to ASCII and replaces whitespace runs with underscores.

    Example:
        >>> sanitize_for_path("  José  O'Neil ")
        "Jose_ONeil"
    """
    ascii_text = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    cleaned = re.sub(r"[^\w\s-]", "", ascii_text).strip()
    return re.sub(r"\s+", "_", cleaned)


def document_filename(kind: Union[str, DocumentKind], full_name: str) -> str:
    """Attachment filename such as "Jane_Doe_Resume.html"."""
    stem = sanitize_for_path(full_name) or "Document"
    return f"{stem}_{_FILENAME_SUFFIX[parse_document_kind(kind)]}.html"


def render(
    kind: Union[str, DocumentKind, None],
    profile: ApplicationProfile,
    generated: Optional[GeneratedContent] = None,
    today: Optional[date] = None,
    request_id: Optional[str] = None,
) -> str:
    """
    Render a resume or cover letter as a self-contained HTML document.

    Args:
        kind: "resume", "cover-letter" or "both" (renders the resume)
        profile: Application profile
        generated: Optional generated content; missing parts fall back to raw data
        today: Cover letter date (defaults to the current date)
        request_id: Optional identifier for log correlation

    Returns:
        HTML document text

    Raises:
        InvalidDocumentKindError: unknown kind
        ProfileValidationError: fullName missing, or jobRole.title missing
                                for a cover letter
    """
    log = get_logger(__name__, request_id=request_id, component="render")

    require_fields(profile, "personal.fullName")
    document_kind = parse_document_kind(kind)

    if document_kind == DocumentKind.COVER_LETTER:
        if not profile.jobRole.title.strip():
            raise ProfileValidationError(
                "Missing required field: jobRole.title is required for cover letter",
                field="jobRole.title",
            )
        html = render_cover_letter(
            profile,
            generated.coverLetter if generated else None,
            today=today,
        )
    else:
        if document_kind == DocumentKind.BOTH:
            log.warning("Document type 'both' renders the resume only")
        html = render_resume(profile, generated.resume if generated else None)

    log.info(f"Rendered {document_kind.value} ({len(html)} chars)")
    return html
