"""
Cover letter HTML rendering.

Layout: date, sender block, recipient block, subject line, body, signature.
The body is the generated letter verbatim when available, otherwise a fixed
three-paragraph letter built from the target job.
"""

from datetime import date
from html import escape
from typing import Optional

from ..generation.models import CoverLetterContent
from ..profile.models import ApplicationProfile
from .styles import COVER_LETTER_CSS

COMPANY_PLACEHOLDER = "[Company Name]"
ADDRESS_PLACEHOLDER = "[Company Address]"


def _e(text: Optional[str]) -> str:
    return escape(text or "", quote=True)


def format_letter_date(day: date) -> str:
    """Long US date without zero padding, e.g. "March 5, 2025"."""
    return f"{day:%B} {day.day}, {day.year}"


def _fallback_body(profile: ApplicationProfile) -> str:
    job = profile.jobRole
    at_company = f" at {_e(job.company)}" if job.company else ""
    organization = _e(job.company) if job.company else "your organization"
    return f"""
        <p>Dear Hiring Manager,</p>
        <p>I am writing to express my strong interest in the {_e(job.title)} position{at_company}. With my background and skills, I am excited about the opportunity to contribute to your team.</p>
        <p>In my previous experience, I have developed expertise that aligns well with the requirements of this role. I am particularly drawn to this position because it offers the opportunity to apply my skills in a meaningful way.</p>
        <p>I would welcome the opportunity to discuss how my experience and enthusiasm can contribute to {organization}'s continued success. Thank you for considering my application.</p>"""


def render_cover_letter(
    profile: ApplicationProfile,
    generated: Optional[CoverLetterContent] = None,
    today: Optional[date] = None,
) -> str:
    """
    Build the complete cover letter document.

    Args:
        profile: Application profile (fullName and jobRole.title already checked)
        generated: Optional generated cover letter content
        today: Letter date (defaults to the current date)

    Returns:
        Self-contained HTML document string
    """
    personal, job = profile.personal, profile.jobRole
    letter_date = format_letter_date(today or date.today())

    sender_lines = [f"<strong>{_e(personal.fullName)}</strong>"]
    sender_lines += [_e(line) for line in (personal.address, personal.email, personal.phone) if line]
    sender = "<br>".join(sender_lines)

    at_company = f" at {_e(job.company)}" if job.company else ""
    subject = f"Re: Application for {_e(job.title)} Position{at_company}"

    if generated and generated.content:
        body = f'\n        <div class="generated">{_e(generated.content)}</div>'
    else:
        body = _fallback_body(profile)

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>{_e(personal.fullName)} - Cover Letter</title>
    <style>{COVER_LETTER_CSS}    </style>
</head>
<body>
    <div class="date">{letter_date}</div>

    <div class="sender">
        {sender}
    </div>

    <div class="recipient">
        Hiring Manager<br>
        {_e(job.company) or COMPANY_PLACEHOLDER}<br>
        {ADDRESS_PLACEHOLDER}
    </div>

    <div class="content">
        <p><strong>{subject}</strong></p>{body}
    </div>

    <div class="signature">
        <p>Sincerely,</p>
        <br>
        <p><strong>{_e(personal.fullName)}</strong></p>
    </div>
</body>
</html>
"""
