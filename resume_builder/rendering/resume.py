"""
Resume HTML rendering.

Sections appear in fixed order and each one is left out entirely when its
backing data is empty:

header → professional summary (generated only) → skills → work experience
→ education → projects → certifications → achievements

Generated content is matched to entries by list index; entries without a
generated counterpart fall back to the raw profile text.
"""

from html import escape
from typing import List, Optional

from ..generation.models import ResumeContent
from ..profile.models import ApplicationProfile
from ..profile.validators import format_link
from .styles import RESUME_CSS


def _e(text: Optional[str]) -> str:
    return escape(text or "", quote=True)


def _section(title: str, body: str) -> str:
    return f"""
    <div class="section">
        <div class="section-title">{title}</div>
        {body}
    </div>"""


def _tags(skills: List[str]) -> str:
    return "".join(f'<span class="skill">{_e(skill)}</span>' for skill in skills)


def _header(profile: ApplicationProfile) -> str:
    personal, links, job = profile.personal, profile.links, profile.jobRole

    title = f'<div class="title">{_e(job.title)}</div>' if job.title else ""

    contact_parts = [part for part in (personal.email, personal.phone, personal.address) if part]
    contact = f'<div class="contact">{" • ".join(_e(part) for part in contact_parts)}</div>' if contact_parts else ""

    anchors = [
        f'<a href="{_e(format_link(url))}">{label}</a>'
        for url, label in (
            (links.linkedin, "LinkedIn"),
            (links.github, "GitHub"),
            (links.portfolio, "Portfolio"),
            (links.other, "Profile"),
        )
        if url
    ]
    link_row = f'<div class="links">{"".join(anchors)}</div>' if anchors else ""

    return f"""
    <div class="header">
        <div class="name">{_e(personal.fullName)}</div>
        {title}
        {contact}
        {link_row}
    </div>"""


def _summary(generated: Optional[ResumeContent]) -> str:
    if not generated or not generated.summary:
        return ""
    return _section("Professional Summary", f"<p>{_e(generated.summary)}</p>")


def _skills(profile: ApplicationProfile) -> str:
    skills = profile.skills
    if not skills.technical and not skills.soft:
        return ""
    groups = []
    if skills.technical:
        groups.append(
            f'<div style="margin-bottom: 15px;"><strong>Technical Skills:</strong><br>'
            f'<div class="skills">{_tags(skills.technical)}</div></div>'
        )
    if skills.soft:
        groups.append(
            f'<div><strong>Soft Skills:</strong><br>'
            f'<div class="skills">{_tags(skills.soft)}</div></div>'
        )
    return _section("Skills", "".join(groups))


def _experience(profile: ApplicationProfile, generated: Optional[ResumeContent]) -> str:
    if not profile.experience:
        return ""
    enhanced = generated.enhancedExperience if generated else []
    items = []
    for index, exp in enumerate(profile.experience):
        bullets = exp.responsibilities
        if index < len(enhanced):
            bullets = enhanced[index].enhancedResponsibilities
        end = "Present" if exp.current else exp.endDate
        dates = " - ".join(_e(part) for part in (exp.startDate, end) if part)
        bullet_items = "".join(f"<li>{_e(b)}</li>" for b in bullets)
        bullet_list = f"<ul>{bullet_items}</ul>" if bullet_items else ""
        items.append(f"""
        <div class="item">
            <div class="item-title">{_e(exp.position)}</div>
            <div class="item-subtitle">{_e(exp.company)}</div>
            <div class="item-date">{dates}</div>
            {bullet_list}
        </div>""")
    return _section("Work Experience", "".join(items))


def _education(profile: ApplicationProfile) -> str:
    if not profile.education:
        return ""
    items = []
    for edu in profile.education:
        heading = f"{_e(edu.degree)} in {_e(edu.field)}" if edu.field else _e(edu.degree)
        years = " - ".join(_e(part) for part in (edu.startYear, edu.endYear) if part)
        gpa = f"<div>GPA: {_e(edu.gpa)}</div>" if edu.gpa else ""
        items.append(f"""
        <div class="item">
            <div class="item-title">{heading}</div>
            <div class="item-subtitle">{_e(edu.school)}</div>
            <div class="item-date">{years}</div>
            {gpa}
        </div>""")
    return _section("Education", "".join(items))


def _projects(profile: ApplicationProfile, generated: Optional[ResumeContent]) -> str:
    if not profile.projects:
        return ""
    enhanced = generated.enhancedProjects if generated else []
    items = []
    for index, project in enumerate(profile.projects):
        description = project.description
        impact = ""
        if index < len(enhanced):
            description = enhanced[index].enhancedDescription or description
            impact = enhanced[index].impact
        technologies = (
            f'<div style="margin-top: 8px;"><strong>Technologies:</strong> {_e(", ".join(project.technologies))}</div>'
            if project.technologies else ""
        )
        impact_line = f"<div><strong>Impact:</strong> {_e(impact)}</div>" if impact else ""
        link = f'<div><a href="{_e(format_link(project.link))}">View Project</a></div>' if project.link else ""
        items.append(f"""
        <div class="item">
            <div class="item-title">{_e(project.title)}</div>
            <p>{_e(description)}</p>
            {technologies}
            {impact_line}
            {link}
        </div>""")
    return _section("Projects", "".join(items))


def _certifications(profile: ApplicationProfile) -> str:
    if not profile.certifications:
        return ""
    items = []
    for cert in profile.certifications:
        expiry = f" - Expires: {_e(cert.expiryDate)}" if cert.expiryDate else ""
        items.append(f"""
        <div class="item">
            <div class="item-title">{_e(cert.name)}</div>
            <div class="item-subtitle">{_e(cert.issuer)}</div>
            <div class="item-date">{_e(cert.date)}{expiry}</div>
        </div>""")
    return _section("Certifications", "".join(items))


def _achievements(profile: ApplicationProfile) -> str:
    if not profile.achievements:
        return ""
    items = []
    for achievement in profile.achievements:
        items.append(f"""
        <div class="item">
            <div class="item-title">{_e(achievement.title)}</div>
            <div class="item-date">{_e(achievement.date)}</div>
            <p>{_e(achievement.description)}</p>
        </div>""")
    return _section("Achievements", "".join(items))


def render_resume(profile: ApplicationProfile, generated: Optional[ResumeContent] = None) -> str:
    """
    Build the complete resume document.

    Args:
        profile: Application profile (fullName already checked by the caller)
        generated: Optional generated resume content

    Returns:
        Self-contained HTML document string
    """
    body = "".join([
        _header(profile),
        _summary(generated),
        _skills(profile),
        _experience(profile, generated),
        _education(profile),
        _projects(profile, generated),
        _certifications(profile),
        _achievements(profile),
    ])

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>{_e(profile.personal.fullName)} - Resume</title>
    <style>{RESUME_CSS}    </style>
</head>
<body>{body}
</body>
</html>
"""
