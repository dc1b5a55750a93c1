"""
Global fixtures for all tests.

Sets the test environment BEFORE any project imports, because Config and the
API settings read environment variables at import time:
- no simulated generation latency
- drafts written to a throwaway directory, never ./.drafts
"""

import os
import tempfile

import pytest

os.environ["GENERATION_DELAY_SECONDS"] = "0"
os.environ["ENVIRONMENT"] = "development"
os.environ["CORS_ORIGINS"] = "*"
os.environ.setdefault("DRAFT_DIR", tempfile.mkdtemp(prefix="resume-builder-drafts-"))

from resume_builder.drafts import MemoryDraftStore  # noqa: E402
from resume_builder.profile.models import (  # noqa: E402
    AchievementItem,
    ApplicationProfile,
    CertificationItem,
    EducationItem,
    ExperienceItem,
    JobRole,
    Links,
    PersonalInfo,
    ProjectItem,
    Skills,
)


@pytest.fixture(autouse=True)
def reset_memory_drafts():
    """Every test starts with empty in-memory draft slots."""
    MemoryDraftStore.reset_all()
    yield
    MemoryDraftStore.reset_all()


@pytest.fixture
def minimal_profile():
    """Name, target title and one technical skill; every list section empty."""
    return ApplicationProfile(
        personal=PersonalInfo(fullName="Jane Doe"),
        skills=Skills(technical=["Go"]),
        jobRole=JobRole(title="Backend Engineer"),
    )


@pytest.fixture
def full_profile():
    """A profile with every section filled in."""
    return ApplicationProfile(
        personal=PersonalInfo(
            fullName="Jane Doe",
            email="jane@example.com",
            phone="+1 555 010 2030",
            address="12 Main St, Springfield",
        ),
        links=Links(
            linkedin="linkedin.com/in/janedoe",
            github="https://github.com/janedoe",
        ),
        education=[
            EducationItem(
                school="State University",
                degree="BSc",
                field="Computer Science",
                startYear="2012",
                endYear="2016",
                gpa="3.8",
            )
        ],
        skills=Skills(
            technical=["Go", "Python", "PostgreSQL", "Docker", "Kubernetes", "Redis"],
            soft=["Communication", "Mentoring", "Leadership"],
        ),
        experience=[
            ExperienceItem(
                company="Acme",
                position="Senior Developer",
                startDate="2019-03",
                current=True,
                responsibilities=["Led the payments team", "Cut p99 latency by 40%"],
            ),
            ExperienceItem(
                company="Initech",
                position="Developer",
                startDate="2016-07",
                endDate="2019-02",
                responsibilities=["Maintained billing services"],
            ),
        ],
        projects=[
            ProjectItem(
                title="Queue Visualizer",
                description="Realtime dashboard for message queues",
                technologies=["Go", "React", "WebSockets"],
                link="github.com/janedoe/queue-viz",
            )
        ],
        certifications=[
            CertificationItem(
                name="CKA",
                issuer="CNCF",
                date="2021-05",
                expiryDate="2024-05",
            )
        ],
        achievements=[
            AchievementItem(
                title="Hackathon Winner",
                description="First place at the city open data hackathon",
                date="2018-10",
            )
        ],
        jobRole=JobRole(
            title="Backend Engineer",
            company="Globex",
            description="Build and operate the services behind our logistics platform at scale.",
        ),
    )


@pytest.fixture
def memory_store():
    return MemoryDraftStore()
