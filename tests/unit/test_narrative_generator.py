"""
Unit tests for resume_builder/generation/narrative.py

Tests the template pieces of the deterministic narrative generator.
"""

import asyncio
from unittest.mock import AsyncMock, patch

import pytest

from resume_builder.generation.narrative import (
    GREETING,
    PROJECT_IMPACT,
    TemplateNarrativeGenerator,
    build_cover_letter,
    build_generated_content,
    build_summary,
    enhance_experience,
    enhance_projects,
    enhance_responsibility,
)
from resume_builder.profile.models import ApplicationProfile, ExperienceItem, JobRole, ProjectItem


class TestSummary:
    """Tests for the professional summary."""

    def test_full_profile(self, full_profile):
        """Test the summary text for the full profile."""
        assert build_summary(full_profile) == (
            "Dynamic Backend Engineer with expertise in Go, Python, PostgreSQL. "
            "Proven track record of delivering innovative solutions and driving results in fast-paced environments. "
            "Strong background in Computer Science with excellent Communication and Mentoring skills."
        )

    def test_falls_back_to_technology_without_education(self, minimal_profile):
        """Test the field defaults to technology without education."""
        assert "Strong background in technology" in build_summary(minimal_profile)


class TestEnhancement:
    """Tests for experience and project enhancement."""

    def test_responsibility_template(self):
        """Test the responsibility template."""
        assert enhance_responsibility("Shipped features") == (
            "• Enhanced: Shipped features - resulting in improved efficiency and team productivity"
        )

    def test_experience_one_to_one(self, full_profile):
        """Test each experience entry maps to one enhanced entry."""
        enhanced = enhance_experience(full_profile.experience)
        assert [e.company for e in enhanced] == ["Acme", "Initech"]
        assert len(enhanced[0].enhancedResponsibilities) == 2
        assert enhanced[0].enhancedResponsibilities[1].startswith("• Enhanced: Cut p99 latency")
        assert enhanced[0].responsibilities == full_profile.experience[0].responsibilities

    def test_experience_without_responsibilities(self):
        """Test an entry without responsibilities stays empty."""
        enhanced = enhance_experience([ExperienceItem(company="Acme")])
        assert enhanced[0].enhancedResponsibilities == []

    def test_projects(self, full_profile):
        """Test the enhanced project description and impact."""
        project = enhance_projects(full_profile.projects)[0]
        assert project.enhancedDescription == (
            "Realtime dashboard for message queues - This project demonstrates advanced "
            "proficiency in Go and React."
        )
        assert project.impact == PROJECT_IMPACT
        assert project.link == "github.com/janedoe/queue-viz"

    def test_project_with_single_technology(self):
        """Test a single technology is named alone."""
        project = enhance_projects([ProjectItem(description="CLI", technologies=["Rust"])])[0]
        assert project.enhancedDescription.endswith("proficiency in Rust.")


class TestCoverLetter:
    """Tests for cover letter assembly."""

    def test_without_experience_has_five_paragraphs(self, minimal_profile):
        """Test the letter without experience has five paragraphs."""
        letter = build_cover_letter(minimal_profile)
        paragraphs = letter.content.split("\n\n")
        assert len(paragraphs) == 5
        assert paragraphs[0] == GREETING
        assert paragraphs[-1] == "Sincerely,\nJane Doe"

    def test_experience_paragraph(self, full_profile):
        """Test experience adds a paragraph from the first responsibility."""
        letter = build_cover_letter(full_profile)
        assert "At Acme, I led the payments team." in letter.content
        assert len(letter.content.split("\n\n")) == 6

    def test_experience_without_responsibilities(self, minimal_profile):
        """Test the fallback sentence for experience without responsibilities."""
        profile = minimal_profile.model_copy(update={"experience": [ExperienceItem(company="Acme")]})
        assert "At Acme, I contributed significantly to the team." in build_cover_letter(profile).content

    def test_company_mentions(self, full_profile):
        """Test the company is named in opening and closing."""
        letter = build_cover_letter(full_profile)
        assert "the Backend Engineer position at Globex." in letter.content
        assert "contribute to Globex's continued success" in letter.strongClosing

    def test_without_company(self, minimal_profile):
        """Test the wording when no company is given."""
        letter = build_cover_letter(minimal_profile)
        assert "the Backend Engineer position." in letter.personalizedOpening
        assert "your organization's continued success" in letter.strongClosing

    def test_pieces(self, full_profile):
        """Test the opening, body paragraphs and skills listing."""
        letter = build_cover_letter(full_profile)
        assert letter.personalizedOpening.startswith(GREETING)
        assert len(letter.bodyParagraphs) == 3
        assert "Go, Python, PostgreSQL, Docker, Kubernetes" in letter.bodyParagraphs[1]
        assert "passion for Go" in letter.bodyParagraphs[2]

    def test_passion_defaults_to_technology(self):
        """Test the passion line without technical skills."""
        profile = ApplicationProfile(jobRole=JobRole(title="Dev"))
        assert "passion for technology" in build_cover_letter(profile).content


class TestTemplateNarrativeGenerator:
    """Tests for the async generator wrapper."""

    @pytest.mark.asyncio
    async def test_matches_pure_template_fill(self, full_profile):
        """Test the generator returns the template fill."""
        result = await TemplateNarrativeGenerator().generate(full_profile)
        assert result == build_generated_content(full_profile)

    @pytest.mark.asyncio
    async def test_waits_configured_delay(self, minimal_profile):
        """Test the configured delay is awaited."""
        with patch("resume_builder.generation.narrative.asyncio.sleep", new_callable=AsyncMock) as sleep:
            await TemplateNarrativeGenerator(delay_seconds=1.5).generate(minimal_profile)
        sleep.assert_awaited_once_with(1.5)

    @pytest.mark.asyncio
    async def test_no_delay_skips_sleep(self, minimal_profile):
        """Test a zero delay skips sleeping."""
        with patch("resume_builder.generation.narrative.asyncio.sleep", new_callable=AsyncMock) as sleep:
            await TemplateNarrativeGenerator(delay_seconds=0).generate(minimal_profile)
        sleep.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_delay_does_not_block_event_loop(self, minimal_profile):
        """Test concurrent generations share the event loop."""
        generator = TemplateNarrativeGenerator(delay_seconds=0.05)
        results = await asyncio.gather(*(generator.generate(minimal_profile) for _ in range(3)))
        assert results[0] == results[1] == results[2]
