"""
Resume Builder - form-state management and document rendering.

Collects a candidate's career data section by section, keeps it as a
single-slot draft, and renders resumes and cover letters as self-contained
HTML documents, optionally enriched by a narrative generation step.
"""

from .version import __version__, __version_info__  # noqa: F401
