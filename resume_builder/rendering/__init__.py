"""Document rendering: resume and cover letter HTML."""

from .renderer import DocumentKind, document_filename, parse_document_kind, render, sanitize_for_path

__all__ = ["DocumentKind", "document_filename", "parse_document_kind", "render", "sanitize_for_path"]
