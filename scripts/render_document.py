"""
CLI Entry Point: Render a resume or cover letter to HTML

Usage:
    python scripts/render_document.py --profile profile.json --type resume
    python scripts/render_document.py --draft --type cover-letter --generate --output out/
"""

import argparse
import asyncio
import sys
from pathlib import Path
from typing import List, Optional

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from resume_builder.common.config import Config
from resume_builder.common.error_handling import ProfileValidationError
from resume_builder.common.logger import setup_logging
from resume_builder.drafts import FileDraftStore
from resume_builder.generation import ContentGenerationService, GeneratedContent
from resume_builder.profile.models import ApplicationProfile
from resume_builder.rendering import DocumentKind, document_filename, render


def load_profile(profile_path: Optional[str], use_draft: bool) -> ApplicationProfile:
    """Load the profile from a JSON file or from the saved draft."""
    if use_draft:
        profile = FileDraftStore().load()
        if profile is None:
            raise FileNotFoundError(f"No saved draft at {Config.draft_path()}")
        return profile

    path = Path(profile_path)
    if not path.exists():
        raise FileNotFoundError(f"Profile not found: {profile_path}")
    return ApplicationProfile.from_json(path.read_text(encoding="utf-8"))


async def generate_for(kind: DocumentKind, profile: ApplicationProfile) -> GeneratedContent:
    """Run narrative generation for the document being rendered."""
    service = ContentGenerationService()
    if kind == DocumentKind.COVER_LETTER:
        result = await service.generate_cover_letter(profile)
        return GeneratedContent(coverLetter=result.coverLetter)
    result = await service.generate_resume(profile)
    return GeneratedContent(resume=result.resume)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI function. Returns the process exit code."""
    parser = argparse.ArgumentParser(
        description="Render a resume or cover letter from an application profile"
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--profile",
        help="Path to an application profile JSON file"
    )
    source.add_argument(
        "--draft",
        action="store_true",
        help="Use the saved draft (DRAFT_DIR / DRAFT_SLOT)"
    )
    parser.add_argument(
        "--type",
        default=DocumentKind.RESUME.value,
        choices=[kind.value for kind in DocumentKind],
        help="Document type (both renders the resume)"
    )
    parser.add_argument(
        "--generate",
        action="store_true",
        help="Run narrative generation before rendering"
    )
    parser.add_argument(
        "--output",
        default=".",
        help="Output directory (default: current directory)"
    )

    args = parser.parse_args(argv)
    setup_logging(Config.LOG_LEVEL, Config.LOG_FORMAT)

    try:
        Config.validate()
        profile = load_profile(args.profile, args.draft)
        kind = DocumentKind(args.type)

        generated = asyncio.run(generate_for(kind, profile)) if args.generate else None
        html = render(kind, profile, generated)

        output_dir = Path(args.output)
        output_dir.mkdir(parents=True, exist_ok=True)
        output_path = output_dir / document_filename(kind, profile.personal.fullName)
        output_path.write_text(html, encoding="utf-8")

        print(f"✅ Wrote {output_path}")
        return 0

    except ProfileValidationError as e:
        print(f"❌ {e.message}", file=sys.stderr)
        return 2
    except (FileNotFoundError, ValueError) as e:
        print(f"❌ ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
