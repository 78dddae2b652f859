"""Turn uploaded documents and referenced URLs into stored summary text.

No real extraction happens: every source type yields a fixed summary, with a
short preview of the source text where one is available.
"""
import logging
import re
from typing import Optional

from ..models.custom_content import ContentType
from ..utils.errors import InvalidVideoUrlError, MissingContentSourceError

logger = logging.getLogger(__name__)

PREVIEW_LENGTH = 200

VIDEO_ID_PATTERN = re.compile(r"(?:youtube\.com/watch\?v=|youtu\.be/|youtube\.com/embed/)([^&\n?#]+)")


def extract_video_id(url: str) -> Optional[str]:
    """Video id from a watch, youtu.be or embed URL; None for anything else."""
    match = VIDEO_ID_PATTERN.search(url or "")
    return match.group(1) if match else None


def _preview(text: str) -> str:
    return f"{text[:PREVIEW_LENGTH]}..."


def process_youtube_content(url: str) -> str:
    video_id = extract_video_id(url)
    if not video_id:
        raise InvalidVideoUrlError(url)

    return f"""Educational Content Summary for YouTube Video ({video_id}):

Key Programming Concepts:
• Variables and Data Types
• Control Structures (if/else, loops)
• Functions and Methods
• Object-Oriented Programming
• Error Handling

Code Examples Covered:
• Basic syntax and variable declarations
• Function definitions and calls
• Class structures and inheritance
• Exception handling patterns

Learning Objectives:
• Understanding fundamental programming concepts
• Writing clean, readable code
• Implementing best practices
• Problem-solving approaches

This content has been processed and integrated into your AI tutor's knowledge base."""


def process_website_content(url: str) -> str:
    # Pages are never fetched or scraped.
    return f"Website content from {url}"


def process_pdf_content(content: str) -> str:
    return f"""PDF Content Analysis:

Document Processing Complete:
• Text extraction successful
• Programming concepts identified
• Code examples catalogued
• Learning materials structured

Key Topics Detected:
• Programming fundamentals
• Advanced concepts and patterns
• Practical applications
• Industry best practices

Content Structure:
• Theoretical explanations
• Hands-on examples
• Exercises and challenges
• Reference materials

Integration Status:
• Content processed and organized
• Knowledge base enhanced
• AI tutor capabilities expanded

Content preview: {_preview(content)}"""


def ingest(source_type, payload: str) -> str:
    """Dispatch on the content type.

    ``payload`` is the decoded document text for pdf uploads and the URL for
    youtube and website references.
    """
    source_type = ContentType(source_type)
    if not payload:
        raise MissingContentSourceError(
            "A file is required for pdf content" if source_type is ContentType.PDF
            else f"A url is required for {source_type.value} content"
        )

    if source_type is ContentType.PDF:
        summary = process_pdf_content(payload)
    elif source_type is ContentType.YOUTUBE:
        summary = process_youtube_content(payload)
    else:
        summary = process_website_content(payload)

    logger.info("Ingested %s content (%d chars)", source_type.value, len(summary))
    return summary
