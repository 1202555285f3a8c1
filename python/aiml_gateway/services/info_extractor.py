"""
Information Extractor - best-effort structured hints from a user message.

Every field is independent and optional. Matching is order dependent: the
first faculty/course/specialization that hits wins, not the best one.
"""

import re
from typing import Iterable, Optional

from ..models import ExtractedInfo
from .content_store import ContentStore

SEMESTER_PATTERN = re.compile(r"(\d+)(?:st|nd|rd|th)?\s*semester")

SPECIALIZATIONS = (
    "machine learning",
    "deep learning",
    "computer vision",
    "nlp",
    "data science",
    "ai",
    "artificial intelligence",
)


def _first_name_hit(names: Iterable[str], text: str, min_token_len: int) -> Optional[str]:
    """First full name having a token longer than min_token_len inside text"""
    for name in names:
        tokens = name.lower().split()
        if any(len(token) > min_token_len and token in text for token in tokens):
            return name
    return None


def extract(message: str, content: ContentStore) -> ExtractedInfo:
    text = (message or "").lower()

    semester = None
    match = SEMESTER_PATTERN.search(text)
    if match:
        semester = match.group(1)

    specialization = next((s for s in SPECIALIZATIONS if s in text), None)

    return ExtractedInfo(
        semester=semester,
        facultyName=_first_name_hit((f.name for f in content.faculty), text, 2),
        courseName=_first_name_hit((c.name for c in content.courses), text, 3),
        specialization=specialization,
    )
