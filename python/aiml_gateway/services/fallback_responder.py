"""
Fallback Responder - degraded keyword-only answers used when the completion
provider is unavailable (or the gateway runs in demo mode).

The keyword set and priority order here are independent from the
intent classifier, so the suggestion bucket and the fallback text can disagree
for the same message. Rules are tested in order and the first match answers.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import List, Optional

from ..models import FacultyRecord
from .content_store import ContentStore
from .info_extractor import SEMESTER_PATTERN

logger = logging.getLogger(__name__)

DEFAULT_SEMESTER = "5"
HONORIFICS = {"dr", "dr.", "prof", "prof.", "mr", "mr.", "mrs", "mrs.", "ms", "ms."}

GREETING_RESPONSE = (
    "Hello! I'm Liam, your AI assistant for the AIML department at BMSCE. "
    "I can help you with faculty information, course details, academic guidance, "
    "and more. What would you like to know?"
)
CAPABILITY_RESPONSE = (
    "I can help you with faculty information, course details, academic guidance, "
    "and department facilities. What specific information do you need?"
)

FACULTY_KEYWORDS = ("faculty", "professor", "teacher", "staff")
COURSE_KEYWORDS = ("course", "subject", "syllabus")
LAB_KEYWORDS = ("lab", "infrastructure", "facility", "equipment")
GREETING_PATTERN = re.compile(r"\b(hello|hi|hey)\b")


@dataclass
class FallbackAnswer:
    text: str
    rule: str
    sources: List[str] = field(default_factory=list)


def _name_tokens(faculty: FacultyRecord) -> List[str]:
    """Name tokens that identify a person: no titles, no initials"""
    return [t for t in faculty.name.lower().split() if len(t) > 2 and t not in HONORIFICS]


def _match_faculty(text: str, content: ContentStore) -> Optional[FacultyRecord]:
    for faculty in content.faculty:
        tokens = _name_tokens(faculty)
        if tokens and all(token in text for token in tokens):
            return faculty
    return None


def _faculty_lookup(faculty: FacultyRecord) -> str:
    details = [f"Email: {faculty.email}" if faculty.email else None,
               f"Phone: {faculty.phone}" if faculty.phone else None,
               f"Office: {faculty.office}" if faculty.office else None]
    contact = ", ".join(d for d in details if d)
    return f"{faculty.name} ({faculty.designation})" + (f" - {contact}" if contact else "")


def _hod(content: ContentStore) -> Optional[FacultyRecord]:
    return next((f for f in content.faculty if "hod" in f.designation.lower()), None) or next(
        (f for f in content.faculty if "head" in f.designation.lower()), None
    )


def _semester_number(label: str) -> Optional[str]:
    match = re.match(r"\s*(\d+)", label)
    return match.group(1) if match else None


def _semester_listing(text: str, content: ContentStore) -> str:
    match = SEMESTER_PATTERN.search(text)
    number = match.group(1) if match else DEFAULT_SEMESTER
    courses = [c for c in content.courses if _semester_number(c.semester) == number]
    if not courses:
        return f"I don't have any courses listed for semester {number} right now."
    lines = "\n".join(f"• {c.name} ({c.code}) - {c.credits} credits" for c in courses)
    return f"Semester {number} courses include:\n{lines}\n\nThese courses build on your foundation from previous semesters."


def _faculty_listing(content: ContentStore) -> str:
    if not content.faculty:
        return "Faculty information is not available right now."
    lines = "\n".join(
        f"• {f.name} ({f.designation}) - {f.specialization[0] if f.specialization else 'AI/ML'}"
        for f in content.faculty
    )
    return f"Faculty Members:\n{lines}\n\nFor specific faculty details, ask about individual members."


def _course_listing(content: ContentStore) -> str:
    if not content.courses:
        return "Course information is not available right now."
    lines = "\n".join(f"• {c.name} ({c.code}) - {c.semester} semester, {c.credits} credits" for c in content.courses)
    return f"Courses offered by the department:\n{lines}"


def _lab_listing(content: ContentStore) -> str:
    infra = content.infrastructure_for()
    if infra is None or not infra.labs:
        return ("The department has modern computer labs with advanced computing facilities "
                "for AI/ML research and development.")
    lines = "\n".join(f"• {lab.name} - {lab.capacity} students, {lab.location}" for lab in infra.labs)
    return f"Available Labs:\n{lines}\n\nAll labs are equipped with modern computing facilities and specialized software."


def respond(message: str, content: ContentStore) -> FallbackAnswer:
    """Answer from the content snapshot alone; never returns empty text"""
    text = (message or "").lower()

    faculty = _match_faculty(text, content)
    if faculty is not None:
        return FallbackAnswer(_faculty_lookup(faculty), "faculty_lookup", ["Faculty Directory"])

    if "hod" in text or "head of" in text:
        hod = _hod(content)
        if hod is not None:
            answer = f"{hod.name} is the {hod.designation} of the AIML department."
            if hod.email:
                answer += f" You can reach them at {hod.email}."
            return FallbackAnswer(answer, "hod_lookup", ["Faculty Directory"])

    if "semester" in text and "course" in text:
        return FallbackAnswer(_semester_listing(text, content), "semester_courses", ["Course Catalog"])

    if any(k in text for k in FACULTY_KEYWORDS):
        return FallbackAnswer(_faculty_listing(content), "faculty_list", ["Faculty Directory"])

    if any(k in text for k in COURSE_KEYWORDS):
        return FallbackAnswer(_course_listing(content), "course_list", ["Course Catalog"])

    if any(k in text for k in LAB_KEYWORDS):
        return FallbackAnswer(_lab_listing(content), "lab_list", ["Infrastructure Guide"])

    if GREETING_PATTERN.search(text):
        return FallbackAnswer(GREETING_RESPONSE, "greeting", ["AI Assistant"])

    return FallbackAnswer(CAPABILITY_RESPONSE, "capabilities", ["General Information"])
