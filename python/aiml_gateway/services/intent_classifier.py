# Intent Classifier - ordered keyword rules, first match wins
# This is a priority list, not a scorer: "hello, which course..." is a greeting.

from dataclasses import dataclass
from typing import Tuple

from ..models import IntentLabel


@dataclass(frozen=True)
class IntentRule:
    """
    A rule fires when the message contains any keyword from `any_of`, or,
    for conjunctive rules, at least one keyword from every group in `all_of`.
    """
    label: IntentLabel
    any_of: Tuple[str, ...] = ()
    all_of: Tuple[Tuple[str, ...], ...] = ()

    def matches(self, text: str) -> bool:
        if self.all_of:
            return all(_contains_any(text, group) for group in self.all_of)
        return _contains_any(text, self.any_of)


INTENT_RULES: Tuple[IntentRule, ...] = (
    IntentRule(IntentLabel.GREETING, any_of=(
        "hello", "hi", "hey", "greetings", "good morning", "good afternoon", "good evening", "namaste",
    )),
    IntentRule(IntentLabel.CAREER_GUIDANCE, any_of=(
        "career", "become", "job", "jobs", "placement", "placements", "internship", "internships",
    )),
    IntentRule(IntentLabel.PREREQUISITE_ANALYSIS, any_of=(
        "prerequisite", "prerequisites", "before taking", "need to know", "required for", "prepare for",
    )),
    IntentRule(IntentLabel.FACULTY_COURSE_MAPPING, any_of=(
        "teaches", "who teaches", "taught by", "teaching", "handles",
    )),
    IntentRule(IntentLabel.SEMESTER_COURSE_QUERY, all_of=(
        ("semester", "sem"),
        ("course", "courses", "subject", "subjects"),
    )),
    IntentRule(IntentLabel.RESEARCH_INTEREST_MATCHING, any_of=(
        "research", "interested in", "publication", "publications", "project", "projects", "guide",
    )),
    IntentRule(IntentLabel.CONTACT_INFORMATION, any_of=(
        "email", "contact", "phone", "office hours", "reach", "hod", "head of department",
    )),
    IntentRule(IntentLabel.INFRASTRUCTURE_QUERY, any_of=(
        "lab", "labs", "laboratory", "infrastructure", "facility", "facilities", "equipment",
        "library", "classroom", "classrooms", "computers",
    )),
    IntentRule(IntentLabel.FACULTY_INFORMATION, any_of=(
        "faculty", "professor", "professors", "teacher", "teachers", "staff", "lecturer", "lecturers",
    )),
    IntentRule(IntentLabel.COURSE_INFORMATION, any_of=(
        "course", "courses", "subject", "subjects", "syllabus", "credit", "credits", "elective", "electives",
    )),
)


def _contains_any(text: str, keywords: Tuple[str, ...]) -> bool:
    # plain substrings: "hi" fires inside "which" and "machine"
    return any(k in text for k in keywords)


def classify(message: str) -> IntentLabel:
    """Map a free-text message to the label of the first matching rule"""
    text = (message or "").lower()
    for rule in INTENT_RULES:
        if rule.matches(text):
            return rule.label
    return IntentLabel.GENERAL_INQUIRY
