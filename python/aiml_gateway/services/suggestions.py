from typing import Dict, List

from ..models import IntentLabel

SUGGESTIONS: Dict[IntentLabel, List[str]] = {
    IntentLabel.GREETING: [
        "Tell me about the faculty members",
        "What courses are available?",
        "Show me the department facilities",
    ],
    IntentLabel.CAREER_GUIDANCE: [
        "What courses should I take for data science?",
        "Show me faculty who specialize in AI",
        "What are the prerequisites for machine learning courses?",
    ],
    IntentLabel.PREREQUISITE_ANALYSIS: [
        "Which semester offers this course?",
        "Who teaches the prerequisite courses?",
        "What should I study before Deep Learning?",
    ],
    IntentLabel.FACULTY_COURSE_MAPPING: [
        "What other courses does this faculty teach?",
        "Show me all faculty members",
        "What are their research areas?",
    ],
    IntentLabel.SEMESTER_COURSE_QUERY: [
        "What are the prerequisites for these courses?",
        "Who teaches these courses?",
        "Show me courses from other semesters",
    ],
    IntentLabel.RESEARCH_INTEREST_MATCHING: [
        "Which faculty work on computer vision?",
        "What research facilities does the department have?",
        "How can I join a research project?",
    ],
    IntentLabel.CONTACT_INFORMATION: [
        "Show me all faculty members",
        "What are their specializations?",
        "Who is the HOD?",
    ],
    IntentLabel.INFRASTRUCTURE_QUERY: [
        "What equipment is available in the labs?",
        "Show me faculty members",
        "What courses are available?",
    ],
    IntentLabel.FACULTY_INFORMATION: [
        "Find faculty by specialization",
        "Get faculty contact information",
        "Who is the HOD?",
    ],
    IntentLabel.COURSE_INFORMATION: [
        "Find courses by semester",
        "Check course prerequisites",
        "Who teaches Machine Learning?",
    ],
}

DEFAULT_SUGGESTIONS = [
    "Tell me about the faculty",
    "What courses are available?",
    "Show me the labs",
]


def suggest(intent: IntentLabel) -> List[str]:
    """Three follow-up questions for an intent label"""
    return list(SUGGESTIONS.get(intent, DEFAULT_SUGGESTIONS))
