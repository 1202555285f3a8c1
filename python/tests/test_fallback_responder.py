import pytest

from aiml_gateway.services.fallback_responder import respond


def test_greeting_names_the_assistant(content):
    answer = respond("hello", content)
    assert answer.rule == "greeting"
    assert "Liam" in answer.text
    assert "AIML" in answer.text


def test_fifth_semester_listing(content):
    answer = respond("What courses are available in 5th semester?", content)
    assert answer.rule == "semester_courses"
    assert answer.sources == ["Course Catalog"]
    fifth = [c for c in content.courses if c.semester == "5th"]
    assert len(fifth) == 4
    for course in fifth:
        assert f"• {course.name} ({course.code}) - {course.credits} credits" in answer.text
    assert "Machine Learning (" not in answer.text


def test_semester_defaults_to_five(content):
    answer = respond("show me semester courses", content)
    assert answer.rule == "semester_courses"
    assert "Semester 5 courses" in answer.text


def test_other_semester_number(content):
    answer = respond("courses in 4th semester", content)
    assert "Machine Learning (22AM4PCML)" in answer.text
    assert "Computer Vision" not in answer.text


def test_hod_lookup(content):
    answer = respond("who is the hod", content)
    assert answer.rule == "hod_lookup"
    assert "Dr. M Dakshayini" in answer.text
    assert "dakshayini.ise@bmsce.ac.in" in answer.text


def test_specific_faculty_needs_every_name_token(content):
    answer = respond("How do I contact Sandeep Varma?", content)
    assert answer.rule == "faculty_lookup"
    assert "sandeep.mel@bmsce.ac.in" in answer.text

    # only one of the two significant tokens
    assert respond("Is sandeep around?", content).rule != "faculty_lookup"


def test_specific_faculty_beats_hod(content):
    answer = respond("is dakshayini the hod?", content)
    assert answer.rule == "faculty_lookup"


@pytest.mark.parametrize("message,rule,marker", [
    ("Who are the faculty members?", "faculty_list", "Dr. Pallavi B"),
    ("List the subjects", "course_list", "Generative AI (22AM6PEGAI)"),
    ("What equipment do you have?", "lab_list", "Computer Vision Lab"),
])
def test_generic_listings(content, message, rule, marker):
    answer = respond(message, content)
    assert answer.rule == rule
    assert marker in answer.text


def test_default_capability_sentence(content):
    answer = respond("What is the fee structure?", content)
    assert answer.rule == "capabilities"
    assert answer.text


@pytest.mark.parametrize("message", [
    "", "hello", "who is the hod", "faculty", "courses", "labs",
    "What courses are available in 5th semester?", "anything else",
])
def test_never_empty(content, empty_content, message):
    assert respond(message, content).text.strip()
    assert respond(message, empty_content).text.strip()
