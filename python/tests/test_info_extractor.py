import pytest

from aiml_gateway.services.info_extractor import extract


@pytest.mark.parametrize("message,semester", [
    ("courses in 5th semester", "5"),
    ("What is taught in 3rd semester?", "3"),
    ("1st semester timetable", "1"),
    ("7 semester electives", "7"),
    ("4semester", "4"),
])
def test_semester_capture(content, message, semester):
    assert extract(message, content).semester == semester


def test_no_semester_without_the_word(content):
    assert extract("What about sem 5?", content).semester is None


def test_faculty_name_by_token(content):
    info = extract("What does Pallavi teach?", content)
    assert info.facultyName == "Dr. Pallavi B"


def test_first_faculty_hit_wins(content):
    # "Dr." is a three character token, so any message containing it hits the first record
    info = extract("Tell me about Dr. Pallavi B", content)
    assert info.facultyName == "Dr. M Dakshayini"


def test_course_name_and_specialization(content):
    info = extract("When is the Computer Vision exam?", content)
    assert info.courseName == "Computer Vision"
    assert info.specialization == "computer vision"
    assert info.facultyName is None


def test_course_match_is_order_dependent(content):
    # "learning" hits Machine Learning before Deep Learning Fundamentals in fixture order
    assert extract("prerequisites for deep learning", content).courseName == "Machine Learning"


def test_specialization_is_a_substring_match(content):
    assert extract("Which labs are available?", content).specialization == "ai"


def test_empty_message_extracts_nothing(content):
    info = extract("", content)
    assert info.model_dump() == {
        "semester": None, "facultyName": None, "courseName": None, "specialization": None
    }


def test_empty_store_still_extracts_semester(empty_content):
    info = extract("Sandeep's 5th semester course", empty_content)
    assert info.semester == "5"
    assert info.facultyName is None
    assert info.courseName is None


def test_extract_is_pure(content):
    message = "Who teaches NLP in 5th semester?"
    assert extract(message, content) == extract(message, content)
