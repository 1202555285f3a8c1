"""
Tests for Pydantic models to ensure fixture and API contract validation
"""

import json

import pytest
from pydantic import ValidationError

from aiml_gateway.models import (
    CalendarEvent, ChatRequest, CourseRecord, Equipment, FacultyRecord, InfrastructureRecord, Lab
)
from aiml_gateway.services.content_store import (
    CALENDAR_FILE, COURSES_FILE, FACULTY_FILE, INFRASTRUCTURE_FILE
)


class TestContentRecords:
    """Field validation applied when fixtures are loaded"""

    def test_faculty_email_is_normalized(self):
        faculty = FacultyRecord(
            id="f1", name="Dr. Pallavi B", designation="Assistant Professor", email="  PallaviB.MEL@bmsce.ac.in "
        )
        assert faculty.email == "pallavib.mel@bmsce.ac.in"
        assert faculty.specialization == []
        assert faculty.publications == 0

    def test_faculty_requires_name(self):
        with pytest.raises(ValidationError):
            FacultyRecord(id="f1", name="", designation="Professor")

    def test_course_code_is_uppercased(self):
        course = CourseRecord(id="c1", code="22am5pccv", name="Computer Vision", credits=4, semester="5th")
        assert course.code == "22AM5PCCV"
        assert course.examination.cieMarks == 0

    @pytest.mark.parametrize("credits", [0, 7])
    def test_course_credits_are_bounded(self, credits):
        with pytest.raises(ValidationError):
            CourseRecord(id="c1", code="X", name="X", credits=credits, semester="5th")

    def test_calendar_event_accepts_fixture_key_and_field_name(self):
        from_fixture = CalendarEvent(**{"date": "2024-09-23", "event": "CIE I", "type": "exam"})
        by_name = CalendarEvent(date="2024-09-23", label="CIE I", type="exam")
        assert from_fixture == by_name
        assert from_fixture.model_dump(by_alias=True)["event"] == "CIE I"

    def test_calendar_event_type_is_closed(self):
        with pytest.raises(ValidationError):
            CalendarEvent(date="2024-09-23", event="Party", type="party")

    def test_equipment_condition_is_closed(self):
        with pytest.raises(ValidationError):
            Equipment(name="GPU", quantity=1, condition="broken")

    def test_lab_capacity_must_be_positive(self):
        with pytest.raises(ValidationError):
            Lab(name="Empty Lab", capacity=0)

    def test_infrastructure_defaults(self):
        infra = InfrastructureRecord(department="AIML")
        assert infra.labs == []
        assert infra.library.books == 0


class TestChatRequest:
    def test_all_fields_optional(self):
        request = ChatRequest()
        assert request.message is None
        assert request.history == []
        assert request.sessionId is None

    def test_history_turns_are_validated(self):
        request = ChatRequest(message="hi", history=[{"role": "assistant", "content": "Hello!"}])
        assert request.history[0].role == "assistant"
        with pytest.raises(ValidationError):
            ChatRequest(message="hi", history=[{"role": "system", "content": "x"}])


@pytest.mark.parametrize("filename,attr", [
    (FACULTY_FILE, "faculty"),
    (COURSES_FILE, "courses"),
    (CALENDAR_FILE, "calendars"),
    (INFRASTRUCTURE_FILE, "infrastructure"),
])
def test_shipped_fixtures_are_fully_valid(content, data_dir, filename, attr):
    raw = json.loads((data_dir / filename).read_text(encoding="utf-8"))
    expected = len(raw) if isinstance(raw, list) else 1
    assert len(getattr(content, attr)) == expected


def test_fixtures_carry_an_hod_and_fifth_semester_courses(content):
    assert any("hod" in f.designation.lower() for f in content.faculty)
    assert any(c.semester == "5th" for c in content.courses)
