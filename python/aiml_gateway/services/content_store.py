# Content Store - immutable snapshot of the four department fixtures
# Loaded once at startup and shared by reference with every request handler

import json
import logging
from collections import Counter
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Type

from pydantic import BaseModel, ValidationError

from ..models import (
    FacultyRecord, CourseRecord, CalendarRecord, CalendarEvent,
    InfrastructureRecord, Lab, ResearchFacility, Semester, ExaminationSchedule
)

logger = logging.getLogger(__name__)

FACULTY_FILE = "comprehensive_faculty.json"
COURSES_FILE = "comprehensive_courses.json"
CALENDAR_FILE = "comprehensive_academic_calendar.json"
INFRASTRUCTURE_FILE = "comprehensive_infrastructure.json"


def _contains(haystack: Optional[str], needle: str) -> bool:
    return needle.lower() in (haystack or "").lower()


def _any_contains(values: List[str], needle: str) -> bool:
    return any(_contains(v, needle) for v in values)


def _parse_date(value: str) -> Optional[date]:
    try:
        return date.fromisoformat(value[:10])
    except (TypeError, ValueError):
        return None


def _date_sort_key(event: CalendarEvent):
    parsed = _parse_date(event.date)
    # unparseable dates sort after every real date
    return (parsed is None, parsed or date.max)


@dataclass(frozen=True)
class ContentStore:
    """Read-only view over faculty, courses, calendar and infrastructure records"""

    faculty: Tuple[FacultyRecord, ...] = ()
    courses: Tuple[CourseRecord, ...] = ()
    calendars: Tuple[CalendarRecord, ...] = ()
    infrastructure: Tuple[InfrastructureRecord, ...] = ()

    # === Faculty ===

    def find_faculty(
        self,
        search: Optional[str] = None,
        designation: Optional[str] = None,
        specialization: Optional[str] = None,
    ) -> List[FacultyRecord]:
        results = list(self.faculty)
        if search:
            results = [
                f for f in results
                if _contains(f.name, search)
                or _any_contains(f.specialization, search)
                or _any_contains(f.researchAreas, search)
            ]
        if designation:
            results = [f for f in results if _contains(f.designation, designation)]
        if specialization:
            results = [f for f in results if _any_contains(f.specialization, specialization)]
        return sorted(results, key=lambda f: f.name.lower())

    def get_faculty(self, faculty_id: str) -> Optional[FacultyRecord]:
        return next((f for f in self.faculty if f.id == faculty_id), None)

    def faculty_stats(self) -> Dict[str, Any]:
        designations = Counter(f.designation for f in self.faculty)
        specializations = Counter(s for f in self.faculty for s in f.specialization)
        research_areas = {a for f in self.faculty for a in f.researchAreas}
        return {
            "totalFaculty": len(self.faculty),
            "designations": [{"_id": k, "count": v} for k, v in designations.most_common()],
            "specializations": [{"_id": k, "count": v} for k, v in specializations.most_common()],
            "totalPublications": sum(f.publications for f in self.faculty),
            "totalResearchAreas": len(research_areas),
        }

    # === Courses ===

    def find_courses(
        self,
        search: Optional[str] = None,
        semester: Optional[str] = None,
        instructor: Optional[str] = None,
        credits: Optional[int] = None,
    ) -> List[CourseRecord]:
        results = list(self.courses)
        if search:
            results = [
                c for c in results
                if _contains(c.name, search)
                or _contains(c.description, search)
                or _any_contains(c.topics, search)
            ]
        if semester:
            results = [c for c in results if _contains(c.semester, semester)]
        if instructor:
            results = [c for c in results if _contains(c.instructor, instructor)]
        if credits is not None:
            results = [c for c in results if c.credits == credits]
        return sorted(results, key=lambda c: c.code)

    def get_course(self, course_id: str) -> Optional[CourseRecord]:
        return next((c for c in self.courses if c.id == course_id), None)

    def course_prerequisites(self, course_id: str) -> Optional[Dict[str, Any]]:
        """The course's own prerequisites plus the courses that depend on it"""
        course = self.get_course(course_id)
        if course is None:
            return None
        dependents = [c for c in self.courses if course.name in c.prerequisites]
        return {
            "course": course.name,
            "prerequisites": list(course.prerequisites),
            "dependentCourses": [
                {"code": c.code, "name": c.name, "semester": c.semester} for c in dependents
            ],
        }

    def course_stats(self) -> Dict[str, Any]:
        semesters = Counter(c.semester for c in self.courses)
        instructors = Counter(c.instructor for c in self.courses)
        credits = Counter(c.credits for c in self.courses)
        return {
            "totalCourses": len(self.courses),
            "semesters": [{"_id": k, "count": semesters[k]} for k in sorted(semesters)],
            "instructors": [{"_id": k, "count": v} for k, v in instructors.most_common()],
            "credits": [{"_id": k, "count": credits[k]} for k in sorted(credits)],
        }

    # === Calendar ===

    def calendar(self, year: Optional[str] = None) -> Optional[CalendarRecord]:
        """Exact academic year when given, otherwise the latest one"""
        if year:
            return next((c for c in self.calendars if c.academicYear == year), None)
        if not self.calendars:
            return None
        return max(self.calendars, key=lambda c: c.academicYear)

    def calendar_events(self) -> List[CalendarEvent]:
        """Semester events of the latest calendar, in fixture order"""
        cal = self.calendar()
        if cal is None:
            return []
        return [e for s in cal.semesters for e in s.events]

    def events_by_type(self, event_type: str, year: Optional[str] = None) -> Optional[List[CalendarEvent]]:
        cal = self.calendar(year)
        if cal is None:
            return None
        events = [e for s in cal.semesters for e in s.events if e.type == event_type]
        events += [e for e in cal.importantDates if e.type == event_type]
        return sorted(events, key=_date_sort_key)

    def upcoming_events(
        self, today: date, limit: int = 10, year: Optional[str] = None
    ) -> Optional[List[Dict[str, Any]]]:
        cal = self.calendar(year)
        if cal is None:
            return None
        tagged = [(e, s.name) for s in cal.semesters for e in s.events]
        tagged += [(e, "Important Dates") for e in cal.importantDates]
        upcoming = [
            (e, sem) for e, sem in tagged
            if _parse_date(e.date) is not None and _parse_date(e.date) >= today
        ]
        upcoming.sort(key=lambda pair: _date_sort_key(pair[0]))
        return [
            {**e.model_dump(by_alias=True), "semester": sem} for e, sem in upcoming[:limit]
        ]

    def exam_schedule(
        self, semester: Optional[str] = None, year: Optional[str] = None
    ) -> Optional[List[ExaminationSchedule]]:
        cal = self.calendar(year)
        if cal is None:
            return None
        schedule = list(cal.examinationSchedule)
        if semester:
            schedule = [s for s in schedule if _contains(s.semester, semester)]
        return schedule

    def semesters(self, year: Optional[str] = None) -> Optional[List[Semester]]:
        cal = self.calendar(year)
        return None if cal is None else list(cal.semesters)

    def current_semester(self, today: date) -> Optional[Semester]:
        cal = self.calendar()
        if cal is None:
            return None
        for semester in cal.semesters:
            start, end = _parse_date(semester.startDate), _parse_date(semester.endDate)
            if start and end and start <= today <= end:
                return semester
        return None

    # === Infrastructure ===

    def infrastructure_for(self, department: Optional[str] = None) -> Optional[InfrastructureRecord]:
        """Department substring match when given, otherwise the first record"""
        if department:
            return next((i for i in self.infrastructure if _contains(i.department, department)), None)
        return self.infrastructure[0] if self.infrastructure else None

    def labs(self, search: Optional[str] = None, min_capacity: Optional[int] = None) -> Optional[List[Lab]]:
        infra = self.infrastructure_for()
        if infra is None:
            return None
        labs = list(infra.labs)
        if search:
            labs = [lab for lab in labs if _contains(lab.name, search)]
        if min_capacity is not None:
            labs = [lab for lab in labs if lab.capacity >= min_capacity]
        return labs

    def lab(self, name: str) -> Optional[Lab]:
        infra = self.infrastructure_for()
        if infra is None:
            return None
        return next((lab for lab in infra.labs if _contains(lab.name, name)), None)

    def research_facilities(self, search: Optional[str] = None) -> Optional[List[ResearchFacility]]:
        infra = self.infrastructure_for()
        if infra is None:
            return None
        facilities = list(infra.researchFacilities)
        if search:
            facilities = [r for r in facilities if _contains(r.name, search)]
        return facilities

    def infrastructure_stats(self) -> Optional[Dict[str, Any]]:
        infra = self.infrastructure_for()
        if infra is None:
            return None
        by_condition: Dict[str, int] = {}
        for lab in infra.labs:
            for item in lab.equipment:
                by_condition[item.condition] = by_condition.get(item.condition, 0) + item.quantity
        return {
            "totalLabs": len(infra.labs),
            "totalClassrooms": infra.classrooms.total,
            "totalComputerLabs": infra.computerLabs.total,
            "totalComputers": infra.computerLabs.computers,
            "totalBooks": infra.library.books,
            "totalJournals": infra.library.journals,
            "totalEquipment": sum(by_condition.values()),
            "equipmentByCondition": by_condition,
            "researchFacilities": len(infra.researchFacilities),
        }

    def summary(self) -> Dict[str, int]:
        infra = self.infrastructure_for()
        return {
            "faculty": len(self.faculty),
            "courses": len(self.courses),
            "labs": len(infra.labs) if infra else 0,
            "calendar_events": len(self.calendar_events()),
        }


def _read_entries(path: Path) -> List[Dict[str, Any]]:
    """Read a fixture file that holds either one object or a list of objects"""
    if not path.exists():
        logger.warning(f"Fixture not found, domain will be empty: {path}")
        return []
    with open(path, "r", encoding="utf-8") as f:
        raw = json.load(f)
    if isinstance(raw, dict):
        return [raw]
    if isinstance(raw, list):
        return [e for e in raw if isinstance(e, dict)]
    logger.warning(f"Fixture {path.name} has unexpected top-level type {type(raw).__name__}")
    return []


def _validate(
    entries: List[Dict[str, Any]], model: Type[BaseModel], source: str, unique_key: str
) -> Tuple[BaseModel, ...]:
    """Validate entries; the first record wins when unique_key repeats"""
    records = []
    seen = set()
    for index, entry in enumerate(entries):
        try:
            record = model(**entry)
        except ValidationError as e:
            logger.warning(f"Skipping invalid {source} entry #{index}: {e.error_count()} error(s): {e}")
            continue
        key = getattr(record, unique_key)
        if key in seen:
            logger.warning(f"Skipping duplicate {source} entry #{index}: {unique_key}={key!r} already loaded")
            continue
        seen.add(key)
        records.append(record)
    return tuple(records)


def load_content(data_dir: Path) -> ContentStore:
    """Load and validate the four fixtures from data_dir"""
    data_dir = Path(data_dir)
    store = ContentStore(
        faculty=_validate(_read_entries(data_dir / FACULTY_FILE), FacultyRecord, "faculty", "id"),
        courses=_validate(_read_entries(data_dir / COURSES_FILE), CourseRecord, "course", "code"),
        calendars=_validate(
            _read_entries(data_dir / CALENDAR_FILE), CalendarRecord, "calendar", "academicYear"
        ),
        infrastructure=_validate(
            _read_entries(data_dir / INFRASTRUCTURE_FILE), InfrastructureRecord, "infrastructure", "department"
        ),
    )
    logger.info(f"Content loaded from {data_dir}: {store.summary()}")
    return store
