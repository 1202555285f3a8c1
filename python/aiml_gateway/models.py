"""
Pydantic models for the AIML department gateway.
Fixture records are validated against these at load time; the request/response
envelopes mirror what the React client expects.
"""

from pydantic import BaseModel, Field, validator
from typing import List, Optional, Dict, Any, Literal
from enum import Enum


class IntentLabel(str, Enum):
    """Presumed purpose of a user message, used to pick follow-up suggestions"""
    GREETING = "greeting"
    CAREER_GUIDANCE = "career_guidance"
    PREREQUISITE_ANALYSIS = "prerequisite_analysis"
    FACULTY_COURSE_MAPPING = "faculty_course_mapping"
    SEMESTER_COURSE_QUERY = "semester_course_query"
    RESEARCH_INTEREST_MATCHING = "research_interest_matching"
    CONTACT_INFORMATION = "contact_information"
    INFRASTRUCTURE_QUERY = "infrastructure_query"
    FACULTY_INFORMATION = "faculty_information"
    COURSE_INFORMATION = "course_information"
    GENERAL_INQUIRY = "general_inquiry"


# === Content records ===

class FacultyRecord(BaseModel):
    """Faculty member as stored in comprehensive_faculty.json"""
    id: str
    name: str = Field(..., min_length=1)
    designation: str
    qualification: str = ""
    email: str = ""
    phone: str = ""
    office: str = ""
    officeHours: str = ""
    specialization: List[str] = []
    researchAreas: List[str] = []
    publications: int = Field(default=0, ge=0)
    experience: str = ""
    courses: List[str] = []

    class Config:
        extra = "allow"

    @validator("email")
    def normalize_email(cls, v):
        return v.strip().lower()


class Examination(BaseModel):
    cieMarks: int = Field(default=0, ge=0)
    seeMarks: int = Field(default=0, ge=0)


class CourseRecord(BaseModel):
    """Course catalog entry. Credits are bounded and codes are stored uppercase."""
    id: str
    code: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    credits: int = Field(..., ge=1, le=6)
    semester: str
    prerequisites: List[str] = []
    description: str = ""
    instructor: str = ""
    objectives: List[str] = []
    topics: List[str] = []
    courseOutcomes: List[str] = []
    courseType: str = ""
    contactHours: str = ""
    examination: Examination = Field(default_factory=Examination)

    class Config:
        extra = "allow"

    @validator("code")
    def uppercase_code(cls, v):
        return v.strip().upper()


class CalendarEvent(BaseModel):
    date: str
    label: str = Field(..., alias="event")
    type: Literal["academic", "holiday", "exam", "event", "deadline"]

    class Config:
        populate_by_name = True


class Semester(BaseModel):
    name: str
    startDate: str
    endDate: str
    events: List[CalendarEvent] = []


class Exam(BaseModel):
    subject: str
    date: str
    time: str = ""
    venue: str = ""


class ExaminationSchedule(BaseModel):
    semester: str
    exams: List[Exam] = []


class CalendarRecord(BaseModel):
    """One academic year of the department calendar"""
    academicYear: str = Field(..., min_length=1)
    semesters: List[Semester] = []
    importantDates: List[CalendarEvent] = []
    examinationSchedule: List[ExaminationSchedule] = []


class Equipment(BaseModel):
    name: str
    quantity: int = Field(default=0, ge=0)
    condition: Literal["excellent", "good", "fair", "poor"] = "good"
    lastMaintenance: Optional[str] = None
    nextMaintenance: Optional[str] = None


class Lab(BaseModel):
    name: str
    capacity: int = Field(..., ge=1)
    location: str = ""
    description: str = ""
    equipment: List[Equipment] = []
    facilities: List[str] = []
    availability: str = ""


class Classrooms(BaseModel):
    total: int = Field(default=0, ge=0)
    capacity: int = Field(default=0, ge=0)
    facilities: List[str] = []


class Library(BaseModel):
    books: int = Field(default=0, ge=0)
    journals: int = Field(default=0, ge=0)
    digitalResources: int = Field(default=0, ge=0)
    seatingCapacity: int = Field(default=0, ge=0)
    facilities: List[str] = []


class ComputerLabs(BaseModel):
    total: int = Field(default=0, ge=0)
    computers: int = Field(default=0, ge=0)
    specifications: str = ""
    software: List[str] = []


class ResearchFacility(BaseModel):
    name: str
    description: str = ""
    equipment: List[str] = []
    capacity: int = Field(default=1, ge=1)


class InfrastructureRecord(BaseModel):
    """Department infrastructure: labs, rooms, library and research facilities"""
    department: str = Field(..., min_length=1)
    labs: List[Lab] = []
    classrooms: Classrooms = Field(default_factory=Classrooms)
    library: Library = Field(default_factory=Library)
    computerLabs: ComputerLabs = Field(default_factory=ComputerLabs)
    researchFacilities: List[ResearchFacility] = []


# === Conversation ===

class ConversationTurn(BaseModel):
    """Single message in a session's conversation"""
    role: Literal["user", "assistant"] = Field(..., description="Message sender role")
    content: str = Field(..., description="Message content")


class ExtractedInfo(BaseModel):
    """Best-effort hints pulled out of a user message"""
    semester: Optional[str] = None
    facultyName: Optional[str] = None
    courseName: Optional[str] = None
    specialization: Optional[str] = None


class Entity(BaseModel):
    type: Literal["semester", "faculty", "course", "specialization"]
    value: str


# === Request / response envelopes ===

class ChatRequest(BaseModel):
    """
    Chat request. Every field is optional at the schema level so that a
    missing message can be reported with the static 400 message instead of
    a schema error.
    """
    message: Optional[str] = Field(None, description="User message/question")
    history: List[ConversationTurn] = Field(default=[], description="Client-held conversation turns")
    sessionId: Optional[str] = Field(None, description="Session identifier scoping conversation memory")

    class Config:
        json_schema_extra = {
            "example": {
                "message": "What courses are available in 5th semester?",
                "sessionId": "browser-tab-1",
                "history": []
            }
        }


class ChatReplyData(BaseModel):
    response: str
    sources: List[str] = []
    suggestions: List[str] = []
    confidence: float = Field(..., ge=0.0, le=1.0)
    intent: IntentLabel
    extractedInfo: ExtractedInfo
    entities: List[Entity] = []


class ChatResponse(BaseModel):
    success: bool = True
    data: ChatReplyData


class SuggestionRequest(BaseModel):
    query: Optional[str] = None


class HealthResponse(BaseModel):
    """Health check response"""
    status: Literal["OK"] = "OK"
    timestamp: str
    services: Dict[str, Any] = {}
