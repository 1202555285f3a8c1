from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Body, Depends

from ..dependencies import get_chat_service
from ..errors import NotFoundError, ValidationError
from ..models import ChatRequest, ChatResponse, SuggestionRequest
from ..services.chat_service import ChatService
from ..services.intent_classifier import classify
from ..services.suggestions import suggest

router = APIRouter(prefix="/api/ai", tags=["ai"])

CAPABILITIES = [
    {
        "category": "Faculty Information",
        "description": "Get information about faculty members, their specializations, research areas, and contact details",
        "examples": [
            "Who teaches Machine Learning?",
            "What are Dr. Sandeep Varma N's research areas?",
            "Find faculty specializing in Deep Learning",
        ],
    },
    {
        "category": "Course Information",
        "description": "Browse courses, check prerequisites, schedules, and course details",
        "examples": [
            "What courses are available in 5th semester?",
            "What are the prerequisites for Deep Learning?",
            "Who teaches Computer Vision?",
        ],
    },
    {
        "category": "Academic Calendar",
        "description": "Check academic schedules, important dates, and examination timetables",
        "examples": [
            "When are the mid-term exams?",
            "What are the upcoming holidays?",
            "Show me the examination schedule",
        ],
    },
    {
        "category": "Infrastructure",
        "description": "Explore department labs, equipment, and facilities",
        "examples": [
            "What labs are available?",
            "What equipment is in the AI lab?",
            "How many computers are in the computer labs?",
        ],
    },
]


@router.post("/chat", response_model=ChatResponse)
async def chat(
    payload: Optional[ChatRequest] = Body(None),
    chat_service: ChatService = Depends(get_chat_service),
):
    """One assistant turn; provider failures degrade to keyword answers, never to an error"""
    if payload is None or not payload.message or not payload.message.strip():
        raise ValidationError("Message is required")
    reply = await chat_service.handle(payload.message, payload.sessionId, payload.history)
    return ChatResponse(data=reply)


@router.post("/suggestions")
async def suggestions(payload: Optional[SuggestionRequest] = Body(None)):
    if payload is None or not payload.query or not payload.query.strip():
        raise ValidationError("Query is required")
    intent = classify(payload.query)
    return {
        "success": True,
        "data": {
            "suggestions": suggest(intent),
            "intent": intent.value,
            "timestamp": datetime.utcnow().isoformat(),
        },
    }


@router.get("/help")
async def help_catalogue():
    return {
        "success": True,
        "data": {
            "capabilities": CAPABILITIES,
            "message": (
                "I can help you with information about the AIML department at BMSCE. "
                "Ask me anything about faculty, courses, academic calendar, or infrastructure!"
            ),
        },
    }


@router.get("/conversation/{session_id}")
async def conversation(session_id: str, chat_service: ChatService = Depends(get_chat_service)):
    turns = chat_service.conversation(session_id)
    if turns is None:
        raise NotFoundError("Conversation not found")
    return {"success": True, "sessionId": session_id, "count": len(turns), "data": turns}
