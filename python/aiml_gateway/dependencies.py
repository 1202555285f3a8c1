"""
FastAPI dependencies to avoid circular imports.

main.py fills `state` on startup; routers only ever see these getters, which
tests replace through app.dependency_overrides.
"""
from types import SimpleNamespace

from fastapi import HTTPException

from .config import Settings
from .services.chat_service import ChatService
from .services.content_store import ContentStore
from .services.context_store import ConversationContextStore

state = SimpleNamespace(settings=None, content=None, contexts=None, chat_service=None)


def get_settings() -> Settings:
    if state.settings is None:
        raise HTTPException(status_code=503, detail="Settings not loaded")
    return state.settings


def get_content_store() -> ContentStore:
    """Dependency to get the content snapshot"""
    if state.content is None:
        raise HTTPException(status_code=503, detail="Content store not available")
    return state.content


def get_context_store() -> ConversationContextStore:
    if state.contexts is None:
        raise HTTPException(status_code=503, detail="Conversation store not available")
    return state.contexts


def get_chat_service() -> ChatService:
    """Dependency to get the chat service instance"""
    if state.chat_service is None:
        raise HTTPException(status_code=503, detail="Chat service not available")
    return state.chat_service
