"""
Chat Service - one assistant turn end to end.

classify + extract -> compose prompt -> provider (or keyword fallback)
-> remember both turns -> reply with sources, suggestions and entities.
"""

import logging
from typing import List, Optional

from ..errors import ProviderError
from ..metrics import chat_requests_total, fallback_responses_total, provider_errors_total
from ..models import ChatReplyData, ConversationTurn, Entity, ExtractedInfo
from . import fallback_responder
from .completion_client import GeminiCompletionClient
from .content_store import ContentStore
from .context_store import ConversationContextStore
from .info_extractor import extract
from .intent_classifier import classify
from .prompt_composer import compose
from .suggestions import suggest

logger = logging.getLogger(__name__)

DEFAULT_SESSION_ID = "default"
PROVIDER_SOURCES = ["Faculty Directory", "Course Catalog", "Infrastructure Guide", "Academic Calendar"]
PROVIDER_CONFIDENCE = 0.95
FALLBACK_CONFIDENCE = 0.6

_ENTITY_FIELDS = (
    ("semester", "semester"),
    ("faculty", "facultyName"),
    ("course", "courseName"),
    ("specialization", "specialization"),
)


def entities_from(extracted: ExtractedInfo) -> List[Entity]:
    return [
        Entity(type=kind, value=getattr(extracted, attr))
        for kind, attr in _ENTITY_FIELDS
        if getattr(extracted, attr)
    ]


class ChatService:
    def __init__(
        self,
        content: ContentStore,
        contexts: ConversationContextStore,
        completion_client: Optional[GeminiCompletionClient] = None,
        demo_mode: bool = False,
    ):
        self.content = content
        self.contexts = contexts
        self.completion_client = completion_client
        self.demo_mode = demo_mode or completion_client is None

    async def handle(
        self,
        message: str,
        session_id: Optional[str] = None,
        history: Optional[List[ConversationTurn]] = None,
    ) -> ChatReplyData:
        session_id = session_id or DEFAULT_SESSION_ID
        intent = classify(message)
        extracted = extract(message, self.content)
        chat_requests_total.labels(intent=intent.value).inc()
        logger.info(f"Chat [{session_id}] intent={intent.value} message={message[:80]!r}")

        turns = self.contexts.get(session_id) or list(history or [])

        text = None
        if not self.demo_mode:
            prompt = compose(message, intent, extracted, turns, self.content)
            try:
                text = await self.completion_client.complete(prompt)
            except ProviderError as e:
                provider_errors_total.inc()
                logger.warning(f"Completion provider failed, using keyword fallback: {e}")

        if text is not None:
            sources, confidence = list(PROVIDER_SOURCES), PROVIDER_CONFIDENCE
        else:
            answer = fallback_responder.respond(message, self.content)
            fallback_responses_total.labels(rule=answer.rule).inc()
            text, sources, confidence = answer.text, answer.sources, FALLBACK_CONFIDENCE

        self.contexts.append(session_id, ConversationTurn(role="user", content=message))
        self.contexts.append(session_id, ConversationTurn(role="assistant", content=text))

        return ChatReplyData(
            response=text,
            sources=sources,
            suggestions=suggest(intent),
            confidence=confidence,
            intent=intent,
            extractedInfo=extracted,
            entities=entities_from(extracted),
        )

    def conversation(self, session_id: str) -> Optional[List[ConversationTurn]]:
        if not self.contexts.has(session_id):
            return None
        return self.contexts.get(session_id)

    async def close(self):
        if self.completion_client is not None:
            await self.completion_client.close()
