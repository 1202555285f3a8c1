# Completion Client - Gemini generateContent over REST
# One request per call: no streaming, no retry. Every failure surfaces as ProviderError.

import logging
import time
from typing import Any, Dict, Optional, Sequence, Union

import httpx

from ..errors import ProviderError
from ..models import ConversationTurn

logger = logging.getLogger(__name__)

PromptOrMessages = Union[str, Sequence[ConversationTurn], Sequence[Dict[str, str]]]

# Gemini names the assistant side "model"
_ROLE_MAP = {"user": "user", "assistant": "model", "model": "model"}


class GeminiCompletionClient:
    """
    Thin async client for the Gemini `models/{model}:generateContent` endpoint.

    Accepts either a single prompt string or a list of chat turns. A persistent
    httpx.AsyncClient is reused across calls; tests pass an httpx.MockTransport.
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-1.5-flash",
        base_url: str = "https://generativelanguage.googleapis.com/v1beta",
        timeout_s: float = 30.0,
        temperature: float = 0.7,
        max_output_tokens: int = 1024,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout_s = timeout_s
        self.temperature = temperature
        self.max_output_tokens = max_output_tokens
        self.client = httpx.AsyncClient(timeout=timeout_s, transport=transport)

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    def build_payload(self, prompt_or_messages: PromptOrMessages, system_instruction: Optional[str] = None) -> Dict[str, Any]:
        """Translate a prompt or a turn list into a generateContent body"""
        if isinstance(prompt_or_messages, str):
            contents = [{"role": "user", "parts": [{"text": prompt_or_messages}]}]
        else:
            contents = []
            for turn in prompt_or_messages:
                role = turn.role if isinstance(turn, ConversationTurn) else turn["role"]
                text = turn.content if isinstance(turn, ConversationTurn) else turn["content"]
                contents.append({"role": _ROLE_MAP.get(role, "user"), "parts": [{"text": text}]})

        payload: Dict[str, Any] = {
            "contents": contents,
            "generationConfig": {
                "temperature": self.temperature,
                "maxOutputTokens": self.max_output_tokens,
            },
        }
        if system_instruction:
            payload["systemInstruction"] = {"parts": [{"text": system_instruction}]}
        return payload

    @staticmethod
    def extract_text(body: Any) -> str:
        if not isinstance(body, dict):
            raise ProviderError(f"Malformed provider response: expected an object, got {type(body).__name__}")
        candidates = body.get("candidates") or []
        if not isinstance(candidates, list):
            raise ProviderError("Malformed provider response: candidates is not a list")
        if not candidates:
            feedback = body.get("promptFeedback")
            block_reason = feedback.get("blockReason") if isinstance(feedback, dict) else None
            raise ProviderError(f"No candidates in provider response (blockReason={block_reason})")

        candidate = candidates[0]
        content = candidate.get("content") if isinstance(candidate, dict) else None
        parts = content.get("parts") if isinstance(content, dict) else None
        if not isinstance(parts, list) or not all(isinstance(part, dict) for part in parts):
            raise ProviderError("Malformed provider response: candidate has no content parts")

        text = "".join(str(part.get("text") or "") for part in parts)
        if not text.strip():
            raise ProviderError("Provider returned an empty completion")
        return text

    async def complete(self, prompt_or_messages: PromptOrMessages, system_instruction: Optional[str] = None) -> str:
        if not self.api_key:
            raise ProviderError("No API key configured for the completion provider")

        payload = self.build_payload(prompt_or_messages, system_instruction)
        t0 = time.perf_counter()
        try:
            response = await self.client.post(
                self.endpoint,
                params={"key": self.api_key},
                headers={"Content-Type": "application/json"},
                json=payload,
            )
        except httpx.HTTPError as e:
            raise ProviderError(f"Completion request failed: {e}") from e

        latency_ms = (time.perf_counter() - t0) * 1000
        if response.status_code != 200:
            logger.warning(f"Provider returned HTTP {response.status_code} in {latency_ms:.1f}ms")
            raise ProviderError(
                f"Provider returned HTTP {response.status_code}", status_code=response.status_code
            )

        try:
            body = response.json()
        except ValueError as e:
            raise ProviderError("Provider returned a non-JSON body") from e

        text = self.extract_text(body)
        logger.info(f"Completion from {self.model} in {latency_ms:.1f}ms ({len(text)} chars)")
        return text

    def health_info(self) -> Dict[str, Any]:
        return {"provider": "gemini", "model": self.model, "configured": bool(self.api_key)}

    async def close(self):
        """Release the pooled HTTP connections"""
        await self.client.aclose()
