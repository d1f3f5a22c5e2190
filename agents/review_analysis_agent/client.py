"""
Generation capability and the analysis client that calls it.

The pipeline only depends on ``GenerationCapability``: prompt and schema in,
raw JSON text out. ``ChatModelCapability`` is the production implementation
on top of LangChain chat models; tests swap in a deterministic stub.
"""

import logging
from typing import Any, Dict, Optional

from langchain_core.messages import HumanMessage, SystemMessage
from typing_extensions import Protocol

from config.settings import settings
from agents.review_analysis_agent.errors import GenerationFailure
from agents.review_analysis_agent.prompts import SYSTEM_PROMPT
from agents.review_analysis_agent.schema import RESPONSE_SCHEMA

logger = logging.getLogger(__name__)


class GenerationCapability(Protocol):
    async def generate(self, prompt: str, schema: Dict[str, Any]) -> Optional[str]:
        ...


def get_generation_llm(llm_provider: Optional[str] = None):
    """
    Get a chat model instance for review analysis.

    Args:
        llm_provider: Provider name (gemini, openai).
                      If None, uses ANALYSIS_PROVIDER from settings

    Returns:
        LangChain chat model

    Raises:
        GenerationFailure: If the provider is unknown or not configured
    """
    if llm_provider is None:
        llm_provider = settings.ANALYSIS_PROVIDER

    llm_provider = llm_provider.lower()

    if llm_provider == "gemini":
        if not settings.GEMINI_API_KEY:
            raise GenerationFailure("Gemini API key not configured")
        from langchain_google_genai import ChatGoogleGenerativeAI
        return ChatGoogleGenerativeAI(
            model=settings.GEMINI_MODEL,
            google_api_key=settings.GEMINI_API_KEY,
            temperature=settings.LLM_TEMPERATURE,
            max_output_tokens=settings.LLM_MAX_OUTPUT_TOKENS,
            timeout=settings.LLM_TIMEOUT,
            max_retries=0,
        )

    elif llm_provider == "openai":
        if not settings.OPENAI_API_KEY:
            raise GenerationFailure("OpenAI API key not configured")
        from langchain_openai import ChatOpenAI
        return ChatOpenAI(
            model=settings.OPENAI_MODEL,
            openai_api_key=settings.OPENAI_API_KEY,
            temperature=settings.LLM_TEMPERATURE,
            max_tokens=settings.LLM_MAX_OUTPUT_TOKENS,
            timeout=settings.LLM_TIMEOUT,
            max_retries=0,
        )

    raise GenerationFailure(f"Unknown LLM provider: {llm_provider}")


def _bind_response_schema(llm, llm_provider: str, schema: Dict[str, Any]):
    """Ask the provider for JSON constrained to ``schema``."""
    if llm_provider == "gemini":
        return llm.bind(response_mime_type="application/json", response_schema=schema)
    return llm.bind(
        response_format={
            "type": "json_schema",
            "json_schema": {"name": "review_analysis", "schema": schema},
        }
    )


def _message_text(content: Any) -> str:
    """Flatten LangChain message content (plain string or list of parts)."""
    if content is None:
        return ""
    if isinstance(content, str):
        return content
    parts = []
    for part in content:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict) and part.get("type") == "text":
            parts.append(part.get("text", ""))
    return "".join(parts)


class ChatModelCapability:
    """Schema-constrained generation backed by a LangChain chat model.

    The chat model is created lazily, so a missing API key shows up as a
    failed analysis instead of a failed startup.
    """

    def __init__(self, llm_provider: Optional[str] = None, llm=None):
        self.llm_provider = (llm_provider or settings.ANALYSIS_PROVIDER).lower()
        self._llm = llm

    def _get_llm(self):
        if self._llm is None:
            self._llm = get_generation_llm(self.llm_provider)
            logger.info(f"Initialized {self.llm_provider} chat model for review analysis")
        return self._llm

    async def generate(self, prompt: str, schema: Dict[str, Any]) -> str:
        llm = _bind_response_schema(self._get_llm(), self.llm_provider, schema)
        messages = [
            SystemMessage(content=SYSTEM_PROMPT),
            HumanMessage(content=prompt),
        ]
        response = await llm.ainvoke(messages)
        return _message_text(response.content)


class AnalysisClient:
    """Single schema-constrained call per analysis. No retries at this layer."""

    def __init__(self, capability: GenerationCapability):
        self._capability = capability

    async def invoke(self, prompt: str, schema: Dict[str, Any] = RESPONSE_SCHEMA) -> str:
        """
        Run one generation request.

        Returns:
            Raw response text ("" when the provider returned no body)

        Raises:
            GenerationFailure: On any failure raised by the capability
        """
        try:
            raw_text = await self._capability.generate(prompt, schema)
        except GenerationFailure:
            raise
        except Exception as e:
            raise GenerationFailure(f"{type(e).__name__}: {e}") from e

        return raw_text or ""


def create_default_client(llm_provider: Optional[str] = None) -> AnalysisClient:
    """Build the process-wide client from settings."""
    return AnalysisClient(ChatModelCapability(llm_provider))
