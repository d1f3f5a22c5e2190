"""
Review Analysis Agent

Turns pasted customer reviews into a validated sales growth strategy report.
"""

from agents.review_analysis_agent.client import (
    AnalysisClient,
    ChatModelCapability,
    GenerationCapability,
    create_default_client,
)
from agents.review_analysis_agent.errors import (
    AnalysisPipelineError,
    GenerationFailure,
    MalformedResponse,
)
from agents.review_analysis_agent.graph import run_review_analysis
from agents.review_analysis_agent.metrics import annual_increment_estimate, summarize_result
from agents.review_analysis_agent.models import (
    AUTO_DETECT,
    SUPPORTED_LANGUAGES,
    AnalysisRequest,
    AnalysisResult,
    AnalysisSummary,
)
from agents.review_analysis_agent.parser import parse_analysis_response
from agents.review_analysis_agent.prompts import build_prompt
from agents.review_analysis_agent.schema import RESPONSE_SCHEMA
from agents.review_analysis_agent.strength import ReviewStrength, StrengthLabel, score_review_strength


__all__ = [
    "AUTO_DETECT",
    "SUPPORTED_LANGUAGES",
    "RESPONSE_SCHEMA",
    "AnalysisClient",
    "AnalysisPipelineError",
    "AnalysisRequest",
    "AnalysisResult",
    "AnalysisSummary",
    "ChatModelCapability",
    "GenerationCapability",
    "GenerationFailure",
    "MalformedResponse",
    "ReviewStrength",
    "StrengthLabel",
    "annual_increment_estimate",
    "build_prompt",
    "create_default_client",
    "parse_analysis_response",
    "run_review_analysis",
    "score_review_strength",
    "summarize_result",
]
