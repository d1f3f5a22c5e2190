"""
Node functions for the review analysis LangGraph workflow.

Expected failures (generation, malformed output) are recorded in the state
instead of raised, so the graph always reaches ``finalize``.
"""

import logging

from langchain_core.runnables import RunnableConfig

from agents.review_analysis_agent.errors import GenerationFailure, MalformedResponse
from agents.review_analysis_agent.metrics import summarize_result
from agents.review_analysis_agent.models import ReviewAnalysisState
from agents.review_analysis_agent.parser import parse_analysis_response
from agents.review_analysis_agent.prompts import build_prompt
from agents.review_analysis_agent.schema import RESPONSE_SCHEMA

logger = logging.getLogger(__name__)


def prepare_prompt(state: ReviewAnalysisState) -> ReviewAnalysisState:
    """Node: Build the model instruction from the request."""
    request = state["request"]
    prompt = build_prompt(request.raw_text, request.source_language)

    logger.info(
        f"📝 [{state.get('job_id')}] Prompt ready "
        f"({len(request.raw_text)} chars of reviews, language: {request.source_language})"
    )
    return {"prompt": prompt}


async def generate_analysis(state: ReviewAnalysisState, config: RunnableConfig) -> ReviewAnalysisState:
    """Node: Call the generation capability with the prompt and response schema."""
    job_id = state.get("job_id")
    client = config["configurable"]["analysis_client"]

    logger.info(f"🤖 [{job_id}] Requesting schema-constrained analysis...")
    try:
        raw_response = await client.invoke(state["prompt"], RESPONSE_SCHEMA)
    except GenerationFailure as e:
        logger.error(f"❌ [{job_id}] Generation failed: {e.reason}")
        return {"error_kind": e.kind, "error_reason": e.reason}

    logger.info(f"✓ [{job_id}] Received {len(raw_response)} chars from model")
    return {"raw_response": raw_response}


def parse_response(state: ReviewAnalysisState) -> ReviewAnalysisState:
    """Node: Validate the raw response into a typed result."""
    job_id = state.get("job_id")
    try:
        result = parse_analysis_response(state.get("raw_response"))
    except MalformedResponse as e:
        logger.error(f"❌ [{job_id}] Malformed response: {e.reason}")
        return {"error_kind": e.kind, "error_reason": e.reason}

    logger.info(
        f"✓ [{job_id}] Parsed {len(result.painPoints)} pain points, "
        f"{len(result.growthProjection)} projection points"
    )
    return {"result": result}


def derive_metrics(state: ReviewAnalysisState) -> ReviewAnalysisState:
    """Node: Compute display metrics from the validated result."""
    summary = summarize_result(state["result"])
    logger.info(f"📈 [{state.get('job_id')}] Estimated annual increment: +{summary.annual_increment_estimate}%")
    return {"summary": summary}


def finalize(state: ReviewAnalysisState) -> ReviewAnalysisState:
    """Node: Mark the run as done."""
    if state.get("error_kind"):
        logger.warning(f"⚠️  [{state.get('job_id')}] Analysis finished with {state['error_kind']}")
    else:
        logger.info(f"✅ [{state.get('job_id')}] Analysis complete")
    return {"completed": True}


def route_after_step(state: ReviewAnalysisState) -> str:
    """Conditional edge: skip straight to finalize once a step has failed."""
    if state.get("error_kind"):
        return "finalize"
    return "continue"
