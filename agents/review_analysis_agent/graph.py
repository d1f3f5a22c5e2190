"""
LangGraph workflow definition for review analysis.

    START → prepare_prompt → generate_analysis → parse_response → derive_metrics → finalize → END

Any failed step jumps straight to finalize.
"""

from typing import Optional

from langgraph.graph import StateGraph, END

from agents.review_analysis_agent.client import AnalysisClient
from agents.review_analysis_agent.models import AnalysisRequest, ReviewAnalysisState
from agents.review_analysis_agent.nodes import (
    prepare_prompt,
    generate_analysis,
    parse_response,
    derive_metrics,
    finalize,
    route_after_step,
)


# Singleton graph instance
_graph = None


def create_review_analysis_graph():
    """Create the LangGraph workflow for review analysis."""
    from langgraph.graph import START

    workflow = StateGraph(ReviewAnalysisState)

    # Add nodes
    workflow.add_node("prepare_prompt", prepare_prompt)
    workflow.add_node("generate_analysis", generate_analysis)
    workflow.add_node("parse_response", parse_response)
    workflow.add_node("derive_metrics", derive_metrics)
    workflow.add_node("finalize", finalize)

    # Define edges
    workflow.add_edge(START, "prepare_prompt")
    workflow.add_edge("prepare_prompt", "generate_analysis")

    workflow.add_conditional_edges(
        "generate_analysis",
        route_after_step,
        {
            "continue": "parse_response",
            "finalize": "finalize"
        }
    )
    workflow.add_conditional_edges(
        "parse_response",
        route_after_step,
        {
            "continue": "derive_metrics",
            "finalize": "finalize"
        }
    )

    workflow.add_edge("derive_metrics", "finalize")
    workflow.add_edge("finalize", END)

    return workflow.compile()


def get_review_analysis_graph():
    """Get or create the review analysis graph."""
    global _graph
    if _graph is None:
        _graph = create_review_analysis_graph()
    return _graph


async def run_review_analysis(
    request: AnalysisRequest,
    client: AnalysisClient,
    job_id: Optional[str] = None
) -> ReviewAnalysisState:
    """
    Run one review analysis end to end.

    Args:
        request: Validated analysis request
        client: Analysis client wrapping the generation capability
        job_id: Identifier used in log lines

    Returns:
        Final workflow state. On success ``result`` and ``summary`` are set;
        on failure ``error_kind`` and ``error_reason`` are.
    """
    graph = get_review_analysis_graph()

    initial_state: ReviewAnalysisState = {
        "job_id": job_id or "",
        "request": request,
        "result": None,
        "summary": None,
        "error_kind": None,
        "error_reason": None,
        "completed": False
    }

    return await graph.ainvoke(
        initial_state,
        config={"configurable": {"analysis_client": client}}
    )
