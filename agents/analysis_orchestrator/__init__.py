"""
Analysis Orchestrator

Single-flight state machine that runs the review analysis workflow and
publishes its state to subscribers.
"""

from agents.analysis_orchestrator.models import (
    ANALYSIS_FAILED_MESSAGE,
    PipelineState,
    PipelineStatus,
)
from agents.analysis_orchestrator.orchestrator import AnalysisOrchestrator


__all__ = [
    "ANALYSIS_FAILED_MESSAGE",
    "AnalysisOrchestrator",
    "PipelineState",
    "PipelineStatus",
]
