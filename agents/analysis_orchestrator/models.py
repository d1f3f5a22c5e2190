"""
Pipeline state owned by the analysis orchestrator.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict

from agents.review_analysis_agent.models import AnalysisResult, AnalysisSummary


ANALYSIS_FAILED_MESSAGE = "Failed to analyze reviews. Please try again."


class PipelineStatus(str, Enum):
    IDLE = "idle"
    ANALYZING = "analyzing"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class PipelineState(BaseModel):
    """Immutable snapshot of the orchestrator state.

    ``message`` is the only user-facing failure text. ``failure_kind`` and
    ``failure_reason`` are diagnostics for logs and tests.
    """

    model_config = ConfigDict(frozen=True)

    status: PipelineStatus = PipelineStatus.IDLE
    job_id: Optional[str] = None
    result: Optional[AnalysisResult] = None
    summary: Optional[AnalysisSummary] = None
    message: Optional[str] = None
    failure_kind: Optional[str] = None
    failure_reason: Optional[str] = None

    @classmethod
    def idle(cls) -> "PipelineState":
        return cls()

    @classmethod
    def analyzing(cls, job_id: str) -> "PipelineState":
        return cls(status=PipelineStatus.ANALYZING, job_id=job_id)

    @classmethod
    def succeeded(cls, job_id: str, result: AnalysisResult, summary: AnalysisSummary) -> "PipelineState":
        return cls(status=PipelineStatus.SUCCEEDED, job_id=job_id, result=result, summary=summary)

    @classmethod
    def failed(cls, job_id: str, failure_kind: str, failure_reason: str) -> "PipelineState":
        return cls(
            status=PipelineStatus.FAILED,
            job_id=job_id,
            message=ANALYSIS_FAILED_MESSAGE,
            failure_kind=failure_kind,
            failure_reason=failure_reason,
        )

    @property
    def is_analyzing(self) -> bool:
        return self.status == PipelineStatus.ANALYZING
