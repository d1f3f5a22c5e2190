"""
Pydantic models for the review analysis request and its structured LLM output.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing_extensions import TypedDict


AUTO_DETECT = "Auto-detect"

SUPPORTED_LANGUAGES = [
    AUTO_DETECT, "English", "Spanish", "French", "German", "Chinese",
    "Japanese", "Hindi", "Arabic", "Portuguese", "Russian", "Bengali",
    "Indonesian", "Urdu", "Telugu", "Marathi", "Tamil", "Turkish",
]

_LANGUAGE_LOOKUP = {language.lower(): language for language in SUPPORTED_LANGUAGES}


class AnalysisRequest(BaseModel):
    """A single submission: the pasted reviews plus the declared input language."""

    model_config = ConfigDict(frozen=True)

    raw_text: str = Field(description="Customer reviews exactly as pasted by the user")
    source_language: str = Field(default=AUTO_DETECT, description="Declared language of the reviews")

    @field_validator("raw_text")
    @classmethod
    def _require_text(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Review text is empty")
        return value

    @field_validator("source_language", mode="before")
    @classmethod
    def _known_language(cls, value: Optional[str]) -> str:
        if value is None or not str(value).strip():
            return AUTO_DETECT
        language = _LANGUAGE_LOOKUP.get(str(value).strip().lower())
        if language is None:
            raise ValueError(f"Unsupported language: {value}")
        return language


class GrowthProjectionPoint(BaseModel):
    month: str = Field(description="Month label")
    current: float = Field(description="Current growth rate %")
    projected: float = Field(description="Projected growth rate % after strategy")


class AnalysisResult(BaseModel):
    """Validated strategy report returned by the model.

    Field names follow the JSON the model is asked to produce.
    """

    model_config = ConfigDict(frozen=True)

    painPoints: List[str] = Field(description="Customer-reported problems, in presentation order")
    sentiment: str = Field(description="Short overall sentiment label")
    salesBlockers: List[str] = Field(description="Issues that stop customers from buying")
    marketingStrategy: str = Field(description="Marketing remedies (Markdown)")
    salesStrategy: str = Field(description="Sales remedies (Markdown)")
    annualIncrementPlan: str = Field(description="Strategic Sales Growth Plan with pillars and milestones (Markdown)")
    growthProjection: List[GrowthProjectionPoint] = Field(description="Monthly current vs projected growth rate")


class AnalysisSummary(BaseModel):
    """Display metrics derived from a validated result."""

    sentiment: str
    pain_point_count: int
    sales_blocker_count: int
    annual_increment_estimate: int
    average_monthly_uplift: float


class ReviewAnalysisState(TypedDict, total=False):
    """State for the review analysis graph."""
    # Input
    job_id: str
    request: AnalysisRequest

    # Processing
    prompt: str
    raw_response: str

    # Output
    result: Optional[AnalysisResult]
    summary: Optional[AnalysisSummary]

    # Metadata
    error_kind: Optional[str]
    error_reason: Optional[str]
    completed: bool
