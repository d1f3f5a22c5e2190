"""
Error types for the review analysis pipeline.
"""

from typing import Optional


class AnalysisPipelineError(Exception):
    """Base class for failures inside a single analysis run."""

    kind: str = "pipeline_error"

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class GenerationFailure(AnalysisPipelineError):
    """The generation capability could not be reached or declined the request.

    Covers transport, auth, quota and configuration problems. The original
    exception (if any) is kept as ``__cause__``.
    """

    kind = "generation_failure"


class MalformedResponse(AnalysisPipelineError):
    """The capability answered, but the body does not match the result contract."""

    NOT_PARSEABLE = "not_parseable"
    MISSING_FIELD = "missing_field"
    INVALID_FIELD = "invalid_field"
    INSUFFICIENT_PROJECTION_POINTS = "insufficient_projection_points"

    def __init__(self, reason: str, kind: str, field: Optional[str] = None):
        super().__init__(reason)
        self.kind = kind
        self.field = field

    @classmethod
    def not_parseable(cls) -> "MalformedResponse":
        return cls("not parseable", cls.NOT_PARSEABLE)

    @classmethod
    def missing_field(cls, name: str) -> "MalformedResponse":
        return cls(f"missing field {name}", cls.MISSING_FIELD, field=name)

    @classmethod
    def invalid_field(cls, name: str) -> "MalformedResponse":
        return cls(f"invalid field {name}", cls.INVALID_FIELD, field=name)

    @classmethod
    def insufficient_projection_points(cls) -> "MalformedResponse":
        return cls(
            "insufficient projection points",
            cls.INSUFFICIENT_PROJECTION_POINTS,
            field="growthProjection",
        )
