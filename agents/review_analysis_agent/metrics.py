"""
Display metrics derived from a validated analysis result.
"""

import math

from agents.review_analysis_agent.models import AnalysisResult, AnalysisSummary


# Heuristic: six-month gap -> annual figure ("monthly compounding").
# No derivation is documented for 2.5; the displayed estimate depends on it as is.
ANNUAL_INCREMENT_MULTIPLIER = 2.5


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def annual_increment_estimate(result: AnalysisResult) -> int:
    """
    Estimated annual increment in percentage points.

    Gap between the last projected value (sixth point) and the first current
    value, scaled by ANNUAL_INCREMENT_MULTIPLIER. Needs at least six points,
    which the parser guarantees.
    """
    projection = result.growthProjection
    gap = projection[5].projected - projection[0].current
    return _round_half_up(gap * ANNUAL_INCREMENT_MULTIPLIER)


def average_monthly_uplift(result: AnalysisResult) -> float:
    """Mean of (projected - current) across all projection points."""
    projection = result.growthProjection
    uplift = sum(point.projected - point.current for point in projection)
    return round(uplift / len(projection), 2)


def summarize_result(result: AnalysisResult) -> AnalysisSummary:
    return AnalysisSummary(
        sentiment=result.sentiment,
        pain_point_count=len(result.painPoints),
        sales_blocker_count=len(result.salesBlockers),
        annual_increment_estimate=annual_increment_estimate(result),
        average_monthly_uplift=average_monthly_uplift(result),
    )
