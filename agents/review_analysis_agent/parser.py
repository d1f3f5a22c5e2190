"""
Parsing and validation of the raw model response.

The generator is not trusted: every field is checked for presence and type
before the typed result is built. Extra fields are dropped.
"""

import json
import logging
import math
from typing import Any, Dict, List, Optional

from agents.review_analysis_agent.errors import MalformedResponse
from agents.review_analysis_agent.models import AnalysisResult, GrowthProjectionPoint
from agents.review_analysis_agent.schema import REQUIRED_FIELDS

logger = logging.getLogger(__name__)

# Minimum number of projection points needed by the derived metrics
MIN_PROJECTION_POINTS = 6

_STRING_FIELDS = {"sentiment", "marketingStrategy", "salesStrategy", "annualIncrementPlan"}
_STRING_LIST_FIELDS = {"painPoints", "salesBlockers"}


def _is_number(value: Any) -> bool:
    # bool is an int subclass, JSON true/false are not growth rates
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # int too large for a float
        return False


def _parse_projection_point(entry: Any) -> Optional[GrowthProjectionPoint]:
    if not isinstance(entry, dict):
        return None
    month = entry.get("month")
    current = entry.get("current")
    projected = entry.get("projected")
    if not isinstance(month, str) or not _is_number(current) or not _is_number(projected):
        return None
    return GrowthProjectionPoint(month=month, current=current, projected=projected)


def _parse_projection(value: Any) -> List[GrowthProjectionPoint]:
    if not isinstance(value, list) or len(value) < MIN_PROJECTION_POINTS:
        raise MalformedResponse.insufficient_projection_points()

    points = []
    for entry in value:
        point = _parse_projection_point(entry)
        if point is None:
            raise MalformedResponse.insufficient_projection_points()
        points.append(point)
    return points


def _load_json_object(raw_text: Optional[str]) -> Dict[str, Any]:
    text = (raw_text or "").strip() or "{}"
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, ValueError) as e:
        logger.debug(f"Response is not valid JSON: {e}")
        raise MalformedResponse.not_parseable() from e

    if not isinstance(data, dict):
        raise MalformedResponse.not_parseable()
    return data


def parse_analysis_response(raw_text: Optional[str]) -> AnalysisResult:
    """
    Parse raw model output into a validated AnalysisResult.

    Args:
        raw_text: Response body; None or blank is treated as an empty object

    Returns:
        Fully populated AnalysisResult

    Raises:
        MalformedResponse: On the first violation found, in field order
    """
    data = _load_json_object(raw_text)

    fields: Dict[str, Any] = {}
    for name in REQUIRED_FIELDS:
        value = data.get(name)
        if value is None:
            raise MalformedResponse.missing_field(name)

        if name in _STRING_FIELDS:
            if not isinstance(value, str):
                raise MalformedResponse.invalid_field(name)
            fields[name] = value
        elif name in _STRING_LIST_FIELDS:
            if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
                raise MalformedResponse.invalid_field(name)
            fields[name] = list(value)
        else:
            fields[name] = _parse_projection(value)

    return AnalysisResult(**fields)
