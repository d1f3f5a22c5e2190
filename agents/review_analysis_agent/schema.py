"""
Structured-output schema sent to the generation provider.

This is configuration for the provider, it is never used to validate
anything locally. Validation lives in ``parser.py``.
"""

from typing import Any, Dict, List


REQUIRED_FIELDS: List[str] = [
    "painPoints",
    "sentiment",
    "salesBlockers",
    "marketingStrategy",
    "salesStrategy",
    "annualIncrementPlan",
    "growthProjection",
]

PROJECTION_FIELDS: List[str] = ["month", "current", "projected"]

RESPONSE_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "painPoints": {"type": "array", "items": {"type": "string"}},
        "sentiment": {"type": "string"},
        "salesBlockers": {"type": "array", "items": {"type": "string"}},
        "marketingStrategy": {"type": "string"},
        "salesStrategy": {"type": "string"},
        "annualIncrementPlan": {
            "type": "string",
            "description": "Professional Strategic Sales Growth Plan with pillars and milestones",
        },
        "growthProjection": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "month": {"type": "string"},
                    "current": {"type": "number", "description": "Current growth rate %"},
                    "projected": {"type": "number", "description": "Projected growth rate % after strategy"},
                },
                "required": PROJECTION_FIELDS,
            },
        },
    },
    "required": REQUIRED_FIELDS,
}
