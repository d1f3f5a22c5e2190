"""
Shared fixtures: a deterministic stand-in for the generation capability and
a well-formed model response.
"""

import asyncio
import copy
import json
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from agents.review_analysis_agent import AnalysisClient


WELL_FORMED_PAYLOAD = {
    "painPoints": [
        "Long and confusing checkout",
        "Slow shipping with no tracking updates",
        "Unresponsive customer support",
        "Mobile app crashes on discount codes",
        "Prices above competitors",
        "No subscription option for recurring orders",
        "Slow mobile website",
        "Poor search relevance",
    ],
    "sentiment": "Mixed",
    "salesBlockers": [
        "Checkout abandonment",
        "Delivery uncertainty",
        "Broken promo flow in the app",
    ],
    "marketingStrategy": "## Marketing\n- Lead with **quality** over price",
    "salesStrategy": "## Sales\n- Launch a subscribe-and-save tier",
    "annualIncrementPlan": "## Pillar 1: Market Expansion\n- Q1: one-page checkout",
    "growthProjection": [
        {"month": "Jan", "current": 5, "projected": 7},
        {"month": "Feb", "current": 5.5, "projected": 12},
        {"month": "Mar", "current": 6, "projected": 18},
        {"month": "Apr", "current": 6, "projected": 25},
        {"month": "May", "current": 6.5, "projected": 34},
        {"month": "Jun", "current": 7, "projected": 45},
    ],
}


class StubCapability:
    """Records every call and answers with a canned body or error."""

    def __init__(self, response=None, error=None, delay=0.0):
        self.response = response
        self.error = error
        self.delay = delay
        self.calls = []

    async def generate(self, prompt, schema):
        self.calls.append((prompt, schema))
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def payload():
    """A fresh copy of the well-formed response payload."""
    return copy.deepcopy(WELL_FORMED_PAYLOAD)


@pytest.fixture
def well_formed_body(payload):
    return json.dumps(payload)


@pytest.fixture
def make_client():
    """Factory returning (AnalysisClient, StubCapability)."""
    def _make(response=None, error=None, delay=0.0):
        capability = StubCapability(response=response, error=error, delay=delay)
        return AnalysisClient(capability), capability
    return _make
