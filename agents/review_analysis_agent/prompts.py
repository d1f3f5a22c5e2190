"""
Prompt construction for review analysis.
"""

from typing import Optional

from agents.review_analysis_agent.models import AUTO_DETECT


SYSTEM_PROMPT = (
    "You are a sales growth strategist. You read raw customer reviews and turn them "
    "into concrete, data-driven sales and marketing strategy. Respond ONLY with JSON "
    "matching the requested schema."
)


def build_prompt(raw_text: str, source_language: Optional[str] = None) -> str:
    """Compose the analysis instruction for one batch of reviews.

    The reviews are embedded verbatim. An empty language falls back to
    "Auto-detect" so the model knows it has to work the language out itself.
    """
    language = (source_language or "").strip() or AUTO_DETECT

    return f"""Analyze the following customer reviews (Input Language: {language}) and provide a comprehensive sales and marketing strategy specifically designed to maximize the company's Annual Sale Growth Rate.

Reviews:
{raw_text}

Focus on:
1. Identifying core customer problems (pain points) that are currently capping growth.
2. Identifying specific "Growth Levers" - areas where improvements will directly impact the Annual Sale Growth Rate.
3. Providing actionable marketing and sales solutions to overcome sales blockers.
4. Creating a professional "Strategic Sales Growth Plan" structured with pillars like Market Expansion, Sales Enablement, and Customer Lifetime Value (CLV) optimization, including specific quarterly milestones.
5. Providing a 6-month data projection (current vs projected revenue growth in percentage) showing the acceleration of the growth rate.

Note: If the reviews are in a language other than English, translate the core insights internally and write the strategy in English."""
