"""
Utility functions and helpers for the review analyzer.

Small shared helpers used by the orchestrator and the HTTP layer.
"""

import uuid


def generate_job_id() -> str:
    """
    Generate a unique job identifier for one analysis submission.

    The id shows up in every log line of the run and in the state payload,
    so a failed analysis can be traced back through the logs.

    Returns:
        str: Unique job ID as a string in UUID4 format

    Example:
        >>> job_id = generate_job_id()
        >>> len(job_id)
        36
    """
    return str(uuid.uuid4())


def truncate_text(text: str, max_length: int = 100, suffix: str = "...") -> str:
    """
    Truncate text to a maximum length with optional suffix.

    Used to keep pasted reviews from flooding the logs.

    Args:
        text: Text to truncate
        max_length: Maximum length of the output (default: 100)
        suffix: Suffix to append when truncating (default: "...")

    Returns:
        str: Truncated text with suffix if needed

    Example:
        >>> truncate_text("The checkout process is too long", max_length=15)
        'The checkout...'
        >>> truncate_text("Short", max_length=10)
        'Short'
    """
    if len(text) <= max_length:
        return text
    return text[:max_length - len(suffix)] + suffix
