# Utilities package

from .helpers import (
    generate_job_id,
    truncate_text
)

__all__ = [
    "generate_job_id",
    "truncate_text"
]
