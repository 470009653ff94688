"""Rule-based validation pipeline producing Outcomes."""

from .validation import AsyncRule, SyncRule, ValidationPipeline

__all__ = ["ValidationPipeline", "SyncRule", "AsyncRule"]
