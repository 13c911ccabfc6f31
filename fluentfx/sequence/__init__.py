from .effects import for_each, modify
from .pipeline import pipeline_with, pipeline_with_token
from .select import newer_than_by, older_than_by, pick_random, string_join

__all__ = (
    # Effects
    "for_each",
    "modify",
    # Pipeline
    "pipeline_with",
    "pipeline_with_token",
    # Selection
    "newer_than_by",
    "older_than_by",
    "pick_random",
    "string_join",
)
