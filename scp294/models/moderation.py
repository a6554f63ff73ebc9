"""Content safety screening models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ContentSafetyResult(BaseModel):
    """Content moderation screening result.

    ``screened`` is false when the classifier was skipped, failed or timed
    out; such results are always ``is_safe`` because the gate is advisory.
    """

    is_safe: bool
    screened: bool = True
    categories: list[str] = Field(default_factory=list)
    explanation: str = ""
