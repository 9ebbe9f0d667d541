"""Pydantic models for the analysis endpoints."""

from pydantic import Field

from img_processing.operations.base import RequestModel


class VisualizeRequest(RequestModel):
    prompt: str = Field(..., description="Question asked about the image")
    model: str | None = Field(None, description="Vision model used to answer")
