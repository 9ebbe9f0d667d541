"""Pydantic models for the multi-image endpoints."""

from pydantic import BaseModel, Field

from img_processing.operations.base import Number, RequestModel


class Watermark(BaseModel):
    """An image placed on top of another one."""

    id: str = Field(..., description="Identifier of the image used as watermark")
    left: Number = Field(..., description="Offset from the left edge, in pixels")
    top: Number = Field(..., description="Offset from the top edge, in pixels")


class WatermarkRequest(RequestModel):
    watermarks: list[Watermark] = Field(..., description="Watermarks to apply, in order")
    name: str | None = Field(None, description="Name of the new image, source name by default")
