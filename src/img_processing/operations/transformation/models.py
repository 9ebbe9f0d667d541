"""Pydantic models for the geometric transformation endpoints."""

from typing import Literal

from pydantic import Field

from img_processing.operations.base import Number, RequestModel

FitMode = Literal["fill", "contain", "cover"]
MirrorMode = Literal["horizontal", "vertical", "both"]
Position = Literal[
    "center",
    "top",
    "right",
    "bottom",
    "left",
    "top-left",
    "top-right",
    "bottom-left",
    "bottom-right",
]
RotationUnit = Literal["degrees", "radians"]


class ConvertRequest(RequestModel):
    format: str = Field(..., description="Target format: jpeg, png or webp")
    quality: Number | None = Field(None, description="Output quality, jpeg only")
    name: str | None = Field(None, description="Name of the new image, source name by default")


class CropRequest(RequestModel):
    """Crop area defined by its top-left `(x1, y1)` and bottom-right `(x2, y2)` corners."""

    x1: Number = Field(..., description="X of the top-left corner")
    y1: Number = Field(..., description="Y of the top-left corner")
    x2: Number = Field(..., description="X of the bottom-right corner")
    y2: Number = Field(..., description="Y of the bottom-right corner")
    name: str | None = Field(None, description="Name of the new image, source name by default")


class MirrorRequest(RequestModel):
    mode: str = Field(..., description="horizontal, vertical or both")
    name: str | None = Field(None, description="Name of the new image, source name by default")


class ResizeRequest(RequestModel):
    width: Number = Field(..., description="Target width in pixels")
    height: Number = Field(..., description="Target height in pixels")
    fit: str | None = Field(None, description="fill (default), contain or cover")
    letterbox_color: str | None = Field(
        None,
        description="Letterbox color for the contain mode: name, hex code or transparent",
    )
    position: str | None = Field(None, description="Gravity for the cover and contain modes")
    name: str | None = Field(None, description="Name of the new image, source name by default")


class RotateRequest(RequestModel):
    angle: Number = Field(..., description="Rotation angle")
    unit: str | None = Field(None, description="degrees (default) or radians")
    background_color: str | None = Field(
        None,
        description="Fill color of the uncovered areas, #000000 by default",
    )
    name: str | None = Field(None, description="Name of the new image, source name by default")
