"""Pydantic models for the edition endpoints."""

from pydantic import Field

from img_processing.operations.base import Number, RequestModel


class ModulateRequest(RequestModel):
    """Brightness, saturation, hue and lightness adjustments.

    `brightness` multiplies the color values while `lightness` adds a
    constant to them.
    """

    brightness: Number | None = Field(None, description="Brightness multiplier")
    saturation: Number | None = Field(None, description="Saturation multiplier")
    hue: Number | None = Field(None, description="Hue rotation in degrees")
    lightness: Number | None = Field(None, description="Lightness to add")
    name: str | None = Field(None, description="Name of the new image, source name by default")


class BlurRequest(RequestModel):
    sigma: Number | None = Field(None, description="Standard deviation of the Gaussian blur")
    name: str | None = Field(None, description="Name of the new image, source name by default")


class RemoveBackgroundRequest(RequestModel):
    name: str | None = Field(None, description="Name of the new image, source name by default")
