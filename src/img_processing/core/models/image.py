"""Image handle model.

An `ImageObject` is the client-side view of one image stored by the
IMG Processing API. It is decoded from API responses and bound to the client
that received it, so further operations can be chained without repeating the
image identifier:

    image = client.create_image_from_url(url=..., name="cover")
    thumbnail = image.resize(width=300, height=300).convert(format="webp")
"""

from typing import TYPE_CHECKING, Any, Generic, Literal, TypeVar

from pydantic import BaseModel, Field, PrivateAttr, StrictStr, ValidationInfo, model_validator

from img_processing.core.models.analysis import ClassificationResult, VisualizationResult
from img_processing.core.models.errors import ConfigurationError
from img_processing.core.utils.constants import IMAGE_ID_PATTERN, SUPPORTED_FORMATS

if TYPE_CHECKING:
    from img_processing.client import ImgProcessingClient
    from img_processing.operations.multi_image.models import Watermark
    from img_processing.operations.transformation.models import (
        FitMode,
        MirrorMode,
        Position,
        RotationUnit,
    )

SupportedFormat = Literal["jpeg", "png", "webp"]

FormatT = TypeVar("FormatT", bound=SupportedFormat)
TargetFormatT = TypeVar("TargetFormatT", bound=SupportedFormat)


class ImageObject(BaseModel, Generic[FormatT]):
    """Image returned by every image-producing endpoint.

    Every attribute except `url` is frozen. `url` is only written by
    `publish()` and `unpublish()`.
    """

    id: StrictStr = Field(
        ...,
        frozen=True,
        pattern=IMAGE_ID_PATTERN,
        description="Unique image identifier",
    )
    name: StrictStr = Field(
        ...,
        frozen=True,
        description="Image name, shared by every image derived from the same source",
    )
    url: StrictStr | None = Field(None, description="Public URL, None until published")
    width: int = Field(..., frozen=True, gt=0, description="Width in pixels")
    height: int = Field(..., frozen=True, gt=0, description="Height in pixels")
    format: FormatT = Field(..., frozen=True, description="Image format")
    size: int = Field(..., frozen=True, ge=0, description="Estimated size in bytes")
    created_at: StrictStr = Field(
        ...,
        frozen=True,
        description="ISO-8601 creation timestamp",
    )

    _client: "ImgProcessingClient | None" = PrivateAttr(default=None)

    @model_validator(mode="after")
    def bind_client(self, info: ValidationInfo) -> "ImageObject[FormatT]":
        """Attach the client passed through the validation context."""
        if info.context and info.context.get("client") is not None:
            self._client = info.context["client"]
        return self

    def _bound_client(self) -> "ImgProcessingClient":
        if self._client is None:
            raise ConfigurationError(
                message="Image is not bound to a client",
                details={"image_id": self.id},
            )
        return self._client

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------

    def refresh(self) -> "ImageObject[FormatT]":
        """Fetch the current server state of this image as a new handle."""
        return self._bound_client().get_image(image_id=self.id)

    def download(self) -> bytes:
        """Download the image content."""
        return self._bound_client().download(image_id=self.id)

    def publish(self) -> "ImageObject[FormatT]":
        """Make the image public and update `url` in place."""
        published = self._bound_client().publish(image_id=self.id)
        self.url = published.url
        return self

    def unpublish(self) -> "ImageObject[FormatT]":
        """Make the image private again; `url` goes back to None."""
        unpublished = self._bound_client().unpublish(image_id=self.id)
        self.url = unpublished.url
        return self

    def delete(self) -> None:
        """Delete the image on the server. The local handle stays usable as data."""
        self._bound_client().delete_image(image_id=self.id)

    # ------------------------------------------------------------------
    # Analysis
    # ------------------------------------------------------------------

    def classify(self) -> ClassificationResult:
        return self._bound_client().classify(image_id=self.id)

    def visualize(self, *, prompt: str, model: str | None = None) -> VisualizationResult:
        return self._bound_client().visualize(image_id=self.id, prompt=prompt, model=model)

    # ------------------------------------------------------------------
    # Edition
    # ------------------------------------------------------------------

    def modulate(
        self,
        *,
        brightness: float | None = None,
        saturation: float | None = None,
        hue: float | None = None,
        lightness: float | None = None,
        name: str | None = None,
    ) -> "ImageObject[FormatT]":
        """Adjust the brightness, saturation, hue and lightness of the image."""
        return self._bound_client().modulate(
            image_id=self.id,
            brightness=brightness,
            saturation=saturation,
            hue=hue,
            lightness=lightness,
            name=name,
        )

    def blur(self, *, sigma: float | None = None, name: str | None = None) -> "ImageObject[FormatT]":
        return self._bound_client().blur(image_id=self.id, sigma=sigma, name=name)

    def remove_background(self, *, name: str | None = None) -> 'ImageObject[Literal["png"]]':
        """Remove the background. The result is always a PNG to keep transparency."""
        return self._bound_client().remove_background(image_id=self.id, name=name)

    # ------------------------------------------------------------------
    # Multi-image
    # ------------------------------------------------------------------

    def watermark(
        self,
        *,
        watermarks: "list[Watermark] | list[dict[str, Any]]",
        name: str | None = None,
    ) -> "ImageObject[FormatT]":
        return self._bound_client().watermark(
            image_id=self.id,
            watermarks=watermarks,
            name=name,
        )

    # ------------------------------------------------------------------
    # Transformation
    # ------------------------------------------------------------------

    def convert(
        self,
        *,
        format: TargetFormatT,
        quality: int | None = None,
        name: str | None = None,
    ) -> "ImageObject[TargetFormatT]":
        """Convert the image to `jpeg`, `png` or `webp`.

        `quality` only applies when the target format is `jpeg`.
        """
        return self._bound_client().convert(
            image_id=self.id,
            format=format,
            quality=quality,
            name=name,
        )

    def crop(
        self,
        *,
        x1: int,
        y1: int,
        x2: int,
        y2: int,
        name: str | None = None,
    ) -> "ImageObject[FormatT]":
        """Crop the area between the top-left `(x1, y1)` and bottom-right `(x2, y2)` corners."""
        return self._bound_client().crop(
            image_id=self.id,
            x1=x1,
            y1=y1,
            x2=x2,
            y2=y2,
            name=name,
        )

    def mirror(self, *, mode: "MirrorMode", name: str | None = None) -> "ImageObject[FormatT]":
        return self._bound_client().mirror(image_id=self.id, mode=mode, name=name)

    def resize(
        self,
        *,
        width: int,
        height: int,
        fit: "FitMode | None" = None,
        letterbox_color: str | None = None,
        position: "Position | None" = None,
        name: str | None = None,
    ) -> "ImageObject[FormatT]":
        return self._bound_client().resize(
            image_id=self.id,
            width=width,
            height=height,
            fit=fit,
            letterbox_color=letterbox_color,
            position=position,
            name=name,
        )

    def rotate(
        self,
        *,
        angle: float,
        unit: "RotationUnit | None" = None,
        background_color: str | None = None,
        name: str | None = None,
    ) -> "ImageObject[FormatT]":
        return self._bound_client().rotate(
            image_id=self.id,
            angle=angle,
            unit=unit,
            background_color=background_color,
            name=name,
        )


def image_model_for(format: str) -> type[ImageObject[Any]]:
    """Return the handle model narrowed to `format` when it is a supported format.

    Responses validated with the narrowed model must report that exact format.
    Unknown formats are left to the API to reject.
    """
    if format not in SUPPORTED_FORMATS:
        return ImageObject
    return ImageObject[Literal[format]]  # type: ignore[valid-type]
