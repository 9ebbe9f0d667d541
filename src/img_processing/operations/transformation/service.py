"""Geometric transformation operations."""

from img_processing.core.models.image import ImageObject, TargetFormatT, image_model_for
from img_processing.operations.base import BaseService, Number

from .models import (
    ConvertRequest,
    CropRequest,
    FitMode,
    MirrorMode,
    MirrorRequest,
    Position,
    ResizeRequest,
    RotateRequest,
    RotationUnit,
)


class TransformationService(BaseService):
    """Operations changing the geometry or the encoding of an image.

    Every operation creates a new image; the source image is left untouched.
    """

    def convert(
        self,
        *,
        image_id: str,
        format: TargetFormatT,
        quality: Number | None = None,
        name: str | None = None,
    ) -> ImageObject[TargetFormatT]:
        """Create a new image in another format.

        - **jpeg**: lossy compression, small files, some quality loss.
        - **png**: lossless compression with transparency support.
        - **webp**: modern lossy and lossless compression, smaller than both.

        The returned image is typed to the requested format.
        """
        request = ConvertRequest(format=format, quality=quality, name=name)
        return self._image_operation(
            image_id,
            "convert",
            request,
            model=image_model_for(format),
        )

    def crop(
        self,
        *,
        image_id: str,
        x1: Number,
        y1: Number,
        x2: Number,
        y2: Number,
        name: str | None = None,
    ) -> ImageObject:
        request = CropRequest(x1=x1, y1=y1, x2=x2, y2=y2, name=name)
        return self._image_operation(image_id, "crop", request)

    def mirror(self, *, image_id: str, mode: MirrorMode, name: str | None = None) -> ImageObject:
        """Mirror an image.

        `horizontal` mirrors along the vertical axis, `vertical` along the
        horizontal axis and `both` along both axes.
        """
        return self._image_operation(image_id, "mirror", MirrorRequest(mode=mode, name=name))

    def resize(
        self,
        *,
        image_id: str,
        width: Number,
        height: Number,
        fit: FitMode | None = None,
        letterbox_color: str | None = None,
        position: Position | None = None,
        name: str | None = None,
    ) -> ImageObject:
        """Create a resized copy of an image.

        Fit modes:
        - `fill`: stretch to the exact dimensions (default)
        - `contain`: keep the aspect ratio and letterbox with `letterbox_color`
        - `cover`: keep the aspect ratio and crop the overflow

        `position` sets the gravity for `contain` and `cover`.
        """
        request = ResizeRequest(
            width=width,
            height=height,
            fit=fit,
            letterbox_color=letterbox_color,
            position=position,
            name=name,
        )
        return self._image_operation(image_id, "resize", request)

    def rotate(
        self,
        *,
        image_id: str,
        angle: Number,
        unit: RotationUnit | None = None,
        background_color: str | None = None,
        name: str | None = None,
    ) -> ImageObject:
        request = RotateRequest(
            angle=angle,
            unit=unit,
            background_color=background_color,
            name=name,
        )
        return self._image_operation(image_id, "rotate", request)
