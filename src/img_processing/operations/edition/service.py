"""Edition operations: color modulation, blur and background removal."""

from typing import Literal

from img_processing.core.models.image import ImageObject, image_model_for
from img_processing.core.utils.constants import LOSSLESS_FORMAT
from img_processing.operations.base import BaseService, Number

from .models import BlurRequest, ModulateRequest, RemoveBackgroundRequest


class EditionService(BaseService):
    def modulate(
        self,
        *,
        image_id: str,
        brightness: Number | None = None,
        saturation: Number | None = None,
        hue: Number | None = None,
        lightness: Number | None = None,
        name: str | None = None,
    ) -> ImageObject:
        """Adjust the brightness, saturation, hue and lightness of an image.

        Brightness is the amount of light in the image, saturation the
        intensity of its colors and hue the rotation of its colors around
        the color wheel.
        """
        request = ModulateRequest(
            brightness=brightness,
            saturation=saturation,
            hue=hue,
            lightness=lightness,
            name=name,
        )
        return self._image_operation(image_id, "modulate", request)

    def blur(
        self,
        *,
        image_id: str,
        sigma: Number | None = None,
        name: str | None = None,
    ) -> ImageObject:
        return self._image_operation(image_id, "blur", BlurRequest(sigma=sigma, name=name))

    def remove_background(
        self,
        *,
        image_id: str,
        name: str | None = None,
    ) -> ImageObject[Literal["png"]]:
        """Remove the background of an image.

        The result is always a PNG, the only supported format keeping the
        alpha channel the transparent background needs.
        """
        return self._image_operation(
            image_id,
            "remove-background",
            RemoveBackgroundRequest(name=name),
            model=image_model_for(LOSSLESS_FORMAT),
        )
