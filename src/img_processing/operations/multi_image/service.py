"""Operations combining several images."""

from collections.abc import Sequence
from typing import Any

from img_processing.core.models.image import ImageObject
from img_processing.operations.base import BaseService

from .models import Watermark, WatermarkRequest


class MultiImageService(BaseService):
    def watermark(
        self,
        *,
        image_id: str,
        watermarks: Sequence[Watermark | dict[str, Any]],
        name: str | None = None,
    ) -> ImageObject:
        """Apply image watermarks to an image.

        Each watermark references another image by id, so upload and
        transform the watermark first, then place it with `left` / `top`.
        """
        request = WatermarkRequest.model_validate(
            {"watermarks": list(watermarks), "name": name}
        )
        return self._image_operation(image_id, "watermark", request)
