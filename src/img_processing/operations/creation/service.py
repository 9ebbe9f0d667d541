"""Image creation operations: upload, download from URL and generation."""

import os

from aws_lambda_powertools import Logger

from img_processing.core.models.image import ImageObject
from img_processing.core.utils.constants import IMAGES_PATH, IMAGINE_PATH, SERVICE_NAME, UPLOAD_PATH
from img_processing.operations.base import BaseService, Number

from .models import CreateImageFromUrlRequest, ImageFile, ImagineRequest, UploadImageRequest

logger = Logger(service=SERVICE_NAME, utc=True)

ImageSource = str | os.PathLike[str] | bytes | bytearray | memoryview | ImageFile


class CreationService(BaseService):
    """Operations that create a new image from outside content.

    Creating an image is the first step of every workflow: the returned
    `ImageObject` is then transformed, analysed or published.
    """

    def upload_image(self, *, image: ImageSource, name: str | None = None) -> ImageObject:
        """Create an image by uploading its content.

        Args:
            image: A filesystem path, raw bytes, or a pre-built `ImageFile`.
                Paths and bytes get their media type sniffed from the
                content; an `ImageFile` is sent with its declared type.
            name: Name of the new image

        Returns:
            The created image

        Raises:
            ValidationError: If the API rejects the name or the content
        """
        request = UploadImageRequest(name=name, image=self._to_image_file(image))

        logger.debug(
            "Uploading image",
            extra={
                "image_name": name,
                "mime_type": request.image.mime_type,
                "size": len(request.image.content),
            },
        )

        created = self._image_request(
            lambda: self._adapter.post(
                UPLOAD_PATH,
                data=request.form_fields(),
                files=request.files(),
            )
        )
        logger.info("Image uploaded", extra={"image_id": created.id})
        return created

    def create_image_from_url(self, *, url: str, name: str | None = None) -> ImageObject:
        """Create an image by letting the API download it from `url`.

        Allowed origins are enforced by the API: IMG Processing Storage,
        Amazon S3, Azure Blob Storage, Cloudflare R2, Dropbox, Google Cloud
        Storage, Google Drive and OneDrive.
        """
        request = CreateImageFromUrlRequest(url=url, name=name)
        created = self._image_request(
            lambda: self._adapter.post(IMAGES_PATH, json=request.to_payload())
        )
        logger.info("Image created from URL", extra={"image_id": created.id})
        return created

    def imagine(
        self,
        *,
        prompt: str,
        name: str | None = None,
        negative_prompt: str | None = None,
        seed: Number | None = None,
    ) -> ImageObject:
        """Generate a new image from a text prompt.

        `seed` must be an integer; the API rejects fractional seeds.
        """
        request = ImagineRequest(
            prompt=prompt,
            negative_prompt=negative_prompt,
            name=name,
            seed=seed,
        )
        created = self._image_request(
            lambda: self._adapter.post(IMAGINE_PATH, json=request.to_payload())
        )
        logger.info("Image generated", extra={"image_id": created.id})
        return created

    @staticmethod
    def _to_image_file(image: ImageSource) -> ImageFile:
        if isinstance(image, ImageFile):
            return image
        if isinstance(image, (bytes, bytearray, memoryview)):
            return ImageFile.from_bytes(bytes(image))
        return ImageFile.from_path(image)
