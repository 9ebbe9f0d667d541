"""Access operations: listing, fetching, downloading, publishing and deleting images."""

from urllib.parse import urlsplit

from aws_lambda_powertools import Logger

from img_processing.core.models.image import ImageObject
from img_processing.core.models.pagination import PaginatedImages
from img_processing.core.utils.constants import IMAGES_PATH, SERVICE_NAME, image_path
from img_processing.operations.base import BaseService

from .models import ListImagesRequest

logger = Logger(service=SERVICE_NAME, utc=True)


class AccessService(BaseService):
    """Operations that read or change the visibility of existing images."""

    def list_images(self, *, take: int | None = None, from_: str | None = None) -> PaginatedImages:
        """List images, newest first.

        Args:
            take: Page size, server default when omitted
            from_: Opaque cursor, first page when omitted

        Returns:
            The requested page. Use `next()` / `previous()` to navigate.
        """
        params = ListImagesRequest(take=take, from_=from_).to_payload()
        return self._request(
            lambda: self._adapter.get(IMAGES_PATH, params=params),
            model=PaginatedImages,
        )

    def go_to_page(self, *, page: str) -> PaginatedImages:
        """Fetch the page behind a link taken from a previous listing.

        Only the path and query of the link are kept and resolved against
        this client's base URL, so the API key is never sent to another host.
        """
        path = self._relative_link(page)
        logger.debug("Fetching page", extra={"path": path})
        return self._request(lambda: self._adapter.get(path), model=PaginatedImages)

    def get_image(self, *, image_id: str) -> ImageObject:
        return self._image_request(lambda: self._adapter.get(image_path(image_id)))

    def download(self, *, image_id: str) -> bytes:
        """Download the binary content of an image."""
        return self._transport.execute_binary(
            lambda: self._adapter.get(image_path(image_id, "download"))
        )

    def publish(self, *, image_id: str) -> ImageObject:
        """Make an image public. The returned image carries its public `url`."""
        published = self._image_request(
            lambda: self._adapter.post(image_path(image_id, "publish"))
        )
        logger.info("Image published", extra={"image_id": image_id})
        return published

    def unpublish(self, *, image_id: str) -> ImageObject:
        """Make a public image private again. The returned image has no `url`."""
        unpublished = self._image_request(
            lambda: self._adapter.post(image_path(image_id, "unpublish"))
        )
        logger.info("Image unpublished", extra={"image_id": image_id})
        return unpublished

    def delete_image(self, *, image_id: str) -> None:
        """Delete an image.

        Deleting an already deleted image is answered by the API; the client
        does not make it idempotent.
        """
        self._transport.execute_no_content(lambda: self._adapter.delete(image_path(image_id)))
        logger.info("Image deleted", extra={"image_id": image_id})

    def _relative_link(self, link: str) -> str:
        """Strip scheme, host and base path from a pagination link."""
        parts = urlsplit(link)
        path = parts.path.lstrip("/")

        base_path = urlsplit(self._adapter.base_url).path.lstrip("/")
        if base_path and path.startswith(base_path):
            path = path[len(base_path) :]

        if parts.query:
            path = f"{path}?{parts.query}"
        return path
